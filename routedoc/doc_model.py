"""Read-only accessor interfaces over a parsed documentation model.

The extraction engine only talks to these protocols, so any backend that
exposes the same attributes (the YAML loader in this package, a test double,
a bridge to another parser) can feed it.
"""

from collections.abc import Sequence
from typing import Protocol


class AnnotationView(Protocol):
    """An annotation attached to a class or method."""

    @property
    def type_name(self) -> str: ...

    @property
    def values(self) -> Sequence[tuple[str, str]]: ...


class ParamView(Protocol):
    """A documented parameter (`@param name text`)."""

    @property
    def name(self) -> str: ...

    @property
    def comment(self) -> str: ...


class TagView(Protocol):
    """A block tag such as `@return` or `@since`."""

    @property
    def name(self) -> str: ...

    @property
    def text(self) -> str: ...


class ThrowsView(Protocol):
    """A documented exception (`@throws Type text`)."""

    @property
    def exception_type(self) -> str: ...

    @property
    def comment(self) -> str: ...


class MethodView(Protocol):
    """A documented method declaration."""

    @property
    def name(self) -> str: ...

    @property
    def signature(self) -> str: ...

    @property
    def annotations(self) -> Sequence[AnnotationView]: ...

    @property
    def comment(self) -> str | None: ...

    @property
    def params(self) -> Sequence[ParamView]: ...

    @property
    def tags(self) -> Sequence[TagView]: ...

    @property
    def throws(self) -> Sequence[ThrowsView]: ...


class ClassView(Protocol):
    """A documented class or interface."""

    @property
    def qualified_name(self) -> str: ...

    @property
    def annotations(self) -> Sequence[AnnotationView]: ...

    @property
    def methods(self) -> Sequence[MethodView]: ...

    @property
    def interfaces(self) -> Sequence["ClassView"]: ...
