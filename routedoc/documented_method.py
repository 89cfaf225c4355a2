"""Data models for documented methods and their block tags."""

from dataclasses import dataclass

from routedoc.annotation_ref import AnnotationRef


@dataclass(frozen=True)
class ParamDoc:
    """Represents an `@param` entry."""

    name: str
    comment: str


@dataclass(frozen=True)
class DocTag:
    """Represents a block tag; name keeps its leading `@`."""

    name: str
    text: str


@dataclass(frozen=True)
class ThrowsDoc:
    """Represents an `@throws` / `@exception` entry."""

    exception_type: str
    comment: str


@dataclass(frozen=True)
class DocumentedMethod:
    """Represents a documented method declaration."""

    name: str
    signature: str  # parameter types, e.g. "(int, java.lang.String)"
    annotations: tuple[AnnotationRef, ...] = ()
    comment: str = ""
    params: tuple[ParamDoc, ...] = ()
    tags: tuple[DocTag, ...] = ()
    throws: tuple[ThrowsDoc, ...] = ()
