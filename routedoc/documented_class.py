"""Data model for documented classes and interfaces."""

from dataclasses import dataclass

from routedoc.annotation_ref import AnnotationRef
from routedoc.documented_method import DocumentedMethod


@dataclass(frozen=True)
class DocumentedClass:
    """Represents a documented class or interface."""

    qualified_name: str
    annotations: tuple[AnnotationRef, ...] = ()
    methods: tuple[DocumentedMethod, ...] = ()
    interfaces: tuple["DocumentedClass", ...] = ()
