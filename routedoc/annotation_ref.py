"""Data model for annotations found in the documentation model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnnotationRef:
    """An annotation with its element values kept as raw annotation-value text."""

    type_name: str  # fully qualified, e.g. org.springframework...GetMapping
    values: tuple[tuple[str, str], ...] = ()
