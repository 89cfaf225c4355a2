"""Lookup of a named element value on an annotation."""

from routedoc.doc_model import AnnotationView


def annotation_value(annotation: AnnotationView, *names: str) -> str | None:
    """Return the raw text of the first element whose name is one of names."""
    for name, value in annotation.values:
        if name in names:
            return value
    return None
