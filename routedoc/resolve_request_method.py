"""Resolution of the HTTP verb for one mapping annotation occurrence."""

from routedoc.annotation_value import annotation_value
from routedoc.doc_model import AnnotationView
from routedoc.mapping_tables import (
    FIXED_VERB_MAPPINGS,
    METHOD,
    REQUEST_MAPPING,
    REQUEST_METHOD_VERBS,
)


def verb_for(raw_method: str | None) -> str | None:
    """Map `...RequestMethod.GET` style text to `GET`; None when unknown."""
    if raw_method is None:
        return None
    return REQUEST_METHOD_VERBS.get(raw_method)


def resolve_request_method(
    annotation: AnnotationView,
    default_method: str | None,
) -> str | None:
    """Return the verb for the annotation, falling back to the class default.

    default_method is the raw class level `method` text. None means the route
    has no verb and must be skipped.
    """
    type_name = annotation.type_name
    if type_name == REQUEST_MAPPING:
        raw = annotation_value(annotation, METHOD)
        if raw is not None and raw in REQUEST_METHOD_VERBS:
            return REQUEST_METHOD_VERBS[raw]
        return verb_for(default_method)
    if type_name in FIXED_VERB_MAPPINGS:
        return FIXED_VERB_MAPPINGS[type_name]
    return verb_for(default_method)
