"""Resolution of the path prefix and default verb declared on a class."""

import logging

from routedoc.annotation_value import annotation_value
from routedoc.class_route import ClassRoute
from routedoc.doc_model import ClassView
from routedoc.mapping_tables import METHOD, PATH, REQUEST_MAPPING, VALUE
from routedoc.normalize_path_root import normalize_path_root

logger = logging.getLogger(__name__)


def resolve_class_route(cls: ClassView) -> ClassRoute:
    """Read the class level RequestMapping, if any, into a ClassRoute."""
    for annotation in cls.annotations:
        if annotation.type_name != REQUEST_MAPPING:
            continue
        raw_path = annotation_value(annotation, VALUE, PATH)
        route = ClassRoute(
            path_prefix=normalize_path_root(raw_path) if raw_path is not None else "",
            default_verb=annotation_value(annotation, METHOD),
        )
        logger.debug(
            "%s: prefix=%r default verb=%r",
            cls.qualified_name,
            route.path_prefix,
            route.default_verb,
        )
        # Only one class level mapping is expected.
        return route
    return ClassRoute()
