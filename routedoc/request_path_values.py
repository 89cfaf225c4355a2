"""Extraction of the path fragments declared on a mapping annotation."""

import re

from routedoc.annotation_value import annotation_value
from routedoc.doc_model import AnnotationView
from routedoc.mapping_tables import PATH, VALUE

ARRAY_EDGE_RE = re.compile(r"^\{|\}$")


def request_path_values(annotation: AnnotationView) -> list[str]:
    """Split `{"/a", "/b"}` style annotation text into its raw fragments.

    Returns an empty list when the annotation declares neither `value` nor
    `path`. Fragments keep their quotes; see compose_route_path.
    """
    raw = annotation_value(annotation, VALUE, PATH)
    if raw is None:
        return []
    return ARRAY_EDGE_RE.sub("", raw).split(", ")
