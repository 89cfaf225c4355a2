"""Extraction of route documentation from a whole documentation model."""

import logging
from collections.abc import Iterable

from routedoc.doc_model import ClassView
from routedoc.process_method import process_method
from routedoc.resolve_class_route import resolve_class_route

logger = logging.getLogger(__name__)


def extract_route_docs(
    classes: Iterable[ClassView],
    *,
    include_exception_docs: bool = False,
) -> dict[str, str]:
    """Build the `<path>.<VERB>.<field>` -> text mapping for all classes."""
    store: dict[str, str] = {}
    for cls in classes:
        class_route = resolve_class_route(cls)
        routes = 0
        for method in cls.methods:
            routes += process_method(
                store,
                method,
                class_route,
                cls.interfaces,
                include_exception_docs=include_exception_docs,
            )
        if routes:
            logger.info("%s: %d route(s)", cls.qualified_name, routes)
    return store
