"""Emission of the route keys for a single documented method."""

import logging
from collections.abc import Sequence

from routedoc.class_route import ClassRoute
from routedoc.compose_route_path import compose_route_path
from routedoc.doc_model import ClassView, MethodView, TagView
from routedoc.find_interface_method import find_interface_method
from routedoc.mapping_tables import RETURN_TAG, is_mapping
from routedoc.request_path_values import request_path_values
from routedoc.resolve_request_method import resolve_request_method
from routedoc.save_property import save_property

logger = logging.getLogger(__name__)


def simple_type_name(type_name: str) -> str:
    """Strip the package from a qualified exception type name."""
    return type_name.rsplit(".", 1)[-1]


def return_tag(tags: Sequence[TagView]) -> TagView | None:
    """Return the first `@return` tag."""
    for tag in tags:
        if tag.name == RETURN_TAG:
            return tag
    return None


def documentation_source(
    method: MethodView,
    interfaces: Sequence[ClassView],
) -> MethodView:
    """Pick the method whose comments describe the route.

    A method without comment text inherits the documentation of the matching
    interface method; otherwise, or when nothing matches, the method itself.
    """
    if method.comment:
        return method
    inherited = find_interface_method(interfaces, method)
    if inherited is None:
        return method
    logger.debug("%s%s: using interface documentation", method.name, method.signature)
    return inherited


def emit_route_docs(
    store: dict[str, str],
    route: str,
    source: MethodView,
    *,
    include_exception_docs: bool = False,
) -> None:
    """Write notes, params, return and optionally throws keys for a route."""
    save_property(store, f"{route}.notes", source.comment)
    for param in source.params:
        save_property(store, f"{route}.param.{param.name}", param.comment)
    tag = return_tag(source.tags)
    if tag is not None:
        save_property(store, f"{route}.return", tag.text)
    if include_exception_docs:
        for i, throws in enumerate(source.throws):
            value = f"{simple_type_name(throws.exception_type)}-{throws.comment}"
            save_property(store, f"{route}.throws.{i}", value)


def process_method(
    store: dict[str, str],
    method: MethodView,
    class_route: ClassRoute,
    interfaces: Sequence[ClassView] = (),
    *,
    include_exception_docs: bool = False,
) -> int:
    """Emit keys for every route the method's mapping annotations declare.

    interfaces are the containing class's directly implemented interfaces.
    Returns the number of routes emitted.
    """
    routes = 0
    source: MethodView | None = None
    for annotation in method.annotations:
        if not is_mapping(annotation.type_name):
            continue
        verb = resolve_request_method(annotation, class_route.default_verb)
        if verb is None:
            logger.debug(
                "%s%s: no HTTP verb for %s, skipping",
                method.name,
                method.signature,
                annotation.type_name,
            )
            continue
        for fragment in request_path_values(annotation):
            route = compose_route_path(class_route.path_prefix, fragment, verb)
            if source is None:
                source = documentation_source(method, interfaces)
            emit_route_docs(
                store,
                route,
                source,
                include_exception_docs=include_exception_docs,
            )
            routes += 1
    return routes
