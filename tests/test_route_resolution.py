"""Tests for class prefixes, path fragments and verb resolution."""

from routedoc.annotation_ref import AnnotationRef
from routedoc.class_route import ClassRoute
from routedoc.compose_route_path import compose_route_path
from routedoc.documented_class import DocumentedClass
from routedoc.mapping_tables import (
    DELETE_MAPPING,
    GET_MAPPING,
    PATCH_MAPPING,
    POST_MAPPING,
    PUT_MAPPING,
    REQUEST_MAPPING,
    is_mapping,
)
from routedoc.normalize_path_root import normalize_path_root
from routedoc.request_path_values import request_path_values
from routedoc.resolve_class_route import resolve_class_route
from routedoc.resolve_request_method import resolve_request_method

RM = "org.springframework.web.bind.annotation.RequestMethod"


def test_normalize_path_root() -> None:
    """Test quote stripping and slash normalization of class prefixes."""
    assert normalize_path_root('"/pets"') == "/pets"
    assert normalize_path_root('"pets"') == "/pets"
    assert normalize_path_root('"/pets/"') == "/pets"
    assert normalize_path_root('"/"') == ""
    assert normalize_path_root("api/v1") == "/api/v1"
    # An empty value means no prefix, so "/x" composes to "/x", not "//x".
    assert normalize_path_root('""') == ""
    assert compose_route_path(normalize_path_root('""'), '"/x"', "GET") == "/x.GET"


def test_normalize_path_root_idempotent() -> None:
    """Normalizing an already normalized prefix changes nothing."""
    for path in ["/pets", "/api/v1", "/a-b/{id}"]:
        once = normalize_path_root(path)
        assert once == path
        assert normalize_path_root(once) == once


def test_resolve_class_route() -> None:
    """Test reading prefix and default verb from the class RequestMapping."""
    cls = DocumentedClass(
        qualified_name="com.example.PetController",
        annotations=(
            AnnotationRef("org.springframework.stereotype.Controller"),
            AnnotationRef(
                REQUEST_MAPPING,
                (("value", '"/pets/"'), ("method", f"{RM}.POST")),
            ),
            AnnotationRef(REQUEST_MAPPING, (("path", '"/ignored"'),)),
        ),
    )
    route = resolve_class_route(cls)
    assert route == ClassRoute(path_prefix="/pets", default_verb=f"{RM}.POST")


def test_resolve_class_route_path_alias_and_missing() -> None:
    """Test the `path` alias and classes without a mapping."""
    cls = DocumentedClass(
        qualified_name="A",
        annotations=(AnnotationRef(REQUEST_MAPPING, (("path", '"owners"'),)),),
    )
    assert resolve_class_route(cls) == ClassRoute(path_prefix="/owners")
    assert resolve_class_route(DocumentedClass(qualified_name="B")) == ClassRoute()


def test_is_mapping() -> None:
    """Only the six Spring mapping annotations are recognized."""
    for name in [
        REQUEST_MAPPING,
        GET_MAPPING,
        POST_MAPPING,
        PUT_MAPPING,
        PATCH_MAPPING,
        DELETE_MAPPING,
    ]:
        assert is_mapping(name)
    assert not is_mapping("org.springframework.web.bind.annotation.ResponseBody")
    assert not is_mapping("GetMapping")


def test_request_path_values() -> None:
    """Test splitting annotation array text into fragments."""
    assert request_path_values(
        AnnotationRef(GET_MAPPING, (("value", '{"/a", "/b"}'),))
    ) == ['"/a"', '"/b"']
    assert request_path_values(AnnotationRef(GET_MAPPING, (("path", '"/x"'),))) == [
        '"/x"'
    ]
    assert request_path_values(
        AnnotationRef(GET_MAPPING, (("produces", '"application/json"'),))
    ) == []


def test_compose_route_path() -> None:
    """Test joining prefix, fragment and verb."""
    assert compose_route_path("/pets", '"/{id}"', "GET") == "/pets/{id}.GET"
    assert compose_route_path("/pets", '"{id}"', "GET") == "/pets/{id}.GET"
    assert compose_route_path("", '"/"', "POST") == "/.POST"
    assert (
        compose_route_path("/files", '"/{name:.+\\\\.txt}"', "GET")
        == "/files/{name:.+\\.txt}.GET"
    )


def test_fixed_verb_mappings_ignore_method() -> None:
    """Fixed-verb annotations win over any method attribute."""
    expected = {
        DELETE_MAPPING: "DELETE",
        GET_MAPPING: "GET",
        PATCH_MAPPING: "PATCH",
        POST_MAPPING: "POST",
        PUT_MAPPING: "PUT",
    }
    for type_name, verb in expected.items():
        plain = AnnotationRef(type_name, (("value", '"/x"'),))
        with_method = AnnotationRef(type_name, (("method", f"{RM}.GET"),))
        assert resolve_request_method(plain, None) == verb
        assert resolve_request_method(with_method, f"{RM}.PUT") == verb


def test_request_mapping_method_table() -> None:
    """Test the RequestMethod constants and the class default fallback."""
    for verb in ["DELETE", "GET", "PATCH", "POST", "PUT"]:
        ann = AnnotationRef(REQUEST_MAPPING, (("method", f"{RM}.{verb}"),))
        assert resolve_request_method(ann, None) == verb

    unknown = AnnotationRef(REQUEST_MAPPING, (("method", f"{RM}.HEAD"),))
    assert resolve_request_method(unknown, f"{RM}.POST") == "POST"
    assert resolve_request_method(unknown, None) is None


def test_request_mapping_without_method_uses_class_default() -> None:
    """A RequestMapping without method inherits the class verb, if any."""
    ann = AnnotationRef(REQUEST_MAPPING, (("value", '"/x"'),))
    assert resolve_request_method(ann, f"{RM}.PATCH") == "PATCH"
    assert resolve_request_method(ann, None) is None
