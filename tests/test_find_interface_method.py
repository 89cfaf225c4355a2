"""Tests for the interface documentation lookup."""

from routedoc.documented_class import DocumentedClass
from routedoc.documented_method import DocumentedMethod
from routedoc.find_interface_method import find_interface_method


def test_matches_name_and_signature() -> None:
    """Only a method with the same name and signature matches."""
    documented = DocumentedMethod(name="foo", signature="(int)", comment="does X")
    iface = DocumentedClass(
        qualified_name="I",
        methods=(
            DocumentedMethod(name="bar", signature="(int)", comment="nope"),
            documented,
        ),
    )
    found = find_interface_method([iface], DocumentedMethod("foo", "(int)"))
    assert found is documented
    assert find_interface_method([iface], DocumentedMethod("foo", "(String)")) is None


def test_empty_or_missing_interfaces() -> None:
    """No interfaces means no match."""
    method = DocumentedMethod(name="foo", signature="()")
    assert find_interface_method([], method) is None
    assert find_interface_method(None, method) is None


def test_depth_first_order() -> None:
    """A super-interface is searched before the next sibling interface."""
    deep = DocumentedMethod(name="foo", signature="()", comment="from super")
    sibling = DocumentedMethod(name="foo", signature="()", comment="from sibling")
    super_iface = DocumentedClass(qualified_name="Super", methods=(deep,))
    first = DocumentedClass(qualified_name="First", interfaces=(super_iface,))
    second = DocumentedClass(qualified_name="Second", methods=(sibling,))

    found = find_interface_method([first, second], DocumentedMethod("foo", "()"))
    assert found is deep


def test_direct_methods_before_super_interfaces() -> None:
    """An interface's own method wins over its super-interface's."""
    own = DocumentedMethod(name="foo", signature="()", comment="own")
    inherited = DocumentedMethod(name="foo", signature="()", comment="inherited")
    iface = DocumentedClass(
        qualified_name="I",
        methods=(own,),
        interfaces=(DocumentedClass(qualified_name="J", methods=(inherited,)),),
    )
    assert find_interface_method([iface], DocumentedMethod("foo", "()")) is own
