"""Lookup of a same-signature method on implemented interfaces."""

from collections.abc import Sequence

from routedoc.doc_model import ClassView, MethodView


def find_interface_method(
    interfaces: Sequence[ClassView] | None,
    method: MethodView,
) -> MethodView | None:
    """Depth-first search for an interface method with equal name and signature.

    Each interface's own methods are checked before its super-interfaces, and
    a whole branch is exhausted before the next sibling. The hierarchy is
    assumed to be acyclic.
    """
    for iface in interfaces or ():
        for candidate in iface.methods:
            if (
                candidate.name == method.name
                and candidate.signature == method.signature
            ):
                return candidate
        found = find_interface_method(iface.interfaces, method)
        if found is not None:
            return found
    return None
