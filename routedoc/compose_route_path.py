"""Composition of the `<path>.<VERB>` part of a route key."""

from routedoc.strip_quotes import strip_quotes


def compose_route_path(path_prefix: str, fragment: str, verb: str) -> str:
    """Join the class prefix, one method path fragment and the verb."""
    value = strip_quotes(fragment).replace("\\\\", "\\")
    if not value.startswith("/"):
        value = "/" + value
    return f"{path_prefix}{value}.{verb}"
