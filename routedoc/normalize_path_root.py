"""Normalization of class level path prefixes."""

from routedoc.strip_quotes import strip_quotes


def normalize_path_root(raw: str) -> str:
    """Turn a raw `value`/`path` text into a `/prefix` without trailing slash."""
    value = strip_quotes(raw)
    if not value.startswith("/"):
        value = "/" + value
    if value.endswith("/"):
        value = value[:-1]
    return value
