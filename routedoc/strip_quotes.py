"""Utility for removing the quotes around a string annotation value."""

import re

QUOTE_EDGE_RE = re.compile(r'^"|"$')


def strip_quotes(value: str) -> str:
    """Remove a single leading and a single trailing double quote."""
    return QUOTE_EDGE_RE.sub("", value)
