"""Storing a documentation value under a route key."""

NEWLINE = "\n"


def sanitize(value: str | None) -> str:
    """Drop newlines; values are written as single properties lines."""
    if not value:
        return ""
    return value.replace(NEWLINE, "")


def save_property(store: dict[str, str], key: str, value: str | None) -> bool:
    """Store the sanitized value unless it is empty. Returns True if stored."""
    text = sanitize(value)
    if not text:
        return False
    store[key] = text
    return True
