"""Writing a key/value mapping in the Java `.properties` text format."""

import time
from collections.abc import Mapping
from typing import TextIO

# Escapes shared by keys and values; space and non-ASCII are handled apart.
SPECIAL_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}

ENCODING = "iso-8859-1"


def _unicode_escape(ch: str) -> str:
    """Escape a character as one or two `\\uXXXX` UTF-16 code units."""
    data = ch.encode("utf-16-be")
    return "".join(
        f"\\u{int.from_bytes(data[i : i + 2], 'big'):04X}"
        for i in range(0, len(data), 2)
    )


def escape(text: str, *, is_key: bool) -> str:
    """Escape a key or value for a properties line."""
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if is_key or i == 0 else " ")
        elif ch in SPECIAL_ESCAPES:
            out.append(SPECIAL_ESCAPES[ch])
        elif ch < " " or ch > "~":
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return "".join(out)


def format_comment(comment: str) -> list[str]:
    """Render a comment as `#` lines; lines already starting `#`/`!` are kept."""
    lines = []
    for line in comment.splitlines() or [""]:
        escaped = "".join(
            ch if ch <= "\u00ff" else _unicode_escape(ch) for ch in line
        )
        if not escaped.startswith(("#", "!")) or not lines:
            escaped = "#" + escaped
        lines.append(escaped)
    return lines


def store_properties(
    properties: Mapping[str, str],
    stream: TextIO,
    comment: str | None = None,
    *,
    timestamp: str | None = None,
) -> None:
    """Write the header comment, a timestamp line, then sorted `key=value` lines."""
    lines: list[str] = []
    if comment is not None:
        lines.extend(format_comment(comment))
    lines.append("#" + (timestamp or time.strftime("%a %b %d %H:%M:%S %Z %Y")))
    for key in sorted(properties):
        lines.append(
            f"{escape(key, is_key=True)}={escape(properties[key], is_key=False)}"
        )
    stream.write("\n".join(lines) + "\n")
    # Buffered write errors must surface here, not on close.
    stream.flush()
