"""Data model for the route information contributed by a class."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassRoute:
    """Path prefix and default verb declared at class level."""

    path_prefix: str = ""  # "" or "/segment", never a trailing slash
    default_verb: str | None = None  # raw annotation-value text, not yet mapped
