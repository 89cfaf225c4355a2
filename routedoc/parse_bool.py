"""Parsing of true/false option and config values."""


def parse_bool(value: str) -> bool:
    """Parse a flag; only `true` (any case) is true."""
    return value.strip().lower() == "true"
