"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from routedoc.deep_merge import deep_merge

PROPERTIES_PATH = "META-INF/springfox.javadoc.properties"

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        # Relative to -classdir; the consuming plugin reads this location.
        "path": PROPERTIES_PATH,
        "comment": "Springfox javadoc properties",
    },
    "exception_ref": False,
    "log_level": "WARNING",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
