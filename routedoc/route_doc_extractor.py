"""Extract route documentation from a parsed doc model into a properties file.

For every class carrying Spring web mapping annotations, the effective HTTP
route of each endpoint method is derived and its description, parameter,
return and (optionally) exception documentation is written under
`<path>.<VERB>.<field>` keys to `<classdir>/META-INF/springfox.javadoc.properties`.
"""

import argparse
import logging
from pathlib import Path
from typing import Any

import yaml

from routedoc.load_config import load_config
from routedoc.load_doc_model import DocModelError
from routedoc.parse_bool import parse_bool
from routedoc.run_extraction import run_extraction

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

CLASSDIR_OPTION = "-classdir"
EXCEPTION_REF_OPTION = "-exceptionRef"


class SingleUse(argparse.Action):
    """Store action that rejects a repeated option."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is not None:
            parser.error(f"Only one {option_string} option allowed.")
        setattr(namespace, self.dest, values)


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        prog="routedoc",
        description=(
            "Write Spring endpoint documentation from a doc model to a "
            "springfox javadoc properties file."
        ),
        allow_abbrev=False,
    )
    ap.add_argument(
        "model",
        type=Path,
        nargs="+",
        help="Documentation model YAML files or directories containing them",
    )
    ap.add_argument(
        CLASSDIR_OPTION,
        dest="classdir",
        action=SingleUse,
        required=True,
        metavar="DIR",
        help="Classes directory; output goes to DIR/META-INF/",
    )
    ap.add_argument(
        EXCEPTION_REF_OPTION,
        dest="exception_ref",
        action=SingleUse,
        type=parse_bool,
        metavar="true|false",
        help="Generate references to exception classes (default: false)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    return ap


def main() -> int:
    """Run the extraction process."""
    args = build_parser().parse_args()
    try:
        config = load_config(args.config)
    except yaml.YAMLError as exc:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid config file %s: %s", args.config, exc)
        return 1
    level = str(config.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Unknown log_level in config: %s", config.get("log_level"))
        return 1
    logging.basicConfig(level=level, format=LOG_FORMAT)
    try:
        return run_extraction(args, config)
    except (DocModelError, yaml.YAMLError) as exc:
        logger.error("Invalid documentation model: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
