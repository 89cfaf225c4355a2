"""Orchestration of one extraction pass: model in, properties file out."""

import argparse
import contextlib
import logging
from pathlib import Path
from typing import Any, TextIO

from routedoc.extract_route_docs import extract_route_docs
from routedoc.load_doc_model import iter_model_files, load_doc_model
from routedoc.parse_bool import parse_bool
from routedoc.store_properties import ENCODING, store_properties

logger = logging.getLogger(__name__)


def output_file(class_dir: str, rel_path: str) -> Path:
    """Resolve the properties file location below the class directory."""
    return Path(class_dir) / rel_path


def run_extraction(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the extraction and write the properties file.

    Returns 0 on success and 1 when no output location was given or the
    output could not be written.
    """
    if not args.classdir:
        logger.error("No output location was specified")
        return 1

    model_files = iter_model_files(args.model)
    if not model_files:
        msg = f"No model files found under: {', '.join(map(str, args.model))}"
        raise SystemExit(msg)
    classes = load_doc_model(model_files)

    include_exception_docs = args.exception_ref
    if include_exception_docs is None:
        configured = config["exception_ref"]
        if isinstance(configured, str):
            configured = parse_bool(configured)
        include_exception_docs = bool(configured)

    out = output_file(args.classdir, config["output"]["path"])
    print(f"Writing output to {out}")
    stream: TextIO | None = None
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        stream = out.open("w", encoding=ENCODING, newline="\n")
        properties = extract_route_docs(
            classes, include_exception_docs=include_exception_docs
        )
        store_properties(properties, stream, config["output"]["comment"])
    except OSError as exc:
        logger.error("Could not write %s: %s", out, exc)
        return 1
    finally:
        if stream is not None:
            with contextlib.suppress(OSError):
                stream.close()

    print(f"Wrote {len(properties)} route documentation entries")
    return 0
