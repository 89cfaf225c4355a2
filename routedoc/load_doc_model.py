"""Loading the documentation model from YAML files.

Each file holds a `classes` list. Annotation element values are kept as the
raw annotation-value text a Java doc tool prints (`"/pets"`,
`org.springframework.web.bind.annotation.RequestMethod.GET`); a YAML list is
rendered as array text, `{"/a", "/b"}`. Interfaces are referenced by
qualified name and linked across all loaded files.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from routedoc.annotation_ref import AnnotationRef
from routedoc.documented_class import DocumentedClass
from routedoc.documented_method import DocTag, DocumentedMethod, ParamDoc, ThrowsDoc

logger = logging.getLogger(__name__)

MODEL_SUFFIXES = (".yml", ".yaml")


class DocModelError(ValueError):
    """Raised when model files do not describe a usable class tree."""


def iter_model_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into their (sorted) YAML files, keep files as given."""
    files: list[Path] = []
    for p in paths:
        if p.is_dir():
            files.extend(
                sorted(
                    f
                    for f in p.rglob("*")
                    if f.is_file() and f.suffix in MODEL_SUFFIXES
                )
            )
        else:
            files.append(p)
    return files


def annotation_text(value: object) -> str:
    """Render a YAML value as annotation-value text."""
    if isinstance(value, list):
        items = [annotation_text(v) for v in value]
        if len(items) == 1:
            return items[0]
        return "{" + ", ".join(items) + "}"
    if isinstance(value, bool):
        return str(value).lower()
    if value is None:
        return ""
    return str(value)


def _text(v: object) -> str:
    if v is None:
        return ""
    if isinstance(v, list):
        return "\n".join(str(x) for x in v if x is not None).strip()
    return str(v).strip()


def _entries(raw: object, what: str, owner: str) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(x, dict) for x in raw):
        msg = f"{owner}: '{what}' must be a list of mappings"
        raise DocModelError(msg)
    return raw


def _annotations(raw: object, owner: str) -> tuple[AnnotationRef, ...]:
    refs = []
    for a in _entries(raw, "annotations", owner):
        type_name = _text(a.get("type"))
        if not type_name:
            msg = f"{owner}: annotation without a type"
            raise DocModelError(msg)
        values = a.get("values") or {}
        if not isinstance(values, dict):
            msg = f"{owner}: values of {type_name} must be a mapping"
            raise DocModelError(msg)
        refs.append(
            AnnotationRef(
                type_name=type_name,
                values=tuple((str(k), annotation_text(v)) for k, v in values.items()),
            )
        )
    return tuple(refs)


def _tag_name(name: object) -> str:
    tag = _text(name)
    return tag if tag.startswith("@") else f"@{tag}"


def _method(raw: dict[str, Any], owner: str) -> DocumentedMethod:
    name = _text(raw.get("name"))
    if not name:
        msg = f"{owner}: method without a name"
        raise DocModelError(msg)
    where = f"{owner}.{name}"
    return DocumentedMethod(
        name=name,
        signature=_text(raw.get("signature")) or "()",
        annotations=_annotations(raw.get("annotations"), where),
        comment=_text(raw.get("comment")),
        params=tuple(
            ParamDoc(name=_text(p.get("name")), comment=_text(p.get("comment")))
            for p in _entries(raw.get("params"), "params", where)
        ),
        tags=tuple(
            DocTag(name=_tag_name(t.get("name")), text=_text(t.get("text")))
            for t in _entries(raw.get("tags"), "tags", where)
        ),
        throws=tuple(
            ThrowsDoc(
                exception_type=_text(t.get("exceptionType")),
                comment=_text(t.get("comment")),
            )
            for t in _entries(raw.get("throws"), "throws", where)
        ),
    )


def load_model_file(path: Path) -> list[dict[str, Any]]:
    """Load the raw class entries of one model file."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(doc, dict):
        msg = f"{path}: expected a mapping with a 'classes' list"
        raise DocModelError(msg)
    return _entries(doc.get("classes"), "classes", str(path))


def link_classes(raw_classes: dict[str, dict[str, Any]]) -> list[DocumentedClass]:
    """Build DocumentedClass records, resolving interfaces by qualified name."""
    built: dict[str, DocumentedClass] = {}
    in_progress: set[str] = set()

    def build(name: str) -> DocumentedClass:
        if name in built:
            return built[name]
        if name in in_progress:
            msg = f"Interface cycle through {name}"
            raise DocModelError(msg)
        in_progress.add(name)
        raw = raw_classes[name]
        interfaces = []
        for iface in raw.get("interfaces") or []:
            iface_name = _text(iface)
            if iface_name not in raw_classes:
                logger.debug("%s: interface %s is not in the model", name, iface_name)
                continue
            interfaces.append(build(iface_name))
        cls = DocumentedClass(
            qualified_name=name,
            annotations=_annotations(raw.get("annotations"), name),
            methods=tuple(
                _method(m, name) for m in _entries(raw.get("methods"), "methods", name)
            ),
            interfaces=tuple(interfaces),
        )
        in_progress.discard(name)
        built[name] = cls
        return cls

    return [build(name) for name in raw_classes]


def load_doc_model(files: Iterable[Path]) -> list[DocumentedClass]:
    """Load and link every class declared in the given model files.

    A class declared again in a later file replaces the earlier declaration.
    """
    raw_classes: dict[str, dict[str, Any]] = {}
    count = 0
    for f in files:
        count += 1
        for raw in load_model_file(f):
            name = _text(raw.get("qualifiedName"))
            if not name:
                msg = f"{f}: class without a qualifiedName"
                raise DocModelError(msg)
            raw_classes[name] = raw
    logger.info("Loaded %d classes from %d model file(s)", len(raw_classes), count)
    return link_classes(raw_classes)
