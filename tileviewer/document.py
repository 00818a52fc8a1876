"""Read prototype documents from JSON or YAML files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .catalog import Catalog, build_catalog
from .errors import MalformedDocument


def load_document(path_like: Any) -> Any:
    """Decode a ``.json``, ``.yaml`` or ``.yml`` file into plain Python data.

    The result is not validated here; :func:`tileviewer.catalog.build_catalog`
    owns the schema.
    """

    path = Path(path_like)
    if not path.exists():
        raise FileNotFoundError(f"Prototype document '{path}' does not exist")

    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedDocument(f"Prototype document '{path}' is not valid UTF-8: {exc}") from exc
    if suffix == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocument(f"Prototype document '{path}' is not valid JSON: {exc}") from exc
    if suffix in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MalformedDocument(f"Prototype document '{path}' is not valid YAML: {exc}") from exc
    raise ValueError(
        f"Unsupported prototype document extension '{path.suffix}'. "
        "Use .json, .yaml, or .yml."
    )


def load_catalog(path_like: Any) -> Catalog:
    """Load a document from disk and build the catalog in one call."""

    return build_catalog(load_document(path_like))


__all__ = ["load_document", "load_catalog"]
