"""Structured loader for viewer settings."""
from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass


# //1.- Capture where documents and meshes live plus the display cadence.
@dataclass(frozen=True)
class ViewerSettings:
    document_path: str
    model_directory: str
    cycle_interval_s: float = 5.0
    neighbor_spacing: float = 3.0


# //2.- Resolve the bundled configuration directory next to this module.
def _default_config_directory() -> str:
    return os.path.join(os.path.dirname(__file__), "config")


# //3.- Load a single JSON configuration file and coerce to dictionary.
def _read_json_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"Viewer config '{path}' must contain a JSON object")
    return payload


# //4.- Anchor relative paths to the configuration directory rather than the cwd.
def _resolve_path(config_dir: str, value: str) -> str:
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.normpath(os.path.join(config_dir, expanded))


# //5.- Reject zero, negative and non-finite values.
def ensure_positive(value: float, label: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number, got {value!r}") from None
    if not math.isfinite(number) or number <= 0:
        raise ValueError(f"{label} must be a positive finite number, got {value!r}")
    return number


# //6.- Public helper assembling the viewer settings bundle.
def load_viewer_settings(config_dir: str | None = None) -> ViewerSettings:
    directory = config_dir or _default_config_directory()
    payload = _read_json_config(os.path.join(directory, "viewer.json"))
    interval = ensure_positive(payload.get("cycle_interval_s", 5.0), "Cycle interval")
    spacing = ensure_positive(payload.get("neighbor_spacing", 3.0), "Neighbor spacing")
    return ViewerSettings(
        document_path=_resolve_path(directory, str(payload.get("document_path", "prototypes.yaml"))),
        model_directory=_resolve_path(directory, str(payload.get("model_directory", "models"))),
        cycle_interval_s=interval,
        neighbor_spacing=spacing,
    )


__all__ = ["ViewerSettings", "ensure_positive", "load_viewer_settings"]
