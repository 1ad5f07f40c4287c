"""Load JSON and YAML documents into the value model understood by the engine."""
from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .errors import DocumentLoadError
from .values import render

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}
SUPPORTED_FORMATS = ("json", "yaml")


def _normalise(value: Any, path: Path) -> Any:
    """Coerce YAML-only node types into the six value kinds."""

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, Mapping):
        normalised: Dict[str, Any] = {}
        for key, item in value.items():
            if isinstance(key, str):
                label = key
            elif key is None or isinstance(key, (bool, int, float)):
                label = render(key)
            elif isinstance(key, (datetime.date, datetime.datetime)):
                label = key.isoformat()
            else:
                raise DocumentLoadError(
                    f"Unsupported mapping key of type {type(key).__name__} in {path}",
                    context={"path": str(path), "key": repr(key)},
                )
            if label in normalised:
                raise DocumentLoadError(
                    f"Mapping key {key!r} collides with another key rendered as {label!r} in {path}",
                    context={"path": str(path), "key": label},
                )
            normalised[label] = _normalise(item, path)
        return normalised
    if isinstance(value, (list, tuple)):
        return [_normalise(item, path) for item in value]
    raise DocumentLoadError(
        f"Unsupported value of type {type(value).__name__} in {path}",
        context={"path": str(path)},
    )


def _ensure_mapping(data: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise DocumentLoadError(
            f"Document {path} must contain a top-level mapping,"
            f" but received {type(data).__name__}.",
            context={"path": str(path)},
        )
    return dict(data)


def read_json_file(path: str | Path) -> Dict[str, Any]:
    """Read a JSON document whose top level is an object."""

    json_path = Path(path)
    try:
        with json_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise DocumentLoadError(f"Could not open file {json_path}", context={"path": str(json_path)}) from exc
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(
            f"Invalid JSON in {json_path}: {exc.msg}",
            context={"path": str(json_path), "line": exc.lineno, "column": exc.colno},
        ) from exc
    return _ensure_mapping(data, json_path)


def read_yaml_file(path: str | Path) -> Dict[str, Any]:
    """Read a YAML document whose top level is a mapping."""

    yaml_path = Path(path)
    try:
        with yaml_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as exc:
        raise DocumentLoadError(f"Could not open file {yaml_path}", context={"path": str(yaml_path)}) from exc
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Invalid YAML in {yaml_path}: {exc}", context={"path": str(yaml_path)}) from exc
    return _ensure_mapping(_normalise(data, yaml_path), yaml_path)


def detect_format(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise DocumentLoadError(f"Unsupported document format: {path}", context={"path": str(path)})


def load_document(path: str | Path, fmt: str | None = None) -> Dict[str, Any]:
    """Load ``path`` as JSON or YAML, picking the parser from ``fmt`` or the suffix."""

    resolved = (fmt or detect_format(path)).lower()
    if resolved == "json":
        return read_json_file(path)
    if resolved in {"yaml", "yml"}:
        return read_yaml_file(path)
    raise DocumentLoadError(f"Unsupported document format: {fmt}", context={"path": str(path)})


def load_reference(ref: Any) -> Mapping[str, Any]:
    """Return ``ref`` if it is already a mapping, otherwise load it from disk."""

    if isinstance(ref, Mapping):
        return ref
    if isinstance(ref, (str, Path)):
        return load_document(ref)
    raise TypeError("Unsupported reference type. Expected mapping or path-like object.")


__all__ = [
    "SUPPORTED_FORMATS",
    "detect_format",
    "load_document",
    "load_reference",
    "read_json_file",
    "read_yaml_file",
]
