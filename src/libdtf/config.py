"""Layered settings for the libdtf command line."""
from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping

import yaml

from .diff_types import Config
from .errors import ConfigError

KNOWN_CONFIG_KEYS: set[str] = {"array_same_order", "output_format", "parallel"}

BOOLEAN_KEYS = {"array_same_order", "parallel"}

OUTPUT_FORMATS = ("markdown", "json")

ENV_PREFIXES = ("DTF_", "LIBDTF_")

DEFAULT_CONFIG_NAME = "libdtf.yaml"

DEFAULTS: Dict[str, Any] = {
    "array_same_order": False,
    "output_format": "markdown",
    "parallel": False,
}


def load_yaml_defaults(path: str | Path | None) -> dict:
    """Load YAML settings from ``path``.

    If the file is missing, an empty dictionary is returned.

    Parameters
    ----------
    path:
        Path to the YAML file. ``None`` is treated as a missing file.

    Returns
    -------
    dict
        Parsed YAML data or ``{}`` if the file does not exist.
    """

    if not path:
        return {}

    yaml_path = Path(path)
    if not yaml_path.exists():
        return {}

    try:
        with yaml_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file '{yaml_path}': {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected top-level mapping in configuration file '{yaml_path}',"
            f" but received {type(data).__name__}.",
            context={"path": str(yaml_path)},
        )

    return data


def _coerce_bool(value: str) -> bool:
    truthy = {"1", "true", "yes", "on", "y", "t"}
    falsy = {"0", "false", "no", "off", "n", "f"}
    lowered = value.strip().lower()
    if lowered in truthy:
        return True
    if lowered in falsy:
        return False
    raise ConfigError(f"Unable to interpret boolean value from '{value}'.")


def load_env_overrides(keys: Iterable[str], env: Mapping[str, str] | None = None) -> dict:
    """Return environment overrides for ``keys``.

    Variables are looked up as ``DTF_<KEY>`` then ``LIBDTF_<KEY>``. Values for
    keys registered in :data:`BOOLEAN_KEYS` are parsed into booleans.
    """

    source = os.environ if env is None else env
    overrides: Dict[str, Any] = {}
    for key in keys:
        env_value = None
        for prefix in ENV_PREFIXES:
            env_key = f"{prefix}{key.upper()}"
            if env_key in source:
                env_value = source[env_key]
                break
        if env_value is None:
            continue

        if key in BOOLEAN_KEYS:
            overrides[key] = _coerce_bool(env_value)
        else:
            overrides[key] = env_value

    return overrides


def merge_configs(*dicts: Dict[str, Any]) -> dict:
    """Merge dictionaries honoring precedence from left to right."""

    merged: Dict[str, Any] = {}
    for cfg in reversed(dicts):
        if not cfg:
            continue
        merged.update(cfg)
    return merged


def _extract_cli_overrides(cli_args: argparse.Namespace) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key in KNOWN_CONFIG_KEYS:
        value = getattr(cli_args, key, None)
        if value is None:
            continue
        data[key] = value
    return data


def _validate(settings: Dict[str, Any]) -> None:
    for key in BOOLEAN_KEYS:
        value = settings.get(key)
        if isinstance(value, str):
            settings[key] = _coerce_bool(value)
        elif not isinstance(value, bool):
            raise ConfigError(f"Setting '{key}' must be a boolean, received {value!r}.")

    output_format = str(settings.get("output_format", "")).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unsupported output format '{settings.get('output_format')}'."
            f" Expected one of: {', '.join(OUTPUT_FORMATS)}"
        )
    settings["output_format"] = output_format


def build_settings(cli_args: argparse.Namespace, env: Mapping[str, str] | None = None) -> dict:
    """Build the final settings dictionary from CLI, env, and YAML."""

    if not isinstance(cli_args, argparse.Namespace):
        raise TypeError("cli_args must be an argparse.Namespace instance")

    config_path: Path | None = None
    if getattr(cli_args, "config", None):
        config_path = Path(cli_args.config)
        if not config_path.exists():
            raise ConfigError(f"Configuration file '{config_path}' was not found.")
    else:
        default_path = Path(DEFAULT_CONFIG_NAME)
        if default_path.exists():
            config_path = default_path

    yaml_defaults = load_yaml_defaults(config_path)
    unknown = sorted(str(key) for key in yaml_defaults if key not in KNOWN_CONFIG_KEYS)
    if unknown:
        raise ConfigError(
            f"Unknown setting(s) in configuration file '{config_path}': {', '.join(unknown)}",
            context={"path": str(config_path), "keys": unknown},
        )

    env_overrides = load_env_overrides(KNOWN_CONFIG_KEYS, env)
    cli_overrides = _extract_cli_overrides(cli_args)

    merged = merge_configs(cli_overrides, env_overrides, yaml_defaults, DEFAULTS)
    if config_path:
        merged["config_path"] = str(config_path)

    _validate(merged)
    return merged


def build_config(settings: Mapping[str, Any]) -> Config:
    """Return the engine :class:`Config` for merged ``settings``."""

    return Config(array_same_order=bool(settings.get("array_same_order", False)))


__all__ = [
    "KNOWN_CONFIG_KEYS",
    "load_yaml_defaults",
    "load_env_overrides",
    "merge_configs",
    "build_settings",
    "build_config",
]
