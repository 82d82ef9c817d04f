"""Config loading and normalization for tinc."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from tinc.config.model import TincConfig
from tinc.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CACHE_DIR_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_CACHE_DIR,
    EXECUTABLE_CONFIG_KEYS,
)
from tinc.exceptions import ConfigError


def load_config(
    root: Path,
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> TincConfig:
    """Load and validate config from ``tinc.yaml`` or an explicit path.

    ``TINC_CACHE_DIR`` in the environment overrides ``cache_dir`` from the file.
    Relative ``cache_dir`` values are resolved against the config file's directory.
    """
    env = os.environ if environ is None else environ
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)

    raw: dict[str, Any] = {}
    if path.exists():
        raw = _read_yaml_mapping(path)
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {path}")

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    executables: dict[str, str] = {}
    for key in EXECUTABLE_CONFIG_KEYS:
        if key not in raw:
            continue
        value = raw[key]
        if not isinstance(value, str) or not value.strip():
            raise ConfigError(f"{key} must be a non-empty string")
        executables[key] = value.strip()

    cache_dir = _resolve_cache_dir(raw.get("cache_dir"), base=path.parent, env_value=env.get(CACHE_DIR_ENV_VAR))

    return TincConfig(cache_dir=cache_dir, **executables)


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Parse a YAML file that must contain a mapping (or nothing)."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def _resolve_cache_dir(value: Any, *, base: Path, env_value: str | None) -> Path:
    if env_value:
        return Path(env_value).expanduser().resolve()
    if value is None:
        return DEFAULT_CACHE_DIR.expanduser()
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("cache_dir must be a non-empty string")
    cache_dir = Path(value.strip()).expanduser()
    if not cache_dir.is_absolute():
        cache_dir = base / cache_dir
    return cache_dir.resolve()
