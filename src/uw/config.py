"""Minimal config loader for uw."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from .errors import UsageError
from .schema import UwConfig


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def user_config_path() -> Path:
    return Path.home() / ".config" / "uw" / "config.toml"


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise UsageError(f"invalid config file {path}: {exc}") from exc


def _table(config_data: dict[str, Any], name: str) -> dict[str, Any]:
    table = config_data.get(name)
    if not isinstance(table, dict):
        table = config_data[name] = {}
    return table


def _apply_env_overrides(config_data: dict[str, Any]) -> None:
    profile = os.environ.get("UW_PROFILE")
    if profile:
        _table(config_data, "general")["profile_path"] = profile
    level = os.environ.get("UW_LOG_LEVEL")
    if level:
        _table(config_data, "logging")["level"] = level


def load_config(config_path: Path | None = None, merge_user: bool = True) -> dict[str, Any]:
    """Load configuration with basic precedence.

    Order, lowest first: user config, explicit file (argument or
    ``UW_CONFIG_PATH``), then ``UW_PROFILE`` and ``UW_LOG_LEVEL``.
    """
    env_config = os.environ.get("UW_CONFIG_PATH")
    if config_path is None and env_config:
        config_path = Path(env_config).expanduser()

    config_data: dict[str, Any] = {}

    if merge_user:
        user_path = user_config_path()
        if user_path.exists():
            config_data = _deep_merge(config_data, _read_toml(user_path))

    if config_path and config_path.exists():
        config_data = _deep_merge(config_data, _read_toml(config_path))

    _apply_env_overrides(config_data)
    return config_data


def load_config_model(
    config_path: Path | None = None,
    merge_user: bool = True,
) -> UwConfig:
    """Load configuration and return a typed model."""
    data = load_config(config_path=config_path, merge_user=merge_user)
    return UwConfig.from_dict(data)
