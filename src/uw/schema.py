"""Configuration schema for uw."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_INDEX_URL = "https://pypi.org/pypi/{package}/json"


def _as_path(value: str | Path) -> Path:
    return value if isinstance(value, Path) else Path(value).expanduser().resolve()


def _parse_level(value: Any, default: int) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        level = logging.getLevelName(value.strip().upper())
        if isinstance(level, int):
            return level
    return default


@dataclass(frozen=True)
class GeneralConfig:
    profile_path: Path = field(default_factory=lambda: Path.home() / ".bashrc")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneralConfig":
        profile_path = data.get("profile_path")
        return cls(
            profile_path=_as_path(profile_path)
            if profile_path
            else cls().profile_path,
        )


@dataclass(frozen=True)
class UpdateConfig:
    package: str = "uw"
    index_url: str = DEFAULT_INDEX_URL
    timeout: float = 30.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpdateConfig":
        package = data.get("package")
        index_url = data.get("index_url")
        timeout = data.get("timeout")
        return cls(
            package=package if isinstance(package, str) and package else cls.package,
            index_url=index_url
            if isinstance(index_url, str) and index_url
            else cls.index_url,
            timeout=float(timeout)
            if isinstance(timeout, (int, float)) and timeout > 0
            else cls.timeout,
        )

    @property
    def resolved_index_url(self) -> str:
        return self.index_url.format(package=self.package)


@dataclass(frozen=True)
class LoggingConfig:
    level: int = logging.WARNING
    log_dir: Path | None = None
    json: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggingConfig":
        log_dir = data.get("log_dir")
        return cls(
            level=_parse_level(data.get("level"), cls.level),
            log_dir=_as_path(log_dir) if log_dir else None,
            json=bool(data.get("json", False)),
        )


@dataclass(frozen=True)
class UwConfig:
    general: GeneralConfig = field(default_factory=GeneralConfig)
    update: UpdateConfig = field(default_factory=UpdateConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UwConfig":
        data = data or {}
        return cls(
            general=GeneralConfig.from_dict(_section(data, "general")),
            update=UpdateConfig.from_dict(_section(data, "update")),
            logging=LoggingConfig.from_dict(_section(data, "logging")),
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}
