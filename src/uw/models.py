"""Core uw data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

MARKER_DIR = ".uw"
ENV_SCRIPT = "env"


class CommandGroup(str, Enum):
    """Where a command's implementation comes from."""

    GLOBAL = "global"
    LOCAL = "local"


@dataclass(frozen=True)
class OptionSpec:
    """A recognized option flag."""

    flag: str
    help: str = ""
    hidden: bool = False


@dataclass(frozen=True)
class CommandSpec:
    """Static declaration of a command's argument and help contract."""

    name: str
    group: CommandGroup
    help: str
    usage: str
    args: tuple[str, ...] = ()
    arg_help: Mapping[str, str] = field(default_factory=dict, compare=False)
    options: tuple[str, ...] = ("--help", "--version")

    def __post_init__(self) -> None:
        object.__setattr__(self, "arg_help", MappingProxyType(dict(self.arg_help)))

    @property
    def is_local(self) -> bool:
        return self.group is CommandGroup.LOCAL


@dataclass(frozen=True)
class CommandDescription:
    """What a command reports about itself in query mode."""

    help: str = ""
    targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class Invocation:
    """Classified command line: global options, command name, its arguments."""

    options: frozenset[str] = frozenset()
    command: str | None = None
    args: tuple[str, ...] = ()

    def has(self, flag: str) -> bool:
        return flag in self.options


@dataclass(frozen=True)
class Workspace:
    """A directory holding the marker subdirectory."""

    root: Path

    @property
    def marker(self) -> Path:
        return self.root / MARKER_DIR

    @property
    def env_script(self) -> Path:
        return self.marker / ENV_SCRIPT

    def script_path(self, name: str) -> Path:
        return self.marker / name
