"""Static command and option tables."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .models import CommandGroup, CommandSpec, OptionSpec

PROGRAM = "uw"

_TARGET_HELP = "target to operate on"
_TARGETS_HELP = "targets to operate on (default: all)"


def _global(name: str, help: str, usage: str = "", **kwargs) -> CommandSpec:
    return CommandSpec(
        name=name,
        group=CommandGroup.GLOBAL,
        help=help,
        usage=f"{PROGRAM} {name} {usage}".rstrip(),
        **kwargs,
    )


def _local(name: str, help: str, usage: str = "", **kwargs) -> CommandSpec:
    return CommandSpec(
        name=name,
        group=CommandGroup.LOCAL,
        help=help,
        usage=f"{name} {usage}".rstrip(),
        **kwargs,
    )


def default_global_commands() -> tuple[CommandSpec, ...]:
    return (
        _global("app-update", "update uw to the latest release"),
        _global("app-setup", "enable shell completion in the shell profile"),
        _global("app-reset", "remove shell completion from the shell profile"),
        _global(
            "init",
            "create a workspace",
            "[DIR]",
            args=("DIR",),
            arg_help={"DIR": "directory to initialize (default: current directory)"},
        ),
    )


def default_local_commands() -> tuple[CommandSpec, ...]:
    return (
        _local(
            "uwa",
            "attach to a target",
            "[TGT]",
            args=("TGT",),
            arg_help={"TGT": _TARGET_HELP},
        ),
        _local("uwd", "detach from the attached target"),
        _local(
            "uwp",
            "power cycle a target",
            "[TGT]",
            args=("TGT",),
            arg_help={"TGT": _TARGET_HELP},
        ),
        _local(
            "uwc",
            "copy files between host and target",
            "[TGT:]SRC [TGT:]DST",
            args=("SRC", "DST"),
            arg_help={
                "SRC": "source path, optionally prefixed by a target",
                "DST": "destination path, optionally prefixed by a target",
            },
        ),
        _local(
            "uws",
            "open a shell or run a command on a target",
            "[TGT] [CMD...]",
            args=("TGT", "CMD"),
            arg_help={"TGT": _TARGET_HELP, "CMD": "command to run instead of a shell"},
        ),
        _local(
            "uwf",
            "fetch sources",
            "[TGT...]",
            args=("TGT",),
            arg_help={"TGT": _TARGETS_HELP},
        ),
        _local(
            "uwb",
            "build",
            "[TGT...]",
            args=("TGT",),
            arg_help={"TGT": _TARGETS_HELP},
        ),
        _local(
            "uwi",
            "install build results",
            "[TGT...]",
            args=("TGT",),
            arg_help={"TGT": _TARGETS_HELP},
        ),
        _local(
            "uwt",
            "run tests",
            "[TGT...]",
            args=("TGT",),
            arg_help={"TGT": _TARGETS_HELP},
        ),
        _local(
            "uwx",
            "run workspace extensions",
            "[TGT...]",
            args=("TGT",),
            arg_help={"TGT": _TARGETS_HELP},
        ),
    )


def default_global_options() -> tuple[OptionSpec, ...]:
    return (
        OptionSpec("--help", "show this help message and exit"),
        OptionSpec("--bashrc", "print shell integration code", hidden=True),
        OptionSpec("--version", "show version information and exit"),
        OptionSpec("--complete", "print completion candidates", hidden=True),
    )


COMMAND_OPTIONS = {
    "--help": "show this help message and exit",
    "--version": "show version information and exit",
}


@dataclass(frozen=True)
class Registry:
    """Read-only lookup over the command and option tables."""

    global_commands: tuple[CommandSpec, ...]
    local_commands: tuple[CommandSpec, ...]
    global_options: tuple[OptionSpec, ...]

    def get(self, name: str) -> CommandSpec | None:
        for spec in self.global_commands + self.local_commands:
            if spec.name == name:
                return spec
        return None

    def is_global(self, name: str) -> bool:
        return any(spec.name == name for spec in self.global_commands)

    def is_local(self, name: str) -> bool:
        return name in self.local_names

    @property
    def local_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.local_commands)

    def names(self, include_local: bool = True) -> list[str]:
        names = [spec.name for spec in self.global_commands]
        if include_local:
            names.extend(self.local_names)
        return names

    @property
    def global_option_flags(self) -> frozenset[str]:
        return frozenset(option.flag for option in self.global_options)

    @property
    def visible_options(self) -> tuple[OptionSpec, ...]:
        return tuple(option for option in self.global_options if not option.hidden)


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Build the process-wide registry."""
    return Registry(
        global_commands=default_global_commands(),
        local_commands=default_local_commands(),
        global_options=default_global_options(),
    )
