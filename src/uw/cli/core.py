"""Global commands: app-update, app-setup, app-reset, init."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from ..errors import UsageError
from ..manager import WorkspaceManager
from ..registry import PROGRAM, Registry
from ..schema import UwConfig


class CommandParser(argparse.ArgumentParser):
    """Argument parser that reports problems as ``UsageError``."""

    def error(self, message: str):
        raise UsageError(f"{self.prog}: {message}")


def build_parser(name: str) -> CommandParser:
    """Parser for a global command; --help/--version are answered earlier."""
    return CommandParser(prog=f"{PROGRAM} {name}", add_help=False, allow_abbrev=False)


def parse_args(parser: CommandParser, args: Sequence[str]) -> argparse.Namespace:
    namespace, extra = parser.parse_known_args(list(args))
    if extra:
        name = parser.prog.split(" ", 1)[-1]
        if extra[0].startswith("-"):
            raise UsageError(f"{name}: unknown option: {extra[0]}")
        raise UsageError(f"{name}: unexpected argument: {extra[0]}")
    return namespace


def app_update_command(config: UwConfig, args: Sequence[str]) -> int:
    """Install the latest release."""
    from ..update import self_update

    parse_args(build_parser("app-update"), args)
    latest, installed = self_update(config.update)
    if installed:
        print(f"updated to {latest}")
    else:
        print(f"already up to date ({latest})")
    return 0


def app_setup_command(config: UwConfig, args: Sequence[str]) -> int:
    """Register shell completion in the shell profile."""
    from ..shell import add_profile_line

    parse_args(build_parser("app-setup"), args)
    profile = config.general.profile_path
    if add_profile_line(profile):
        print(f"shell integration added to {profile}; open a new shell to use it")
    else:
        print(f"shell integration already present in {profile}")
    return 0


def app_reset_command(config: UwConfig, args: Sequence[str]) -> int:
    """Remove shell completion from the shell profile."""
    from ..shell import remove_profile_line

    parse_args(build_parser("app-reset"), args)
    profile = config.general.profile_path
    if remove_profile_line(profile):
        print(f"shell integration removed from {profile}")
    else:
        print(f"shell integration not found in {profile}")
    return 0


def init_command(registry: Registry, args: Sequence[str]) -> int:
    """Create a workspace in DIR or the current directory."""
    parser = build_parser("init")
    parser.add_argument("dir", nargs="?", help="Directory to initialize (default: cwd).")
    namespace = parse_args(parser, args)
    path = Path(namespace.dir) if namespace.dir else None
    workspace = WorkspaceManager(registry).init(path)
    print(f"initialized workspace: {workspace.root}")
    return 0
