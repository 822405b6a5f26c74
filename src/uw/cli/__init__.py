"""uw command-line dispatcher.

``uw [GLOBAL OPTIONS] COMMAND [ARGS...]`` runs a built-in global command
anywhere, or a local command inside a workspace. Every local command is also
installed as its own executable (``uwa``, ``uwb``, ...); invoked under such a
name the program skips the command word.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Sequence
from functools import partial

from ..commands import Command, GlobalCommand, local_command
from ..completion import complete
from ..config import load_config_model
from ..contract import handle_contract
from ..core import find_root
from ..errors import UsageError, UwError
from ..help import render_program_help, render_version
from ..logging_config import LogContext, configure_from
from ..models import CommandSpec, Workspace
from ..parser import parse_invocation, require_command
from ..registry import PROGRAM, Registry, default_registry
from ..schema import UwConfig
from ..shell import bashrc_snippet
from . import core

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolve an invocation and hand it to the right command."""

    def __init__(self, registry: Registry, config: UwConfig) -> None:
        self.registry = registry
        self.config = config
        self._actions = {
            "app-update": partial(core.app_update_command, config),
            "app-setup": partial(core.app_setup_command, config),
            "app-reset": partial(core.app_reset_command, config),
            "init": partial(core.init_command, registry),
        }

    def workspace(self) -> Workspace | None:
        return find_root()

    def command_for(self, spec: CommandSpec) -> Command:
        if spec.is_local:
            return local_command(spec, self.workspace())
        return GlobalCommand(spec, self._actions[spec.name])

    def run(self, argv: Sequence[str]) -> int:
        """Program context: global options first, then the command."""
        invocation = parse_invocation(argv, self.registry)
        logger.debug("invocation: %s", invocation)

        if invocation.has("--bashrc"):
            sys.stdout.write(bashrc_snippet(self.registry))
            return 0
        if invocation.has("--version"):
            render_version()
            return 0
        if invocation.has("--help"):
            render_program_help(self.registry, in_workspace=self.workspace() is not None)
            return 0
        if invocation.has("--complete"):
            words = [] if invocation.command is None else [invocation.command]
            return self.complete([*words, *invocation.args])

        name = require_command(invocation, self.registry)
        return self.run_command(name, invocation.args)

    def run_command(self, name: str, args: Sequence[str]) -> int:
        spec = self.registry.get(name)
        if spec is None:
            raise UsageError(f"unknown command: {name}")
        command = self.command_for(spec)
        with LogContext(command=name):
            logger.debug("dispatching %s via %s", name, type(command).__name__)
            status = handle_contract(spec, args, command.describe)
            if status is not None:
                return status
            return command.run(args)

    def complete(self, request: Sequence[str]) -> int:
        """Print candidates for ``CWORD WORD...`` one per line."""
        if not request:
            raise UsageError("--complete: expected CWORD followed by the words")
        try:
            cword = int(request[0])
        except ValueError:
            raise UsageError(f"--complete: invalid word index: {request[0]}") from None
        candidates = complete(
            list(request[1:]),
            cword,
            self.registry,
            lambda spec: self.command_for(spec).describe(),
            in_workspace=self.workspace() is not None,
        )
        for candidate in candidates:
            print(candidate)
        return 0


def main(argv: Iterable[str] | None = None, prog: str | None = None) -> int:
    """Console entry point for ``uw`` and every local command name."""
    argv = list(sys.argv[1:] if argv is None else argv)
    prog = os.path.basename(prog or sys.argv[0])
    registry = default_registry()
    try:
        config = load_config_model()
        configure_from(config.logging)
        dispatcher = Dispatcher(registry, config)
        if registry.is_local(prog):
            return dispatcher.run_command(prog, argv)
        return dispatcher.run(argv)
    except UwError as exc:
        print(f"{PROGRAM}: {exc}", file=sys.stderr)
        return exc.exit_code
    except OSError as exc:
        logger.debug("filesystem error", exc_info=True)
        print(f"{PROGRAM}: {exc}", file=sys.stderr)
        return 1


__all__ = ["Dispatcher", "main"]
