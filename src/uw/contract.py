"""Entry contract shared by every command.

Before a command interprets its own arguments, ``handle_contract`` looks at
the first argument only:

* ``--complete`` prints the command's option names followed by its suggested
  targets, one per line;
* ``--version`` prints the version string;
* ``--help`` prints the command's help.

Each of these ends the invocation successfully. Any other first argument is
left for the command itself.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .errors import CommandNotImplementedError
from .help import render_command_help, render_version
from .models import CommandDescription, CommandSpec

QUERY_FLAG = "--complete"


def query_lines(spec: CommandSpec, description: CommandDescription) -> list[str]:
    """Option names first, then suggested target values."""
    return [*spec.options, *description.targets]


def handle_contract(
    spec: CommandSpec,
    args: Sequence[str],
    describe: Callable[[], CommandDescription],
    out: TextIO | None = None,
) -> int | None:
    """Handle query, version and help requests for ``spec``.

    Returns an exit status when the request was handled here, ``None`` when
    control goes back to the command. ``describe`` is only called when the
    description is actually needed.
    """
    if not args:
        return None
    out = out or sys.stdout
    first = args[0]
    if first == QUERY_FLAG and spec.is_local:
        for line in query_lines(spec, describe()):
            out.write(line + "\n")
        return 0
    if first == "--version":
        render_version(out)
        return 0
    if first == "--help":
        render_command_help(spec, describe(), out)
        return 0
    return None


def not_implemented(command: str, exit_code: int = 1) -> None:
    """Fail the current command; scaffolded stubs call this."""
    raise CommandNotImplementedError(command, exit_code=exit_code)
