"""Split raw invocation tokens into global options and a command."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import UsageError
from .models import Invocation
from .registry import Registry


def parse_invocation(tokens: Iterable[str], registry: Registry) -> Invocation:
    """Classify ``tokens`` into global options, command name and arguments.

    Global options are only recognized before the command name. Everything
    after the command name is passed through untouched, even tokens that look
    like global options.
    """
    flags = registry.global_option_flags
    tokens = list(tokens)
    seen: set[str] = set()
    index = 0
    while index < len(tokens) and tokens[index] in flags:
        seen.add(tokens[index])
        index += 1

    if index == len(tokens):
        return Invocation(options=frozenset(seen))

    return Invocation(
        options=frozenset(seen),
        command=tokens[index],
        args=tuple(tokens[index + 1 :]),
    )


def require_command(invocation: Invocation, registry: Registry) -> str:
    """Return the command name, or raise the matching usage error."""
    name = invocation.command
    if name is None:
        raise UsageError("no command specified (see 'uw --help')")
    if name.startswith("-"):
        raise UsageError(f"unknown option: {name}")
    if registry.get(name) is None:
        raise UsageError(f"unknown command: {name}")
    return name
