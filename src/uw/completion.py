"""Shell completion candidates.

The shell hands over its word array and the index of the word being
completed. Two contexts exist: alias context, where the first word already
names a local command, and program context, where the first word is ``uw``
and the command still has to be found among the remaining words.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence

from .models import CommandDescription, CommandSpec
from .registry import Registry

Describe = Callable[[CommandSpec], CommandDescription]


def current_word(words: Sequence[str], cword: int) -> str:
    if 0 <= cword < len(words):
        return words[cword]
    return ""


def resolve_command(words: Sequence[str], cword: int, registry: Registry) -> str | None:
    """Find the command word of a partial command line.

    Returns ``None`` when no command has been typed yet.
    """
    if not words:
        return None
    alias = os.path.basename(words[0])
    if registry.is_local(alias):
        return alias
    flags = registry.global_option_flags
    for index, word in enumerate(words):
        if index == 0 or index == cword or word in flags:
            continue
        return word
    return None


def command_candidates(
    spec: CommandSpec,
    description: CommandDescription,
    word: str,
) -> list[str]:
    if word.startswith("-"):
        pool = list(spec.options)
    else:
        pool = [target for target in description.targets if not target.startswith("-")]
    return _prefixed(pool, word)


def program_candidates(registry: Registry, word: str, in_workspace: bool) -> list[str]:
    if word.startswith("-"):
        pool = [option.flag for option in registry.visible_options]
    else:
        pool = registry.names(include_local=in_workspace)
    return _prefixed(pool, word)


def complete(
    words: Sequence[str],
    cword: int,
    registry: Registry,
    describe: Describe,
    in_workspace: bool,
) -> list[str]:
    """Return the candidates for ``words[cword]``, prefix-matched."""
    word = current_word(words, cword)
    name = resolve_command(words, cword, registry)
    if name is None:
        return program_candidates(registry, word, in_workspace)
    spec = registry.get(name)
    if spec is None:
        return []
    return command_candidates(spec, describe(spec), word)


def _prefixed(candidates: Sequence[str], word: str) -> list[str]:
    return [candidate for candidate in candidates if candidate.startswith(word)]
