"""Bash integration: completion hook and shell profile editing."""

from __future__ import annotations

import logging
from pathlib import Path

from .registry import PROGRAM, Registry

logger = logging.getLogger(__name__)

PROFILE_LINE = f'eval "$({PROGRAM} --bashrc)"'

BASH_COMPLETION = r"""
_uw_complete() {
    local IFS=$'\n'
    COMPREPLY=( $(uw --complete "${COMP_CWORD}" "${COMP_WORDS[@]}" 2>/dev/null) )
}
complete -o default -F _uw_complete {names}
"""


def bashrc_snippet(registry: Registry) -> str:
    """Shell code evaluated from the profile line."""
    names = " ".join([PROGRAM, *registry.local_names])
    return BASH_COMPLETION.replace("{names}", names).lstrip("\n")


def _read_lines(profile: Path) -> list[str]:
    if not profile.exists():
        return []
    return profile.read_text(encoding="utf-8").splitlines()


def has_profile_line(profile: Path) -> bool:
    return PROFILE_LINE in _read_lines(profile)


def add_profile_line(profile: Path) -> bool:
    """Append the integration line; returns False if it was already there."""
    if has_profile_line(profile):
        return False
    profile.parent.mkdir(parents=True, exist_ok=True)
    existing = profile.read_text(encoding="utf-8") if profile.exists() else ""
    prefix = "\n" if existing and not existing.endswith("\n") else ""
    with profile.open("a", encoding="utf-8") as handle:
        handle.write(f"{prefix}{PROFILE_LINE}\n")
    logger.info("added shell integration to %s", profile)
    return True


def remove_profile_line(profile: Path) -> bool:
    """Drop every line equal to the integration line; other lines stay as is."""
    lines = _read_lines(profile)
    kept = [line for line in lines if line != PROFILE_LINE]
    if len(kept) == len(lines):
        return False
    profile.write_text("".join(f"{line}\n" for line in kept), encoding="utf-8")
    logger.info("removed shell integration from %s", profile)
    return True
