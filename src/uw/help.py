"""Help and version rendering."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from . import __version__
from .models import CommandDescription, CommandSpec
from .registry import COMMAND_OPTIONS, PROGRAM, Registry

TARGET_ARG = "TGT"


def version_text() -> str:
    return f"{PROGRAM} {__version__}"


def render_version(out: TextIO | None = None) -> None:
    """Print the version line; identical for the program and every command."""
    out = out or sys.stdout
    out.write(version_text() + "\n")


def render_program_help(
    registry: Registry,
    in_workspace: bool,
    out: TextIO | None = None,
) -> None:
    """Render top-level help: commands, then global options."""
    out = out or sys.stdout
    color = _supports_color(out)
    lines: list[str] = []
    lines.append(f"usage: {_cmd(PROGRAM, color)} [--help] [--version] <command> [args...]")
    lines.append("")

    lines.append(_section("commands:", color))
    rows = [(spec.name, spec.help) for spec in registry.global_commands]
    if in_workspace:
        rows.extend((spec.name, spec.help) for spec in registry.local_commands)
    lines.extend(_format_rows(rows))
    if not in_workspace:
        lines.append(_dim("  (workspace commands are listed inside a workspace)", color))
    lines.append("")

    lines.append(_section("options:", color))
    lines.extend(
        _format_rows([(option.flag, option.help) for option in registry.visible_options])
    )

    out.write("\n".join(lines) + "\n")


def render_command_help(
    spec: CommandSpec,
    description: CommandDescription,
    out: TextIO | None = None,
) -> None:
    """Render help for one command.

    Target suggestions are listed under the ``TGT`` argument, or under the
    first positional argument when the command has no ``TGT``.
    """
    out = out or sys.stdout
    color = _supports_color(out)
    lines: list[str] = [f"usage: {spec.usage}"]
    text = description.help or spec.help
    if text:
        lines.append("")
        lines.append(text)

    if spec.args:
        lines.append("")
        lines.append(_section("positional arguments:", color))
        anchor = TARGET_ARG if TARGET_ARG in spec.args else spec.args[0]
        width = max(len(name) for name in spec.args)
        for name in spec.args:
            lines.append(_format_row(name, spec.arg_help.get(name, ""), width))
            if name == anchor and description.targets:
                indent = " " * (width + 4)
                lines.extend(f"{indent}{target}" for target in description.targets)

    lines.append("")
    lines.append(_section("optional arguments:", color))
    lines.extend(
        _format_rows([(flag, COMMAND_OPTIONS.get(flag, "")) for flag in spec.options])
    )

    out.write("\n".join(lines) + "\n")


def _format_rows(rows: list[tuple[str, str]]) -> list[str]:
    width = max((len(name) for name, _help in rows), default=0)
    return [_format_row(name, text, width) for name, text in rows]


def _format_row(name: str, text: str, width: int) -> str:
    if not text:
        return f"  {name}"
    return f"  {name.ljust(width)}  {text}"


def _section(title: str, color: bool) -> str:
    return _style(title, "1;36", color)


def _dim(text: str, color: bool) -> str:
    return _style(text, "2", color)


def _cmd(text: str, color: bool) -> str:
    return _style(text, "1;34", color)


def _style(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"\033[{code}m{text}\033[0m"


def _supports_color(out: TextIO) -> bool:
    isatty = getattr(out, "isatty", None)
    if isatty is None or not isatty():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    return True
