"""Workspace scaffolding."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

from .errors import WorkspaceError, WorkspaceExistsError
from .models import ENV_SCRIPT, MARKER_DIR, Workspace
from .registry import Registry, default_registry

logger = logging.getLogger(__name__)

ENV_TEMPLATE = (
    "# Runs before every workspace command; names defined here are visible to them.\n"
)

STUB_TEMPLATE = '''#!/usr/bin/env python3
"""{name}: {help}."""

from uw.contract import not_implemented

HELP = ""
TARGETS = []


def main(args):
    not_implemented("{name}")
'''

SCRIPT_MODE = 0o755


class WorkspaceManager:
    """Create workspace marker directories."""

    def __init__(self, registry: Registry | None = None) -> None:
        self.registry = registry or default_registry()

    def render_stub(self, name: str) -> str:
        spec = self.registry.get(name)
        help_text = spec.help if spec else name
        return STUB_TEMPLATE.format(name=name, help=help_text)

    def init(self, path: Path | None = None) -> Workspace:
        """Create the marker directory with its environment and stub scripts.

        The files are written to a temporary sibling directory which is then
        renamed into place, so the marker either appears complete or not at
        all.
        """
        root = (path or Path.cwd()).expanduser().resolve()
        workspace = Workspace(root=root)
        if root.exists() and not root.is_dir():
            raise WorkspaceError(f"not a directory: {root}")
        if workspace.marker.is_dir():
            raise WorkspaceExistsError(root)
        if workspace.marker.exists():
            raise WorkspaceError(
                f"marker path exists and is not a directory: {workspace.marker}"
            )

        root.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f"{MARKER_DIR}-", dir=root))
        try:
            self._write_scripts(staging)
            os.rename(staging, workspace.marker)
        except OSError:
            shutil.rmtree(staging, ignore_errors=True)
            if workspace.marker.is_dir():
                raise WorkspaceExistsError(root) from None
            raise

        logger.info("initialized workspace at %s", root)
        return workspace

    def _write_scripts(self, marker: Path) -> None:
        marker.chmod(0o755)
        (marker / ENV_SCRIPT).write_text(ENV_TEMPLATE, encoding="utf-8")
        for name in self.registry.local_names:
            script = marker / name
            script.write_text(self.render_stub(name), encoding="utf-8")
            script.chmod(SCRIPT_MODE)
