"""Core uw helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from .models import MARKER_DIR, Workspace

logger = logging.getLogger(__name__)


def find_root(start_dir: Path | None = None) -> Workspace | None:
    """Find the nearest workspace by walking upward.

    The start directory itself is checked first. Returns ``None`` once the
    filesystem root has been checked without finding a marker.
    """
    if start_dir is None:
        start_dir = Path.cwd()
    current = start_dir.resolve()
    while True:
        if (current / MARKER_DIR).is_dir():
            logger.debug("workspace found at %s", current)
            return Workspace(root=current)
        parent = current.parent
        if parent == current:
            logger.debug("no workspace above %s", start_dir)
            return None
        current = parent
