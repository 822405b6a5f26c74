"""Self-update from the package index."""

from __future__ import annotations

import logging
import subprocess
import sys

import requests

from . import __version__
from .errors import UpdateError
from .schema import UpdateConfig

logger = logging.getLogger(__name__)


def fetch_latest_version(config: UpdateConfig) -> str:
    """Ask the package index for the newest release. One attempt, no retry."""
    url = config.resolved_index_url
    try:
        response = requests.get(url, timeout=config.timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as exc:
        raise UpdateError(f"update check failed: {exc}") from exc
    except ValueError as exc:
        raise UpdateError(f"update check failed: invalid response from {url}") from exc

    version = data.get("info", {}).get("version") if isinstance(data, dict) else None
    if not isinstance(version, str) or not version:
        raise UpdateError(f"update check failed: no version published at {url}")
    return version


def install_command(config: UpdateConfig, version: str) -> list[str]:
    return [
        sys.executable,
        "-m",
        "pip",
        "install",
        "--upgrade",
        f"{config.package}=={version}",
    ]


def run_command(cmd: list[str]) -> int:
    """Run a subprocess command to completion."""
    try:
        subprocess.run(cmd, check=True)
    except FileNotFoundError:
        raise UpdateError(f"command not found: {cmd[0]}") from None
    except subprocess.CalledProcessError as exc:
        return exc.returncode
    return 0


def self_update(config: UpdateConfig, current: str = __version__) -> tuple[str, bool]:
    """Install the latest release over the running one.

    Returns the latest version and whether an install happened.
    """
    latest = fetch_latest_version(config)
    if latest == current:
        logger.info("already at %s", current)
        return latest, False

    logger.info("updating %s -> %s", current, latest)
    status = run_command(install_command(config, latest))
    if status != 0:
        raise UpdateError(f"installing {config.package} {latest} failed", exit_code=status)
    return latest, True
