from __future__ import annotations

import logging
import subprocess
from importlib.metadata import PackageNotFoundError, version


logger = logging.getLogger(__name__)


def get_urlcanon_version() -> str:
    try:
        return version("urlcanon")
    except PackageNotFoundError:
        logger.debug("urlcanon distribution metadata not found; falling back to git")
        return _version_from_git() or "dev"


def _version_from_git() -> str | None:
    try:
        described = subprocess.check_output(
            ["git", "describe", "--tags", "--dirty", "--always"],
            text=True,
            stderr=subprocess.DEVNULL,
        ).strip()
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git describe unavailable: %s", exc)
        return None
    return described.removeprefix("v") or None
