"""Install the new project's dependencies with an available package manager."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from .errors import InstallError

LOGGER = logging.getLogger(__name__)

DEFAULT_MANAGERS = ("yarn", "npm")


def detect_package_manager(preferred: Sequence[str] = DEFAULT_MANAGERS) -> str | None:
    """Return the first entry of ``preferred`` found on ``PATH``.

    Only the search path is inspected; no command is executed.
    """

    for manager in preferred:
        if shutil.which(manager) is not None:
            LOGGER.debug("Using package manager %s", manager)
            return manager
        LOGGER.debug("Package manager %s not found on PATH", manager)
    return None


def install_dependencies(
    project_dir: Path,
    *,
    manager: str | None = None,
    preferred: Sequence[str] = DEFAULT_MANAGERS,
) -> str:
    """Run ``<manager> install`` inside ``project_dir`` and return the manager used.

    Standard streams are inherited so the package manager's output reaches the
    terminal directly.
    """

    chosen = manager or detect_package_manager(preferred)
    if chosen is None:
        raise InstallError(
            "No package manager found",
            hint=f"Install one of: {', '.join(preferred)}",
        )

    command = [chosen, "install"]
    LOGGER.info("Running %s in %s", " ".join(command), project_dir)
    try:
        subprocess.run(command, cwd=str(project_dir), check=True)
    except FileNotFoundError as exc:
        raise InstallError(f"Command not found: {chosen}") from exc
    except subprocess.CalledProcessError as exc:
        raise InstallError(
            f"Command failed: {' '.join(command)} (exit code {exc.returncode})"
        ) from exc

    return chosen


__all__ = ["DEFAULT_MANAGERS", "detect_package_manager", "install_dependencies"]
