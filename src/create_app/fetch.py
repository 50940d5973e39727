"""Retrieve the remote template into the project directory."""

from __future__ import annotations

import io
import logging
import os
import shutil
import subprocess
import tempfile
import urllib.error
import urllib.request
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable

from .config import ScaffoldSettings
from .errors import FetchError

LOGGER = logging.getLogger(__name__)

Opener = Callable[[urllib.request.Request], Any]


class TemplateFetcher(ABC):
    """Copy one branch of the template repository into a new directory."""

    def __init__(self, repository: str) -> None:
        self.repository = repository

    @abstractmethod
    def fetch(self, branch: str, destination: Path) -> None:
        """Populate ``destination`` with the files of ``branch``.

        Raises :class:`~create_app.errors.FetchError` on any failure. Files
        written before the failure are left in place.
        """


class GitCloneFetcher(TemplateFetcher):
    """Shallow-clone the branch and drop the template's git history."""

    def __init__(self, repository: str, *, git: str = "git") -> None:
        super().__init__(repository)
        self.git = git

    def command(self, branch: str, destination: Path) -> list[str]:
        return [
            self.git,
            "clone",
            "--depth",
            "1",
            "--branch",
            branch,
            self.repository,
            str(destination),
        ]

    def fetch(self, branch: str, destination: Path) -> None:
        command = self.command(branch, destination)
        LOGGER.info("Cloning %s#%s into %s", self.repository, branch, destination)
        try:
            subprocess.run(
                command,
                capture_output=True,
                check=True,
                text=True,
                stdin=subprocess.DEVNULL,
                # fail instead of prompting for credentials when the repository is missing
                env={**os.environ, "GIT_TERMINAL_PROMPT": "0"},
            )
        except FileNotFoundError as exc:
            raise FetchError(f"'{self.git}' is required to download the template but was not found") from exc
        except subprocess.CalledProcessError as exc:
            reason = (exc.stderr or "").strip().splitlines()
            message = reason[-1] if reason else f"git clone exited with status {exc.returncode}"
            raise FetchError(message) from exc

        git_dir = destination / ".git"
        if git_dir.exists():
            shutil.rmtree(git_dir)


class ArchiveFetcher(TemplateFetcher):
    """Download a zip snapshot of the branch over HTTPS."""

    def __init__(self, repository: str, *, opener: Opener | None = None) -> None:
        super().__init__(repository)
        self.opener = opener if opener is not None else urllib.request.urlopen

    def archive_url(self, branch: str) -> str:
        return f"{self.repository}/archive/refs/heads/{branch}.zip"

    def _download(self, url: str) -> bytes:
        request = urllib.request.Request(url, headers={"Accept": "application/zip"})
        try:
            with self.opener(request) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            raise FetchError(f"Failed to download {url}: {exc.code} {exc.reason}") from exc
        except urllib.error.URLError as exc:
            raise FetchError(f"Failed to download {url}: {exc.reason}") from exc

    def fetch(self, branch: str, destination: Path) -> None:
        url = self.archive_url(branch)
        LOGGER.info("Downloading %s into %s", url, destination)
        payload = self._download(url)

        try:
            archive = zipfile.ZipFile(io.BytesIO(payload))
        except zipfile.BadZipFile as exc:
            raise FetchError(f"Downloaded template from {url} is not a valid zip archive") from exc

        with archive, tempfile.TemporaryDirectory(prefix="create-app-") as scratch:
            try:
                archive.extractall(scratch)
            except (OSError, zipfile.BadZipFile) as exc:
                raise FetchError(f"Failed to extract template archive: {exc}") from exc

            entries = list(Path(scratch).iterdir())
            # GitHub archives wrap everything in a single "<repo>-<branch>" directory.
            root = entries[0] if len(entries) == 1 and entries[0].is_dir() else Path(scratch)
            destination.mkdir(parents=True)
            for entry in root.iterdir():
                shutil.move(str(entry), str(destination / entry.name))


def build_fetcher(settings: ScaffoldSettings) -> TemplateFetcher:
    """Return the fetcher matching ``settings.fetch_mode``."""

    if settings.fetch_mode == "archive":
        return ArchiveFetcher(settings.repository)
    return GitCloneFetcher(settings.repository)


__all__ = ["ArchiveFetcher", "GitCloneFetcher", "TemplateFetcher", "build_fetcher"]
