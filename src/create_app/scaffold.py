"""Project scaffolding pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ScaffoldSettings
from .errors import PathConflictError
from .fetch import TemplateFetcher, build_fetcher
from .install import install_dependencies
from .manifest import update_manifest
from .naming import check_app_name
from .reporter import ProgressReporter
from .schema import InvocationRequest

__all__ = ["ProjectScaffolder", "ScaffoldResult", "ensure_destination_free"]


LOGGER = logging.getLogger(__name__)


def ensure_destination_free(path: Path, display_name: str) -> None:
    """Raise :class:`PathConflictError` if anything already exists at ``path``."""

    # exists() is False for dangling symlinks
    if path.exists() or path.is_symlink():
        raise PathConflictError(f"Error: {display_name} already exists. Please change the name")


@dataclass(slots=True)
class ScaffoldResult:
    """Where the project was created and which package manager installed it."""

    name: str
    path: Path
    package_manager: str


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a new project from the remote template."""

    settings: ScaffoldSettings
    fetcher: TemplateFetcher
    reporter: ProgressReporter

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        fetcher: TemplateFetcher | None = None,
        reporter: ProgressReporter | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.fetcher = fetcher or build_fetcher(self.settings)
        self.reporter = reporter or ProgressReporter()

    def create(self, request: InvocationRequest, cwd: str | Path | None = None) -> ScaffoldResult:
        """Validate, fetch, update and install the project described by ``request``.

        Each step only runs once the previous one succeeded. Failures raise a
        :class:`~create_app.errors.ScaffoldError` subclass and leave whatever
        was already written on disk.
        """

        target_path = request.target_path(cwd)
        app_name = target_path.name

        check_app_name(app_name, self.settings.reserved_names)
        ensure_destination_free(target_path, request.project_name)

        branch = self.settings.branch_for(request.template)
        LOGGER.debug("Creating %s from %s template (branch %s)", target_path, request.template.value, branch)

        with self.reporter.step("Installing template...", "Template generated successfully"):
            self.fetcher.fetch(branch, target_path)

        update_manifest(
            target_path,
            app_name,
            version=self.settings.default_version,
            manifest_name=self.settings.manifest_name,
        )

        with self.reporter.step(
            "Installing dependencies. This might take a couple of minutes.",
            "Dependencies installed successfully",
            spinner=False,
        ):
            manager = install_dependencies(target_path, preferred=self.settings.package_managers)

        return ScaffoldResult(name=request.project_name, path=target_path, package_manager=manager)
