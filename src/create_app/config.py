"""Settings shared by the scaffolding pipeline and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from .errors import ConfigurationError
from .schema import Template

DEFAULT_REPOSITORY = "https://github.com/TangBii/template-test"
FETCH_MODES = ("clone", "archive")

REPOSITORY_ENV = "CREATE_APP_REPOSITORY"
FETCH_MODE_ENV = "CREATE_APP_FETCH_MODE"


def _default_branches() -> dict[Template, str]:
    return {Template.REACT: "master", Template.NODE: "node"}


@dataclass(slots=True)
class ScaffoldSettings:
    """Fixed values describing where templates come from and how projects are set up.

    Attributes
    ----------
    repository:
        HTTPS URL of the template repository.
    branches:
        Maps each :class:`~create_app.schema.Template` to the branch holding it.
    manifest_name:
        File rewritten after the template has been fetched.
    default_version:
        Version written into the manifest of every new project.
    reserved_names:
        Dependencies of the template itself. A project cannot share their name
        because npm would refuse to install the dependency into it.
    package_managers:
        Executables tried in order when installing dependencies.
    fetch_mode:
        ``"clone"`` to use ``git clone`` or ``"archive"`` to download a zip
        snapshot over HTTPS.
    """

    repository: str = DEFAULT_REPOSITORY
    branches: dict[Template, str] = field(default_factory=_default_branches)
    manifest_name: str = "package.json"
    default_version: str = "1.0.0"
    reserved_names: tuple[str, ...] = ("react", "react-dom", "react-scripts")
    package_managers: tuple[str, ...] = ("yarn", "npm")
    fetch_mode: str = "clone"

    def __post_init__(self) -> None:
        self.reserved_names = tuple(sorted(self.reserved_names))
        if self.fetch_mode not in FETCH_MODES:
            raise ConfigurationError(
                f"Unsupported fetch mode '{self.fetch_mode}'",
                hint=f"{FETCH_MODE_ENV} must be one of: {', '.join(FETCH_MODES)}",
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ScaffoldSettings":
        """Build settings, applying overrides found in ``environ``.

        Parameters
        ----------
        environ:
            Mapping to read overrides from. Defaults to :data:`os.environ`.
        """

        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}

        repository = env.get(REPOSITORY_ENV, "").strip()
        if repository:
            overrides["repository"] = repository.rstrip("/")

        fetch_mode = env.get(FETCH_MODE_ENV, "").strip().lower()
        if fetch_mode:
            overrides["fetch_mode"] = fetch_mode

        return cls(**overrides)

    def branch_for(self, template: Template) -> str:
        """Return the branch selector for ``template``."""

        return self.branches[template]


__all__ = ["DEFAULT_REPOSITORY", "FETCH_MODES", "ScaffoldSettings"]
