"""Data models passed between the scaffolding steps."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Template(str, Enum):
    """Template variants published by the remote template repository."""

    REACT = "react"
    NODE = "node"

    @classmethod
    def resolve(cls, value: str | None) -> "Template":
        """Return :attr:`NODE` for ``"node"`` and :attr:`REACT` for anything else."""

        if value == cls.NODE.value:
            return cls.NODE
        return cls.REACT


class InvocationRequest(BaseModel):
    """What the user asked for on the command line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., min_length=1, description="Directory name given on the command line.")
    template: Template = Field(default=Template.REACT, description="Template variant to fetch.")

    def target_path(self, cwd: Path | str | None = None) -> Path:
        """Absolute path of the project directory."""

        base = Path(cwd) if cwd is not None else Path.cwd()
        # abspath normalises ".." without following symlinks at the target
        return Path(os.path.abspath(base / self.project_name))

    def app_name(self, cwd: Path | str | None = None) -> str:
        """Final path component, used as the package name."""

        return self.target_path(cwd).name


class ValidationResult(BaseModel):
    """Outcome of checking a name against the npm naming rules."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    valid_for_new_packages: bool = Field(..., description="True when neither errors nor warnings were reported.")
    valid_for_old_packages: bool = Field(..., description="True when no errors were reported.")
    errors: List[str] = Field(default_factory=list, description="Violations that make the name unusable.")
    warnings: List[str] = Field(default_factory=list, description="Violations tolerated only for legacy packages.")

    @property
    def is_valid(self) -> bool:
        return self.valid_for_new_packages

    @property
    def problems(self) -> List[str]:
        """Errors followed by warnings, in reporting order."""

        return [*self.errors, *self.warnings]


__all__ = ["InvocationRequest", "Template", "ValidationResult"]
