"""Exception types raised by the scaffolding pipeline."""

from __future__ import annotations

from typing import Sequence


class ScaffoldError(RuntimeError):
    """Raised when a scaffolding step cannot complete.

    ``details`` holds pre-formatted lines printed beneath the message and
    ``hint`` an optional closing line. ``reported`` is set once the progress
    reporter has already shown the failure to the user.
    """

    exit_code = 1

    def __init__(
        self,
        message: str,
        *,
        details: Sequence[str] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = tuple(details)
        self.hint = hint
        self.reported = False


class UsageError(ScaffoldError):
    """Raised when the command line cannot be parsed."""


class MissingProjectDirectoryError(UsageError):
    """Raised when no project directory was given."""


class ConfigurationError(ScaffoldError):
    """Raised when environment configuration is invalid."""


class NameValidationError(ScaffoldError):
    """Raised when the project name cannot be used for a new project."""

    def __init__(
        self,
        app_name: str,
        problems: Sequence[str],
        *,
        message: str | None = None,
        details: Sequence[str] | None = None,
        hint: str = "Please choose a different project name",
    ) -> None:
        super().__init__(
            message or f"Cannot create a project named {app_name} because of npm naming restrictions:",
            details=[f"  * {problem}" for problem in problems] if details is None else details,
            hint=hint,
        )
        self.app_name = app_name
        self.problems = tuple(problems)


class ReservedNameError(NameValidationError):
    """Raised when the project name collides with a template dependency."""

    def __init__(self, app_name: str, reserved: Sequence[str]) -> None:
        super().__init__(
            app_name,
            (),
            message=(
                f'Cannot create a project named "{app_name}" because a dependency with the same name exists.\n'
                "Due to the way npm works, the following names are not allowed:"
            ),
            details=[f"  {name}" for name in reserved],
            hint="Please choose a different project name.",
        )
        self.reserved = tuple(reserved)


class PathConflictError(ScaffoldError):
    """Raised when the destination already exists."""


class FetchError(ScaffoldError):
    """Raised when the remote template cannot be retrieved."""


class ManifestError(ScaffoldError):
    """Raised when the generated manifest is missing or malformed."""


class InstallError(ScaffoldError):
    """Raised when dependency installation fails."""


__all__ = [
    "ConfigurationError",
    "FetchError",
    "InstallError",
    "ManifestError",
    "MissingProjectDirectoryError",
    "NameValidationError",
    "PathConflictError",
    "ReservedNameError",
    "ScaffoldError",
    "UsageError",
]
