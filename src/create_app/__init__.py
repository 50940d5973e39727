"""Create new projects from a remote template repository.

The package validates the requested project name, downloads the template,
stamps the generated ``package.json`` with the project name and installs its
dependencies. Every step is usable programmatically as well as through the
``create-app`` command line interface.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import ScaffoldSettings
from .errors import ScaffoldError
from .naming import check_app_name, validate_package_name
from .scaffold import ProjectScaffolder, ScaffoldResult
from .schema import InvocationRequest, Template, ValidationResult

__all__ = [
    "InvocationRequest",
    "ProjectScaffolder",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldSettings",
    "Template",
    "ValidationResult",
    "check_app_name",
    "validate_package_name",
]
