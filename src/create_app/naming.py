"""Project name checks applied before anything touches the disk."""

from __future__ import annotations

import logging
import re
from typing import Iterable
from urllib.parse import quote

from .errors import NameValidationError, ReservedNameError
from .schema import ValidationResult

__all__ = ["check_app_name", "validate_package_name"]


LOGGER = logging.getLogger(__name__)

MAX_NAME_LENGTH = 214

BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})

NODE_CORE_MODULES = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_SCOPED_PACKAGE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")


def _uri_component(value: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    return quote(value, safe="!*'()")


def _is_url_friendly(name: str) -> bool:
    if _uri_component(name) == name:
        return True

    match = _SCOPED_PACKAGE.match(name)
    if match is None:
        return False
    user, package = match.groups()
    if user is None:
        return False
    return _uri_component(user) == user and _uri_component(package) == package


def validate_package_name(name: str) -> ValidationResult:
    """Check ``name`` against the npm registry naming rules.

    Errors make a name unusable for any package. Warnings cover rules the
    registry introduced later, so they only disqualify new packages.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")

    if name.startswith("."):
        errors.append("name cannot start with a period")

    if name.startswith("_"):
        errors.append("name cannot start with an underscore")

    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    if name.lower() in BLACKLISTED_NAMES:
        errors.append(f"{name} is a blacklisted name")

    if name.lower() in NODE_CORE_MODULES:
        warnings.append(f"{name.lower()} is a core module name")

    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")

    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")

    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if name and not _is_url_friendly(name):
        errors.append("name can only contain URL-friendly characters")

    return ValidationResult(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        errors=errors,
        warnings=warnings,
    )


def check_app_name(app_name: str, reserved: Iterable[str]) -> None:
    """Raise if ``app_name`` cannot be used for a new project.

    Raises
    ------
    NameValidationError
        When the name breaks npm naming rules.
    ReservedNameError
        When the name matches one of the ``reserved`` dependency names.
    """

    result = validate_package_name(app_name)
    if not result.is_valid:
        LOGGER.debug("Rejected project name %r: %s", app_name, result.problems)
        raise NameValidationError(app_name, result.problems)

    reserved_names = sorted(reserved)
    if app_name in reserved_names:
        LOGGER.debug("Rejected project name %r: reserved", app_name)
        raise ReservedNameError(app_name, reserved_names)
