"""Rewrite the generated package manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ManifestError

LOGGER = logging.getLogger(__name__)


def update_manifest(
    project_dir: Path,
    name: str,
    *,
    version: str = "1.0.0",
    manifest_name: str = "package.json",
) -> dict[str, Any]:
    """Set ``name`` and ``version`` in the manifest under ``project_dir``.

    Every other key is kept in its original order. The file is rewritten with
    tab indentation and a trailing newline. Returns the written document.
    """

    path = Path(project_dir) / manifest_name
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(
            f"The template did not contain {manifest_name}",
            hint=f"Expected to find it at {path}",
        ) from exc
    except OSError as exc:
        raise ManifestError(f"Cannot read {path}: {exc}") from exc

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{manifest_name} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise ManifestError(f"{manifest_name} must contain a JSON object")

    document["name"] = name
    document["version"] = version

    path.write_text(json.dumps(document, indent="\t", ensure_ascii=False) + "\n", encoding="utf-8")
    LOGGER.debug("Updated %s with name=%r version=%r", path, name, version)
    return document


__all__ = ["update_manifest"]
