"""Load package.json manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestLoadError


def load(path: Path | str) -> dict[str, Any]:
    """Return the parsed manifest at ``path``.

    Raises:
        ManifestLoadError: If the file cannot be read as UTF-8, is not valid JSON, or
            does not contain a JSON object.
    """
    manifest_path = Path(path)

    try:
        content = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestLoadError(f"Failed to read manifest {manifest_path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestLoadError(f"Invalid JSON in manifest {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestLoadError(f"Manifest {manifest_path} must be a JSON object")

    return data
