"""Format checks for string manifest fields."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from ..parsers import semver


def is_lowercase(value: str) -> bool:
    """Return True if the string equals its lower-cased form."""
    return value == value.lower()


def is_valid_version_number(manifest: Mapping[str, Any], node: str) -> bool:
    """Return True if the node holds a valid semantic version or is missing."""
    if node not in manifest:
        return True
    return semver.valid(manifest[node])
