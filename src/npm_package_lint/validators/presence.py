"""Presence checks for top-level manifest fields."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping


def exists(manifest: Mapping[str, Any], node: str) -> bool:
    """Return True if ``node`` is a key of the manifest (even when null)."""
    return node in manifest
