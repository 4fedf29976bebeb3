"""Locate package.json manifests to lint.

Directories named in ``EXCLUDES`` are pruned while walking, so installed
dependencies under ``node_modules`` are never visited.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

EXCLUDES = frozenset({"node_modules", ".git", ".venv"})
MANIFEST_NAME = "package.json"


def discover_manifests(root: Path, excludes: Iterable[str] = EXCLUDES) -> list[Path]:
    """Return the manifests under ``root`` in path order.

    A ``root`` that is itself a file is returned as the only manifest.
    """
    root = Path(root).resolve()
    if root.is_file():
        return [root]

    skip = frozenset(excludes)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in skip]
        if MANIFEST_NAME in filenames:
            found.append(Path(dirpath) / MANIFEST_NAME)

    logger.debug("Found %d manifest(s) under %s", len(found), root)
    return sorted(found)


def expand_paths(paths: Iterable[Path | str], excludes: Iterable[str] = EXCLUDES) -> list[Path]:
    """Turn command-line paths into the list of manifests to lint.

    Directories are searched; any other path is kept as given so that a
    missing file surfaces as a manifest load error. Duplicates are dropped,
    first occurrence wins.
    """
    manifests: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        candidates = discover_manifests(path, excludes) if path.is_dir() else [path]
        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            manifests.append(candidate)
    return manifests
