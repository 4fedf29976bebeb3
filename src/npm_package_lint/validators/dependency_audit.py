"""Audits of a dependency block (``dependencies``, ``devDependencies``, ...).

Every function takes the manifest and the name of the block to audit. The
optional ``config`` is the rule's options; when it is a mapping with an
``exceptions`` list, the named dependencies are skipped by every check.

A block that is missing or is not an object has nothing to check, and a version
value that is not a string is skipped.
"""

from __future__ import annotations

import re
from typing import Any
from collections.abc import Iterator, Mapping

from ..parsers import semver

NON_ABSOLUTE_MARKERS = ("^", "~", ">", "<", "*")
PRERELEASE_MARKERS = ("-beta", "-rc")


def _has_exceptions(config: Any) -> bool:
    return isinstance(config, Mapping) and "exceptions" in config


def _iter_dependencies(
    manifest: Mapping[str, Any], node: str, config: Any = None
) -> Iterator[tuple[str, str]]:
    """Yield (name, version range) pairs not exempted by the config."""
    block = manifest.get(node)
    if not isinstance(block, Mapping):
        return

    exceptions = config["exceptions"] if _has_exceptions(config) else ()
    for name, version in block.items():
        if name in exceptions:
            continue
        if not isinstance(version, str):
            continue
        yield name, version


def has_dependency(
    manifest: Mapping[str, Any], node: str, deps_to_check_for: list[str], config: Any = None
) -> bool:
    """Return True if the block declares any of ``deps_to_check_for``."""
    for name, _ in _iter_dependencies(manifest, node, config):
        if name in deps_to_check_for:
            return True
    return False


def has_dep_prerelease_vers(
    manifest: Mapping[str, Any], node: str, deps_to_check_for: list[str], config: Any = None
) -> bool:
    """Return True if any of ``deps_to_check_for`` is pinned to a -beta/-rc version."""
    for name, version in _iter_dependencies(manifest, node, config):
        if name in deps_to_check_for and any(m in version for m in PRERELEASE_MARKERS):
            return True
    return False


def has_dep_vers_zero(manifest: Mapping[str, Any], node: str, config: Any = None) -> bool:
    """Return True if any dependency range targets major version 0."""
    for _, version in _iter_dependencies(manifest, node, config):
        if not semver.valid_range(version):
            continue
        digits = re.sub(r"\D+", "", version)
        # first digit left is the major version
        if digits[:1] == "0":
            return True
    return False


def does_vers_start_with_range(version: str, range_specifier: str) -> bool:
    """Return True if the version string starts with the given range specifier."""
    return version.startswith(range_specifier)


def are_vers_ranges_valid(
    manifest: Mapping[str, Any], node: str, range_specifier: str, config: Any = None
) -> bool:
    """Return False if any dependency range does not start with ``range_specifier``."""
    return all(
        does_vers_start_with_range(version, range_specifier)
        for _, version in _iter_dependencies(manifest, node, config)
    )


def do_vers_contain_invalid_range(
    manifest: Mapping[str, Any], node: str, range_specifier: str, config: Any = None
) -> bool:
    """Return True if any dependency range starts with ``range_specifier``."""
    return any(
        does_vers_start_with_range(version, range_specifier)
        for _, version in _iter_dependencies(manifest, node, config)
    )


def _check_absolute_versions(
    manifest: Mapping[str, Any], node: str, config: Any = None
) -> tuple[bool, int]:
    """Return (only absolute versions seen, number of dependencies checked)."""
    only_absolute = True
    checked = 0
    for _, version in _iter_dependencies(manifest, node, config):
        if any(marker in version for marker in NON_ABSOLUTE_MARKERS):
            only_absolute = False
        checked += 1
    return only_absolute, checked


def are_versions_absolute(manifest: Mapping[str, Any], node: str, config: Any = None) -> bool:
    """Return True if every checked version is absolute; False if none were checked."""
    only_absolute, checked = _check_absolute_versions(manifest, node, config)
    return only_absolute if checked > 0 else False


def do_vers_contain_non_absolute(
    manifest: Mapping[str, Any], node: str, config: Any = None
) -> bool:
    """Return True if any checked version is a range; False if none were checked."""
    only_absolute, checked = _check_absolute_versions(manifest, node, config)
    return not only_absolute if checked > 0 else False
