"""Type checks for top-level manifest fields.

Every check returns True when the field is missing: absence is the concern of
the presence rules, not the type rules.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping


def is_string(manifest: Mapping[str, Any], node: str) -> bool:
    if node not in manifest:
        return True
    return isinstance(manifest[node], str)


def is_object(manifest: Mapping[str, Any], node: str) -> bool:
    if node not in manifest:
        return True
    return isinstance(manifest[node], Mapping)


def is_array(manifest: Mapping[str, Any], node: str) -> bool:
    if node not in manifest:
        return True
    return isinstance(manifest[node], list)


def is_boolean(manifest: Mapping[str, Any], node: str) -> bool:
    if node not in manifest:
        return True
    return isinstance(manifest[node], bool)


SHAPE_CHECKS = {
    "string": is_string,
    "Object": is_object,
    "Array": is_array,
    "boolean": is_boolean,
}
