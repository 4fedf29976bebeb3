"""Registry of built-in lint rules.

The registry maps rule IDs to their descriptors and is built once at import
time. Iteration order is fixed (presence, type, format, then dependency audit
rules) and is the order in which the engine invokes rules.
"""

from __future__ import annotations

from types import MappingProxyType
from collections.abc import Iterable, Mapping

from ..errors import UnknownRuleError
from ..models import RuleDescriptor
from . import dependencies, formats, required, types


def build_registry(descriptors: Iterable[RuleDescriptor]) -> Mapping[str, RuleDescriptor]:
    """Return a read-only mapping of lint_id -> descriptor, rejecting duplicates."""
    registry: dict[str, RuleDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.lint_id in registry:
            raise ValueError(f"Duplicate rule ID: '{descriptor.lint_id}'")
        registry[descriptor.lint_id] = descriptor
    return MappingProxyType(registry)


RULES: Mapping[str, RuleDescriptor] = build_registry(
    [
        *required.build_rules(),
        *types.build_rules(),
        *formats.build_rules(),
        *dependencies.build_rules(),
    ]
)


def get_rule(lint_id: str) -> RuleDescriptor:
    """Return the descriptor for the given rule ID, or raise UnknownRuleError."""
    rule = RULES.get(lint_id)
    if rule is None:
        raise UnknownRuleError(f"Unknown rule ID '{lint_id}'")
    return rule


def get_known_rule_ids() -> list[str]:
    """Return a sorted list of all registered rule IDs."""
    return sorted(RULES.keys())


__all__ = [
    "RULES",
    "build_registry",
    "get_known_rule_ids",
    "get_rule",
]
