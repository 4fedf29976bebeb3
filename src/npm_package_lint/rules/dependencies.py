"""Dependency audit rules, generated for each audited dependency block.

Options accepted by every rule: ``{"exceptions": ["pkg", ...]}``. The two
``no-restricted-*`` rules take the list of restricted package names instead, or
a mapping with ``packages`` and ``exceptions`` keys.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Callable, Mapping

from ..models import LintResult, RuleDescriptor, Severity
from ..validators import dependency_audit as audit

RULE_TYPE = "dependencies"

AUDITED_NODES = ("dependencies", "devDependencies")

# (check(manifest, node, options) -> True when violated, message)
_Check = Callable[[Mapping[str, Any], str, Any], bool]


def _restricted_names(options: Any) -> list[str]:
    """Accept either ["pkg", ...] or {"packages": [...], "exceptions": [...]}."""
    if isinstance(options, Mapping):
        options = options.get("packages")
    if isinstance(options, list):
        return [str(name) for name in options]
    return []


def _violates_absolute(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return audit.do_vers_contain_non_absolute(manifest, node, options)


def _violates_no_caret(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return audit.do_vers_contain_invalid_range(manifest, node, "^", options)


def _violates_no_tilde(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return audit.do_vers_contain_invalid_range(manifest, node, "~", options)


def _violates_prefer_caret(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return not audit.are_vers_ranges_valid(manifest, node, "^", options)


def _violates_prefer_tilde(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return not audit.are_vers_ranges_valid(manifest, node, "~", options)


def _violates_restricted(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return audit.has_dependency(manifest, node, _restricted_names(options), options)


def _violates_restricted_prerelease(
    manifest: Mapping[str, Any], node: str, options: Any
) -> bool:
    return audit.has_dep_prerelease_vers(manifest, node, _restricted_names(options), options)


def _violates_version_zero(manifest: Mapping[str, Any], node: str, options: Any) -> bool:
    return audit.has_dep_vers_zero(manifest, node, options)


# (lint id prefix, default severity, check, message)
DEPENDENCY_CHECKS: tuple[tuple[str, Severity, _Check, str], ...] = (
    (
        "prefer-absolute-version",
        Severity.WARNING,
        _violates_absolute,
        "You are using an invalid version range. Please use absolute versions.",
    ),
    (
        "no-caret-version",
        Severity.WARNING,
        _violates_no_caret,
        "You are using ^ in a version range. Please remove it.",
    ),
    (
        "no-tilde-version",
        Severity.WARNING,
        _violates_no_tilde,
        "You are using ~ in a version range. Please remove it.",
    ),
    (
        "prefer-caret-version",
        Severity.WARNING,
        _violates_prefer_caret,
        "A dependency is not using the ^ version range. Please use ^.",
    ),
    (
        "prefer-tilde-version",
        Severity.WARNING,
        _violates_prefer_tilde,
        "A dependency is not using the ~ version range. Please use ~.",
    ),
    (
        "no-restricted",
        Severity.ERROR,
        _violates_restricted,
        "You are using a restricted dependency. Please remove it.",
    ),
    (
        "no-restricted-pre-release",
        Severity.ERROR,
        _violates_restricted_prerelease,
        "You are using a restricted pre-release dependency. Please remove it.",
    ),
    (
        "prefer-no-version-zero",
        Severity.WARNING,
        _violates_version_zero,
        "You are using a dependency with major version 0. Please use a stable release.",
    ),
)


def dependency_rule(
    prefix: str, node: str, lint_type: Severity, check: _Check, message: str
) -> RuleDescriptor:
    def lint(manifest: Mapping[str, Any], config: Any = None) -> LintResult:
        if check(manifest, node, config):
            return rule.issue(message)
        return True

    rule = RuleDescriptor(
        lint_id=f"{prefix}-{node}",
        lint_type=lint_type,
        rule_type=RULE_TYPE,
        node=node,
        lint=lint,
    )
    return rule


def build_rules() -> list[RuleDescriptor]:
    return [
        dependency_rule(prefix, node, lint_type, check, message)
        for node in AUDITED_NODES
        for prefix, lint_type, check, message in DEPENDENCY_CHECKS
    ]
