"""Presence rules: ``<node>-required``."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from ..models import LintResult, RuleDescriptor, Severity
from ..validators.presence import exists

RULE_TYPE = "required"

# (node, default severity), in registry order
REQUIRED_NODES: tuple[tuple[str, Severity], ...] = (
    ("name", Severity.ERROR),
    ("version", Severity.ERROR),
    ("description", Severity.ERROR),
    ("keywords", Severity.WARNING),
    ("homepage", Severity.WARNING),
    ("bugs", Severity.WARNING),
    ("repository", Severity.WARNING),
    ("license", Severity.WARNING),
    ("author", Severity.WARNING),
    ("contributors", Severity.WARNING),
    ("files", Severity.WARNING),
    ("main", Severity.WARNING),
    ("engines", Severity.WARNING),
    ("scripts", Severity.WARNING),
    ("dependencies", Severity.WARNING),
    ("devDependencies", Severity.WARNING),
)


def required_rule(node: str, lint_type: Severity) -> RuleDescriptor:
    message = f"{node} is required"

    def lint(manifest: Mapping[str, Any], config: Any = None) -> LintResult:
        if not exists(manifest, node):
            return rule.issue(message)
        return True

    rule = RuleDescriptor(
        lint_id=f"{node}-required",
        lint_type=lint_type,
        rule_type=RULE_TYPE,
        node=node,
        lint=lint,
    )
    return rule


def build_rules() -> list[RuleDescriptor]:
    return [required_rule(node, lint_type) for node, lint_type in REQUIRED_NODES]
