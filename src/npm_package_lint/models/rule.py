"""Rule descriptor model and the callable contract every rule implements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias
from collections.abc import Callable, Mapping

from .lint_issue import LintIssue
from .severity import Severity

LintResult: TypeAlias = Literal[True] | LintIssue

# lint(manifest, rule_options) -> True | LintIssue
LintFunction: TypeAlias = Callable[[Mapping[str, Any], Any], LintResult]


@dataclass(slots=True, frozen=True)
class RuleDescriptor:
    """Binds a rule ID to its lint function and static metadata.

    ``lint_type`` is the rule's default severity, used when the active config
    does not set one. ``node`` is the manifest field the rule inspects.
    """

    lint_id: str
    lint_type: Severity
    rule_type: str
    node: str
    lint: LintFunction

    def __post_init__(self) -> None:
        if not self.lint_id:
            raise ValueError("Rule lint_id must be non-empty")
        if self.lint_type is Severity.OFF:
            raise ValueError(f"Rule '{self.lint_id}' must default to error or warning")

    def issue(self, message: str) -> LintIssue:
        """Build an issue for this rule at its default severity."""
        return LintIssue(self.lint_id, self.lint_type, self.node, message)


@dataclass(slots=True, frozen=True)
class RuleSetting:
    """Effective activation of one rule: severity plus rule-specific options."""

    severity: Severity
    options: Any = None

    @property
    def enabled(self) -> bool:
        return self.severity is not Severity.OFF
