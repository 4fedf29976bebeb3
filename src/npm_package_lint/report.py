"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from collections.abc import Iterable

from .models.lint_issue import LintIssue
from .models.severity import Severity


@dataclass(frozen=True)
class Report:
    """Outcome of linting one manifest.

    ``issues`` keeps rule invocation order. ``passed`` is False as soon as one
    error-level issue is present; warnings never fail a run.
    """

    issues: tuple[LintIssue, ...]
    passed: bool

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.lint_type is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.lint_type is Severity.WARNING)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": "1",
            "passed": self.passed,
            "issues": [issue.to_dict() for issue in self.issues],
            "totals": {
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
        }


def aggregate(issues: Iterable[LintIssue]) -> Report:
    """Aggregate collected issues into a report and compute the verdict."""
    collected = tuple(issues)
    passed = not any(issue.lint_type is Severity.ERROR for issue in collected)
    return Report(issues=collected, passed=passed)
