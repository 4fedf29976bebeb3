"""Data models for the package.json linter."""

from __future__ import annotations

from .lint_issue import LintIssue
from .rule import LintFunction, LintResult, RuleDescriptor, RuleSetting
from .severity import Severity

__all__ = [
    "LintFunction",
    "LintIssue",
    "LintResult",
    "RuleDescriptor",
    "RuleSetting",
    "Severity",
]
