"""Exceptions raised by the lint pipeline.

Lint findings are never raised; they are returned as ``LintIssue`` values. The
classes here cover the fatal stages only: loading the config, loading the
manifest, and executing a rule.
"""

from __future__ import annotations


class LintError(RuntimeError):
    """Base error for failures that abort a lint run."""


class ConfigLoadError(LintError):
    """Raised when the configuration cannot be loaded, parsed or validated."""


class ManifestLoadError(LintError):
    """Raised when a package.json file cannot be read or parsed."""


class RuleContractViolation(LintError):
    """Raised when a rule raises or returns something other than True/LintIssue."""

    def __init__(self, lint_id: str, message: str) -> None:
        super().__init__(f"Rule '{lint_id}' failed: {message}")
        self.lint_id = lint_id


class UnknownRuleError(ValueError):
    """Raised when a rule ID is not found in the registry."""
