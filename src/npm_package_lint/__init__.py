"""npm-package-lint core package.

This package lints package.json manifests against a configurable set of rules.
The engine is callable from Python and from the bundled CLI.
"""

from .config import Config, resolve_config
from .core import Linter, lint_file, lint_manifest
from .errors import ConfigLoadError, ManifestLoadError, RuleContractViolation
from .models import LintIssue, Severity
from .report import Report

__all__ = [
    "Config",
    "ConfigLoadError",
    "LintIssue",
    "Linter",
    "ManifestLoadError",
    "Report",
    "RuleContractViolation",
    "Severity",
    "lint_file",
    "lint_manifest",
    "resolve_config",
]
