"""Format rules for the package name and version."""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from ..models import LintResult, RuleDescriptor, Severity
from ..validators.formats import is_lowercase, is_valid_version_number

RULE_TYPE = "format"


def _lint_name_format(manifest: Mapping[str, Any], config: Any = None) -> LintResult:
    name = manifest.get("name")
    # missing or mistyped names are reported by name-required / name-type
    if isinstance(name, str) and not is_lowercase(name):
        return NAME_FORMAT.issue("Format should be all lowercase")
    return True


def _lint_version_format(manifest: Mapping[str, Any], config: Any = None) -> LintResult:
    if isinstance(manifest.get("version"), str) and not is_valid_version_number(
        manifest, "version"
    ):
        return VERSION_FORMAT.issue("Format must be a valid semantic version")
    return True


NAME_FORMAT = RuleDescriptor(
    lint_id="name-format",
    lint_type=Severity.ERROR,
    rule_type=RULE_TYPE,
    node="name",
    lint=_lint_name_format,
)

VERSION_FORMAT = RuleDescriptor(
    lint_id="version-format",
    lint_type=Severity.ERROR,
    rule_type=RULE_TYPE,
    node="version",
    lint=_lint_version_format,
)


def build_rules() -> list[RuleDescriptor]:
    return [NAME_FORMAT, VERSION_FORMAT]
