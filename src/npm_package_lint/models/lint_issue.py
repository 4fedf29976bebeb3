"""Lint issue model."""

from __future__ import annotations

from dataclasses import dataclass

from .severity import Severity


@dataclass(frozen=True)
class LintIssue:
    """A single rule violation found in a manifest."""

    lint_id: str
    lint_type: Severity
    node: str
    lint_message: str

    def __post_init__(self) -> None:
        if not self.lint_id:
            raise ValueError("lint_id must be non-empty")
        # Accept the plain config string as well as the enum member.
        object.__setattr__(self, "lint_type", Severity(self.lint_type))
        if self.lint_type is Severity.OFF:
            raise ValueError("An issue cannot have severity 'off'")

    @property
    def is_error(self) -> bool:
        return self.lint_type is Severity.ERROR

    def to_dict(self) -> dict[str, str]:
        return {
            "lintId": self.lint_id,
            "lintType": self.lint_type.value,
            "node": self.node,
            "lintMessage": self.lint_message,
        }
