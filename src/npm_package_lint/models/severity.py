"""Severity levels for rules and issues."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a rule; the value is the string used in config files."""

    ERROR = "error"
    WARNING = "warning"
    OFF = "off"

    def __str__(self) -> str:
        return self.value


VALID_SEVERITIES = frozenset(s.value for s in Severity)
