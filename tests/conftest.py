"""Shared fixtures for the npm-package-lint test suite."""

import json
from pathlib import Path

import pytest

from npm_package_lint.models import RuleDescriptor, Severity


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document under tmp_path and return its path."""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


def make_rule(lint_id, lint, lint_type=Severity.ERROR, node="name"):
    """Build a throwaway rule descriptor for engine tests."""
    return RuleDescriptor(
        lint_id=lint_id,
        lint_type=lint_type,
        rule_type="test",
        node=node,
        lint=lint,
    )


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code
