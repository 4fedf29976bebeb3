"""Type rules: ``<node>-type``.

A field passes when its value matches any of the allowed shapes, or when the
field is missing.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from ..models import LintResult, RuleDescriptor, Severity
from ..validators.types import SHAPE_CHECKS

RULE_TYPE = "type"

TYPED_NODES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("name", ("string",)),
    ("version", ("string",)),
    ("description", ("string",)),
    ("keywords", ("Array",)),
    ("homepage", ("string",)),
    ("bugs", ("string", "Object")),
    ("license", ("string",)),
    ("author", ("string", "Object")),
    ("contributors", ("Array",)),
    ("files", ("Array",)),
    ("main", ("string",)),
    ("bin", ("string", "Object")),
    ("man", ("string", "Array")),
    ("directories", ("Object",)),
    ("repository", ("string", "Object")),
    ("scripts", ("Object",)),
    ("config", ("Object",)),
    ("dependencies", ("Object",)),
    ("devDependencies", ("Object",)),
    ("peerDependencies", ("Object",)),
    ("optionalDependencies", ("Object",)),
    ("bundledDependencies", ("Array",)),
    ("engines", ("Object",)),
    ("os", ("Array",)),
    ("cpu", ("Array",)),
    ("preferGlobal", ("boolean",)),
    ("private", ("boolean",)),
    ("publishConfig", ("Object",)),
)


def _with_article(shape: str) -> str:
    article = "an" if shape[0] in "AEIOU" else "a"
    return f"{article} {shape}"


def type_message(shapes: tuple[str, ...]) -> str:
    """Return e.g. "Type should be either a string or an Object"."""
    if len(shapes) == 1:
        return f"Type should be {_with_article(shapes[0])}"
    described = " or ".join(_with_article(shape) for shape in shapes)
    return f"Type should be either {described}"


def type_rule(node: str, shapes: tuple[str, ...]) -> RuleDescriptor:
    checks = [SHAPE_CHECKS[shape] for shape in shapes]
    message = type_message(shapes)

    def lint(manifest: Mapping[str, Any], config: Any = None) -> LintResult:
        if not any(check(manifest, node) for check in checks):
            return rule.issue(message)
        return True

    rule = RuleDescriptor(
        lint_id=f"{node}-type",
        lint_type=Severity.ERROR,
        rule_type=RULE_TYPE,
        node=node,
        lint=lint,
    )
    return rule


def build_rules() -> list[RuleDescriptor]:
    return [type_rule(node, shapes) for node, shapes in TYPED_NODES]
