"""Core lint entrypoints.

This module MUST NOT print or exit so it can be used by both the CLI and other
Python callers. Lint findings come back as a Report; only failures of the
config, manifest or rule-execution stages are raised.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any
from collections.abc import Mapping

from .config import Config, resolve_config
from .errors import RuleContractViolation
from .models import LintIssue, RuleDescriptor
from .parsers import package_json
from .report import Report, aggregate
from .rules import RULES

logger = logging.getLogger(__name__)


class Linter:
    """Runs the registered rules against a manifest."""

    def __init__(self, rules: Mapping[str, RuleDescriptor] | None = None) -> None:
        self.rules = RULES if rules is None else rules

    def run(self, manifest: Mapping[str, Any], config: Config | Any = None) -> Report:
        """Lint ``manifest`` and return the aggregated report.

        ``config`` may be an already resolved Config or anything accepted by
        ``resolve_config``.

        Raises:
            ConfigLoadError: If ``config`` needs resolving and cannot be loaded,
                or a rule setting in it is invalid.
            RuleContractViolation: If a rule raises or returns an unexpected
                value. Remaining rules are not run.
        """
        resolved = config if isinstance(config, Config) else resolve_config(config)
        self._warn_unknown_rules(resolved)

        # every setting is parsed before the first rule runs
        settings = {lint_id: resolved.setting_for(rule) for lint_id, rule in self.rules.items()}

        issues: list[LintIssue] = []
        for lint_id, rule in self.rules.items():
            setting = settings[lint_id]
            if not setting.enabled:
                logger.debug("Skipping rule %s (off)", lint_id)
                continue

            logger.debug("Running rule %s", lint_id)
            try:
                result = rule.lint(manifest, setting.options)
            except Exception as exc:
                raise RuleContractViolation(lint_id, f"raised {exc!r}") from exc

            if result is True:
                continue
            if not isinstance(result, LintIssue):
                raise RuleContractViolation(lint_id, f"returned unexpected result {result!r}")

            if result.lint_type is not setting.severity:
                result = replace(result, lint_type=setting.severity)
            issues.append(result)

        report = aggregate(issues)
        logger.debug(
            "Lint finished: %d error(s), %d warning(s)", report.error_count, report.warning_count
        )
        return report

    def _warn_unknown_rules(self, config: Config) -> None:
        unknown = sorted(set(config.rules) - set(self.rules))
        if unknown:
            logger.warning("Ignoring unknown rule(s) in configuration: %s", ", ".join(unknown))


def lint_manifest(manifest: Mapping[str, Any], config: Config | Any = None) -> Report:
    """Lint an already parsed manifest with the built-in rules."""
    return Linter().run(manifest, config)


def lint_file(path: Path | str, config: Config | Any = None) -> Report:
    """Load the package.json at ``path`` and lint it.

    The configuration is resolved before the manifest is read, so a bad config
    fails the run before any file is linted.
    """
    resolved = resolve_config(config)
    manifest = package_json.load(path)
    return Linter().run(manifest, resolved)
