"""Resolve the lint configuration for a run.

A configuration is ``{"rules": {lint_id: setting}}`` where a setting is one of:

- a severity string: ``"error"``, ``"warning"`` or ``"off"``
- a list ``[severity]`` or ``[severity, options]``
- a mapping of rule options, keeping the rule's default severity

A user-supplied configuration replaces the packaged defaults wholesale; rules
it does not mention run at their own default severity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any
from collections.abc import Mapping, Sized

from .errors import ConfigLoadError
from .models import RuleDescriptor, RuleSetting, Severity
from .parsers import config_file
from .validators.config_schema import validate_config

logger = logging.getLogger(__name__)

# Relative config paths are resolved against the package directory, which is
# also where the packaged defaults live.
CONFIG_BASE_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = CONFIG_BASE_DIR / "default_config.json"


@dataclass(frozen=True)
class Config:
    """Resolved activation map for a lint run."""

    rules: dict[str, Any] = field(default_factory=dict)

    def setting_for(self, rule: RuleDescriptor) -> RuleSetting:
        """Return the effective severity and options for ``rule``."""
        if rule.lint_id not in self.rules:
            return RuleSetting(severity=rule.lint_type)
        return _parse_setting(self.rules[rule.lint_id], rule.lint_type)

    def to_dict(self) -> dict[str, Any]:
        return {"rules": dict(self.rules)}


def _severity(value: Any) -> Severity:
    try:
        return Severity(value)
    except ValueError as exc:
        raise ConfigLoadError(f"Invalid severity: {value!r}") from exc


def _parse_setting(value: Any, default: Severity) -> RuleSetting:
    if isinstance(value, str):
        return RuleSetting(severity=_severity(value))
    if isinstance(value, (list, tuple)) and value:
        options = value[1] if len(value) > 1 else None
        return RuleSetting(severity=_severity(value[0]), options=options)
    if isinstance(value, Mapping):
        return RuleSetting(severity=default, options=value)
    raise ConfigLoadError(f"Unsupported rule setting: {value!r}")


@lru_cache(maxsize=None)
def load_default_config() -> Mapping[str, Any]:
    """Return the packaged default configuration (loaded once, read-only)."""
    data = config_file.parse(DEFAULT_CONFIG_PATH)
    validate_config(data)
    return MappingProxyType({"rules": MappingProxyType(data["rules"])})


def _is_config_passed(value: Any) -> bool:
    # An empty object (or empty path string) counts as no config at all.
    if value is None:
        return False
    if isinstance(value, Sized):
        return len(value) != 0
    return True


def _resolve_path(path: Path | str, base_dir: Path) -> Path:
    config_path = Path(path)
    if not config_path.is_absolute():
        config_path = base_dir / config_path
    return config_path


def _get_passed_config(value: Any, base_dir: Path) -> dict[str, Any]:
    if isinstance(value, str) and value.startswith(("http://", "https://")):
        logger.debug("Fetching configuration from %s", value)
        return config_file.fetch(value)

    if isinstance(value, (str, Path)):
        config_path = _resolve_path(value, base_dir)
        logger.debug("Loading configuration from %s", config_path)
        return config_file.parse(config_path)

    if isinstance(value, Mapping):
        return dict(value)

    raise ConfigLoadError(f"Unsupported configuration type: {type(value).__name__}")


def resolve_config(
    value: Mapping[str, Any] | Config | Path | str | None = None,
    base_dir: Path = CONFIG_BASE_DIR,
) -> Config:
    """Resolve ``value`` into a Config.

    Args:
        value: A config mapping, an already resolved Config, a file path
            (absolute, or relative to ``base_dir``) or an http(s) URL. None or
            an empty mapping or string selects the packaged defaults; a Config
            is always kept as given, even with an empty rules map.
        base_dir: Directory that relative paths are joined to.

    Raises:
        ConfigLoadError: If the config cannot be read, parsed or validated.
    """
    # Already resolved, even when its rules map is empty
    if isinstance(value, Config):
        validate_config(value.to_dict())
        return Config(rules=dict(value.rules))

    if not _is_config_passed(value):
        logger.debug("No configuration passed; using defaults")
        defaults = load_default_config()
        return Config(rules=dict(defaults["rules"]))

    data = _get_passed_config(value, base_dir)
    validate_config(data)
    return Config(rules=dict(data["rules"]))
