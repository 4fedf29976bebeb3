"""Schema validation for lint configuration documents.

Also usable as a CLI: ``npm-package-lint-validate-config --input .npmpackagejsonlintrc.json``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from ..errors import ConfigLoadError
from ..models.severity import VALID_SEVERITIES
from ..parsers import config_file

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "npm-package-lint configuration",
    "type": "object",
    "properties": {
        "rules": {
            "type": "object",
            "additionalProperties": {"$ref": "#/$defs/ruleSetting"},
        },
    },
    "required": ["rules"],
    "additionalProperties": False,
    "$defs": {
        "severity": {"enum": sorted(VALID_SEVERITIES)},
        "ruleSetting": {
            "oneOf": [
                {"$ref": "#/$defs/severity"},
                {
                    "type": "array",
                    "prefixItems": [{"$ref": "#/$defs/severity"}],
                    "minItems": 1,
                    "maxItems": 2,
                },
                {"type": "object"},
            ]
        },
    },
}

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_config(document: Any) -> None:
    """Raise ConfigLoadError listing every schema violation in ``document``."""
    errors = sorted(_VALIDATOR.iter_errors(document), key=lambda e: list(map(str, e.path)))
    if errors:
        raise ConfigLoadError("Configuration failed validation:\n" + _format_errors(errors))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate an npm-package-lint config file")
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the JSON or YAML configuration to validate",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        validate_config(config_file.parse(args.input))
    except ConfigLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Configuration {args.input} is valid")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
