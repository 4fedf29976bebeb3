"""Command-line entrypoint for linting package.json files.

Usage:
  npm-package-lint [PATH ...] [--config path_or_url] [--format text|markdown|json]
                   [--quiet] [--warn-only] [--verbose]

Exit codes: 0 when every manifest passed, 10 when an error-level issue was
found, 1 on a config failure, 2 on a manifest failure and 3 when a rule broke.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from .config import resolve_config
from .core import Linter
from .discovery import expand_paths
from .errors import ConfigLoadError, ManifestLoadError, RuleContractViolation
from .parsers import package_json
from .report import Report
from .summary import render_summary, render_text

CONFIG_ENV_VAR = "NPM_PACKAGE_LINT_CONFIG"
WARN_ONLY_ENV_VAR = "NPM_PACKAGE_LINT_WARN_ONLY"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_MANIFEST_ERROR = 2
EXIT_RULE_ERROR = 3
EXIT_LINT_ERRORS = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lint package.json files")
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="package.json files or directories to search for them",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=os.getenv(CONFIG_ENV_VAR) or None,
        help=f"Config file path or http(s) URL (default: ${CONFIG_ENV_VAR} or built-in)",
    )
    parser.add_argument(
        "--format", choices=("text", "markdown", "json"), default="text", dest="output_format"
    )
    parser.add_argument("--quiet", action="store_true", help="Only report errors")
    parser.add_argument("--warn-only", action="store_true", help="Never fail on lint errors")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _config_source(config: str | None) -> str | None:
    # Relative paths on the command line are relative to the working directory
    if not config or config.startswith(("http://", "https://")):
        return config
    return str(Path(config).resolve())


def _render(reports: dict[str, Report], output_format: str, quiet: bool) -> str:
    if output_format == "json":
        payload = {source: report.to_dict() for source, report in reports.items()}
        return json.dumps({"manifests": payload}, indent=2) + "\n"
    if output_format == "markdown":
        return render_summary(reports)
    return "".join(
        render_text(report, source=source, quiet=quiet) for source, report in reports.items()
    )


def _warn_only(args: argparse.Namespace) -> bool:
    if args.warn_only:
        return True
    warn_env = os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower()
    return warn_env in {"1", "true", "yes", "y"}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(_config_source(args.config))
    except ConfigLoadError as exc:
        print(f"ERROR: Failed to load configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    manifests = expand_paths(args.paths)
    if not manifests:
        print("ERROR: No package.json files found", file=sys.stderr)
        return EXIT_MANIFEST_ERROR

    linter = Linter()
    reports: dict[str, Report] = {}
    for manifest_path in manifests:
        try:
            manifest = package_json.load(manifest_path)
        except ManifestLoadError as exc:
            print(f"ERROR: Failed to load manifest: {exc}", file=sys.stderr)
            return EXIT_MANIFEST_ERROR

        try:
            reports[str(manifest_path)] = linter.run(manifest, config)
        except RuleContractViolation as exc:
            print(f"ERROR: Rule execution failed on {manifest_path}: {exc}", file=sys.stderr)
            return EXIT_RULE_ERROR

    sys.stdout.write(_render(reports, args.output_format, args.quiet))

    passed = all(report.passed for report in reports.values())
    if not passed and not _warn_only(args):
        return EXIT_LINT_ERRORS
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
