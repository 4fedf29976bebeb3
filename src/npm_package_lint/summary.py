"""Human-readable rendering of lint reports."""

from __future__ import annotations

from .models import Severity
from .report import Report


def render_text(report: Report, source: str = "package.json", quiet: bool = False) -> str:
    """Return one line per issue followed by a totals line.

    With ``quiet`` set, warning-level issues are left out.
    """
    lines = [source]
    for issue in report.issues:
        if quiet and issue.lint_type is Severity.WARNING:
            continue
        lines.append(
            f"  {issue.lint_type.value}: {issue.lint_id} - node: {issue.node} - {issue.lint_message}"
        )

    totals = f"{report.error_count} error(s)"
    if not quiet:
        totals += f", {report.warning_count} warning(s)"
    lines.append(totals)
    return "\n".join(lines) + "\n"


def render_summary(reports: dict[str, Report]) -> str:
    """Return a Markdown string with totals and a table of issues per manifest."""
    errors = sum(report.error_count for report in reports.values())
    warnings = sum(report.warning_count for report in reports.values())

    lines = []
    lines.append("# npm-package-lint Summary")
    lines.append("")
    lines.append(f"Manifests: {len(reports)} | Errors: {errors} | Warnings: {warnings}")
    lines.append("")
    lines.append("| Manifest | Rule | Severity | Node | Message |")
    lines.append("| --- | --- | --- | --- | --- |")

    has_rows = False

    for source, report in reports.items():
        if not report.issues:
            lines.append(f"| {source} | No issues | n/a | n/a | n/a |")
            has_rows = True
            continue

        for issue in report.issues:
            lines.append(
                f"| {source} | {issue.lint_id} | {issue.lint_type.value} "
                f"| {issue.node} | {issue.lint_message} |"
            )
            has_rows = True

    if not has_rows:
        lines.append("| (no manifests linted) | No issues | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
