"""Report formatting utilities."""

from __future__ import annotations

from .models import ParamDocsReport


def format_report(report: ParamDocsReport) -> str:
    """Format param docs report as text."""
    lines = ["=" * 60, "PARAMETER DOCUMENTATION REPORT", "=" * 60]
    lines.append(f"Callables checked: {report.checked_count}")
    lines.append("")

    failing = [v for v in report.verdicts if not v.is_compliant]
    if failing:
        lines.append(
            f"Violations ({len(report.violations)} in {len(failing)} callables):"
        )
        for verdict in failing:
            lines.append(f"  {verdict.callable_name}")
            for violation in verdict.violations:
                lines.append(f"    ✘ [{violation.kind.value}] {violation.message}")
        lines.append("")

    if report.errors:
        lines.append(f"Errors ({len(report.errors)}):")
        for error in report.errors:
            lines.append(f"  - {error}")
        lines.append("")

    if report.warnings:
        lines.append(f"Warnings ({len(report.warnings)}):")
        for item in report.warnings:
            lines.append(f"  - {item}")
        lines.append("")

    if not report.has_issues():
        lines.append("All parameter documentation is compliant.")

    lines.append("=" * 60)
    return "\n".join(lines)
