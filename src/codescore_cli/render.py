"""Plain-text rendering of a report for terminals."""

from codescore.models import Severity
from codescore.report import Report


def render_text(report: Report, min_severity: Severity = Severity.STYLE, title: str = "") -> str:
    """Render a report grouped by severity, issues sorted by position.

    Issues below ``min_severity`` are hidden from the listing; the score and
    counts always reflect every finding.
    """
    lines = []
    lines.append("=" * 70)
    lines.append(f"CODE QUALITY REPORT{f' - {title}' if title else ''}")
    lines.append("=" * 70)
    lines.append(f"\nScore: {report.score:.1f}/{report.max_score:.1f} ({report.rating})")
    lines.append(report.summary)
    lines.append(f"\nTotal Issues: {report.total_issues}")

    counts = {
        Severity.ERROR: report.breakdown.errors,
        Severity.WARNING: report.breakdown.warnings,
        Severity.INFO: report.breakdown.info_issues,
        Severity.STYLE: report.breakdown.style_issues,
    }
    for severity, count in counts.items():
        if count > 0:
            lines.append(f"  {severity.value}: {count}")

    if report.breakdown.size_bonus:
        lines.append(f"  Size bonus: {report.breakdown.size_bonus:.2f}")

    for severity in Severity:
        if severity.rank < min_severity.rank:
            continue
        issues = sorted(
            (issue for issue in report.issues if issue.severity == severity.value),
            key=lambda issue: (issue.line, issue.column),
        )
        if not issues:
            continue

        lines.append(f"\n{severity.value.upper()}S ({len(issues)})")
        lines.append("-" * 70)
        for issue in issues:
            lines.append(f"{issue.line}:{issue.column} [{issue.rule}] {issue.message} ({issue.score_impact:+.2f})")
            if issue.suggestion:
                lines.append(f"  -> {issue.suggestion}")

    lines.append("\n" + "=" * 70)
    return "\n".join(lines)
