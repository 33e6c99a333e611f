"""External report shape. Internal dataclasses are converted to these models
at the boundary; any output encoding is produced from them."""

from typing import List, Optional, Sequence

from pydantic import BaseModel

from .models import CodeScore, Finding


class Deductions(BaseModel):
    from_errors: float
    from_warnings: float
    from_info: float
    from_style: float


class ReportBreakdown(BaseModel):
    errors: int
    warnings: int
    info_issues: int
    style_issues: int
    deductions: Deductions
    size_bonus: float


class ReportIssue(BaseModel):
    rule: str
    severity: str
    message: str
    line: int
    column: int
    text: str
    suggestion: Optional[str] = None
    score_impact: float


class Report(BaseModel):
    score: float
    max_score: float
    rating: str
    summary: str
    total_issues: int
    breakdown: ReportBreakdown
    issues: List[ReportIssue]


def finding_to_issue(finding: Finding) -> ReportIssue:
    return ReportIssue(
        rule=finding.rule_name,
        severity=finding.severity.value,
        message=finding.message,
        line=finding.line,
        column=finding.column,
        text=finding.text,
        suggestion=finding.suggestion,
        score_impact=finding.score_impact,
    )


def format_report(findings: Sequence[Finding], score: CodeScore) -> Report:
    breakdown = score.breakdown
    return Report(
        score=score.overall_score,
        max_score=score.max_score,
        rating=score.rating,
        summary=score.summary,
        total_issues=score.total_issues,
        breakdown=ReportBreakdown(
            errors=breakdown.errors,
            warnings=breakdown.warnings,
            info_issues=breakdown.info_issues,
            style_issues=breakdown.style_issues,
            deductions=Deductions(
                from_errors=breakdown.error_deduction,
                from_warnings=breakdown.warning_deduction,
                from_info=breakdown.info_deduction,
                from_style=breakdown.style_deduction,
            ),
            size_bonus=breakdown.size_bonus,
        ),
        issues=[finding_to_issue(f) for f in findings],
    )
