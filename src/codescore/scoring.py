"""
Scoring engine: folds a list of findings and the file size into a bounded
quality score, a rating label and a one-line summary.
"""

import math
from typing import Sequence, Tuple

from .models import CodeScore, Finding, ScoreBreakdown, Severity

BASE_SCORE = 10.0
MAX_SCORE = BASE_SCORE

LARGE_FILE_LINES = 200
SMALL_FILE_LINES = 50
LENIENCY_LINES = 1000.0
MAX_LENIENCY = 0.3
SMALL_FILE_FACTOR = 0.9

# Closed ranges checked in order; anything left over is "Critical".
RATING_BANDS: Tuple[Tuple[float, float, str], ...] = (
    (9.0, 10.0, "Excellent"),
    (7.5, 8.9, "Good"),
    (6.0, 7.4, "Fair"),
    (4.0, 5.9, "Poor"),
)
FALLBACK_RATING = "Critical"


def count_lines(source: str) -> int:
    """Only line feeds end a line (CRLF counts once); a final unterminated line still counts."""
    return source.count("\n") + (1 if source and not source.endswith("\n") else 0)


def round_score(value: float) -> float:
    """Round to one decimal, halves going up."""
    return math.floor(value * 10.0 + 0.5) / 10.0


def build_breakdown(findings: Sequence[Finding]) -> ScoreBreakdown:
    breakdown = ScoreBreakdown()
    for finding in findings:
        deduction = abs(finding.score_impact)
        if finding.severity is Severity.ERROR:
            breakdown.errors += 1
            breakdown.error_deduction += deduction
        elif finding.severity is Severity.WARNING:
            breakdown.warnings += 1
            breakdown.warning_deduction += deduction
        elif finding.severity is Severity.INFO:
            breakdown.info_issues += 1
            breakdown.info_deduction += deduction
        else:
            breakdown.style_issues += 1
            breakdown.style_deduction += deduction
    return breakdown


def size_factor(line_count: int, breakdown: ScoreBreakdown) -> float:
    """Divisor applied to the total deduction.

    Files over LARGE_FILE_LINES get up to 30% leniency; the share of it that
    applies to info and style issues is recorded on ``breakdown.size_bonus``.
    Files under SMALL_FILE_LINES are held to a stricter standard.
    """
    if line_count > LARGE_FILE_LINES:
        leniency = min((line_count - LARGE_FILE_LINES) / LENIENCY_LINES, MAX_LENIENCY)
        breakdown.size_bonus = leniency * (breakdown.info_deduction + breakdown.style_deduction)
        return 1.0 + leniency
    if line_count < SMALL_FILE_LINES:
        return SMALL_FILE_FACTOR
    return 1.0


def rating_for(score: float) -> str:
    for low, high, label in RATING_BANDS:
        if low <= score <= high:
            return label
    return FALLBACK_RATING


def summary_for(score: float, breakdown: ScoreBreakdown) -> str:
    """One-line summary; actionable issue counts win over the score itself."""
    if breakdown.errors > 0:
        return f"Code has {breakdown.errors} critical errors that need immediate attention"
    if breakdown.warnings > 5:
        return "Multiple warnings detected - consider addressing them"
    if breakdown.info_issues > 10:
        return "Many minor issues found - good opportunity for cleanup"
    if score >= 9.0:
        return "Excellent code quality with minimal issues"
    if score >= 7.5:
        return "Good code quality with room for minor improvements"
    return "Code needs improvement in several areas"


def calculate_score(findings: Sequence[Finding], source: str) -> CodeScore:
    breakdown = build_breakdown(findings)
    factor = size_factor(count_lines(source), breakdown)

    adjusted_deduction = breakdown.total_deduction / factor
    overall = round_score(max(BASE_SCORE - adjusted_deduction, 0.0))

    return CodeScore(
        overall_score=overall,
        max_score=MAX_SCORE,
        total_issues=len(findings),
        rating=rating_for(overall),
        summary=summary_for(overall, breakdown),
        breakdown=breakdown,
    )
