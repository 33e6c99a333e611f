import json

import pytest

from codescore.models import Severity
from codescore.report import Report, format_report
from codescore.scoring import calculate_score
from helpers import make_finding, source_of_lines


@pytest.fixture
def report():
    findings = [make_finding(Severity.ERROR, 2.0, "syntax_error", line=3), make_finding(Severity.STYLE, 1.2, "large_function")]
    findings[1].suggestion = "Consider breaking into smaller functions"
    return format_report(findings, calculate_score(findings, source_of_lines(100)))


def test_top_level_fields(report):
    assert report.score == 3.8
    assert report.max_score == 10.0
    assert report.rating == "Critical"
    assert report.summary.startswith("Code has 1 critical errors")
    assert report.total_issues == 2


def test_breakdown(report):
    breakdown = report.breakdown

    assert (breakdown.errors, breakdown.warnings, breakdown.info_issues, breakdown.style_issues) == (1, 0, 0, 1)
    assert breakdown.deductions.from_errors == pytest.approx(6.0)
    assert breakdown.deductions.from_style == pytest.approx(0.24)
    assert breakdown.deductions.from_warnings == 0.0
    assert breakdown.size_bonus == 0.0


def test_issues_keep_finding_order(report):
    assert [issue.rule for issue in report.issues] == ["syntax_error", "large_function"]
    assert report.issues[0].severity == "Error"
    assert report.issues[0].line == 3
    assert report.issues[0].score_impact == -6.0


def test_json_shape(report):
    data = json.loads(report.model_dump_json())

    assert list(data) == ["score", "max_score", "rating", "summary", "total_issues", "breakdown", "issues"]
    assert list(data["breakdown"]) == ["errors", "warnings", "info_issues", "style_issues", "deductions", "size_bonus"]
    assert list(data["breakdown"]["deductions"]) == ["from_errors", "from_warnings", "from_info", "from_style"]
    assert list(data["issues"][0]) == ["rule", "severity", "message", "line", "column", "text", "suggestion", "score_impact"]
    assert data["issues"][0]["suggestion"] is None
    assert data["issues"][1]["suggestion"] == "Consider breaking into smaller functions"


def test_json_round_trip_is_lossless(report):
    assert Report.model_validate_json(report.model_dump_json()) == report
