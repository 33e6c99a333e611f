"""
codescore - language-aware static quality scoring

This package provides:
- Per-language tree-sitter rule sets (Rust, Go, JavaScript)
- An analysis engine that turns query matches into findings
- A scoring engine producing a 0-10 score, rating and summary
- A report model for JSON or text output
"""

__version__ = "0.1.0"

from .api import analyze
from .engine import AnalysisEngine, analyze_source
from .errors import (
    CodeScoreError,
    ConfigError,
    RuleCompileError,
    SourceDecodeError,
    UnsupportedLanguageError,
)
from .models import CodeScore, Finding, Rule, ScoreBreakdown, Severity
from .report import Report, format_report
from .scoring import calculate_score

__all__ = [
    "AnalysisEngine",
    "CodeScore",
    "CodeScoreError",
    "ConfigError",
    "Finding",
    "Report",
    "Rule",
    "RuleCompileError",
    "ScoreBreakdown",
    "Severity",
    "SourceDecodeError",
    "UnsupportedLanguageError",
    "analyze",
    "analyze_source",
    "calculate_score",
    "format_report",
]
