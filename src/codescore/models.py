from dataclasses import dataclass, field, replace
from enum import Enum


class Severity(Enum):
    """Issue severity levels, most important first"""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    STYLE = "Style"

    @property
    def base_score_impact(self) -> float:
        """Fixed score deduction for one issue of this severity."""
        return _BASE_IMPACT[self]

    @property
    def rank(self) -> int:
        """Higher is more important (Error=4 ... Style=1)."""
        return _RANK[self]

    @classmethod
    def parse(cls, value: str) -> "Severity":
        """Look up a severity by name, case-insensitively."""
        for severity in cls:
            if severity.value.lower() == value.strip().lower():
                return severity
        raise ValueError(f"Unknown severity '{value}'")


_BASE_IMPACT = {
    Severity.ERROR: -3.0,
    Severity.WARNING: -1.5,
    Severity.INFO: -0.4,
    Severity.STYLE: -0.2,
}

_RANK = {
    Severity.ERROR: 4,
    Severity.WARNING: 3,
    Severity.INFO: 2,
    Severity.STYLE: 1,
}


@dataclass(frozen=True)
class Rule:
    """A tree-sitter query paired with the issue it reports"""

    name: str
    query: str
    severity: Severity
    message: str
    suggestion: str | None = None
    weight_multiplier: float = 1.0

    def with_weight(self, weight: float) -> "Rule":
        return replace(self, weight_multiplier=weight)

    @property
    def score_impact(self) -> float:
        return self.severity.base_score_impact * self.weight_multiplier


@dataclass
class Finding:
    """One reported issue produced from an accepted query match"""

    rule_name: str
    severity: Severity
    message: str
    line: int
    column: int
    text: str
    suggestion: str | None = None
    score_impact: float = 0.0


@dataclass
class ScoreBreakdown:
    errors: int = 0
    warnings: int = 0
    info_issues: int = 0
    style_issues: int = 0
    error_deduction: float = 0.0
    warning_deduction: float = 0.0
    info_deduction: float = 0.0
    style_deduction: float = 0.0
    size_bonus: float = 0.0

    @property
    def total_deduction(self) -> float:
        return self.error_deduction + self.warning_deduction + self.info_deduction + self.style_deduction


@dataclass(frozen=True)
class CodeScore:
    """Final quality score for one analysis run"""

    overall_score: float
    max_score: float
    total_issues: int
    rating: str
    summary: str
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
