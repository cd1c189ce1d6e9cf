"""Scoring and grading for reviewed files."""

import math

from .models import Issue, Severity


MAX_SCORE = 10

# Points deducted per issue
DEDUCTIONS = {
    Severity.error: 2.0,
    Severity.warning: 1.0,
    Severity.info: 0.5,
}

VERDICT_EXCELLENT = "Excellent — project is in great shape!"
VERDICT_FAIR = "Fair — some files need attention."
VERDICT_POOR = "Poor — several files need improvements."


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def grade_for(score: int) -> str:
    """Map a 0-10 score to a letter grade."""
    if score >= 9:
        return "A"
    elif score >= 7:
        return "B"
    elif score >= 5:
        return "C"
    elif score >= 3:
        return "D"
    return "F"


def verdict_for(score: int) -> str:
    if score >= 8:
        return VERDICT_EXCELLENT
    if score >= 5:
        return VERDICT_FAIR
    return VERDICT_POOR


def score(issues: list[Issue]) -> tuple[int, str]:
    """Compute the score (0-10) and letter grade for a list of issues."""
    deduction = sum(DEDUCTIONS[issue.severity] for issue in issues)
    value = round_half_away_from_zero(MAX_SCORE - deduction)
    value = max(0, min(MAX_SCORE, value))
    return value, grade_for(value)


def overall_score(scores: list[int]) -> int:
    """Rounded mean of per-file scores, or the maximum when nothing was reviewed."""
    if not scores:
        return MAX_SCORE
    return round_half_away_from_zero(sum(scores) / len(scores))
