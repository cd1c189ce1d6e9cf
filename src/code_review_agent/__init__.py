"""
Code Review Agent: a line-oriented static analyzer and auto-fixer for
JavaScript/TypeScript projects.

Source files are matched against a fixed set of style rules with regular
expressions (no parsing), scored 0-10 and graded A-F, and rewritten by a
deterministic textual fixer. Results are aggregated into a single report.
"""

from .analyzer import analyze
from .collector import collect
from .fixer import fix
from .pipeline import review_file, review_text, run_review
from .scorer import grade_for, score
from .suggestions import suggest

__all__ = [
    "analyze",
    "collect",
    "fix",
    "grade_for",
    "review_file",
    "review_text",
    "run_review",
    "score",
    "suggest",
]
