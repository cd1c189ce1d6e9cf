"""Line-oriented rule engine."""

from .models import Issue
from .rules import ENTIRE_CODE_MARKER, FILE_RULES, LINE_RULES, is_skippable, trim


def normalize_newlines(text: str) -> str:
    """Convert CRLF line endings to LF so line numbers match on every platform."""
    return text.replace("\r\n", "\n")


def split_lines(text: str) -> list[str]:
    return normalize_newlines(text).split("\n")


def analyze(text: str) -> list[Issue]:
    """
    Apply every detection rule to a file's text.

    Lines are evaluated top to bottom and, within a line, in rule order. Every
    matching rule produces its own issue. Whole-file rules are appended last
    with line 0.

    Args:
        text: Raw file content

    Returns:
        List of Issue objects in report order
    """
    text = normalize_newlines(text)
    issues: list[Issue] = []

    for line_num, line in enumerate(split_lines(text), start=1):
        trimmed = trim(line)
        if is_skippable(trimmed):
            continue

        for rule in LINE_RULES:
            if rule.check(trimmed):
                issues.append(
                    Issue(
                        line=line_num,
                        severity=rule.severity,
                        rule=rule.name,
                        message=rule.message,
                        original=trimmed,
                    )
                )

    for rule in FILE_RULES:
        if rule.check(text):
            issues.append(
                Issue(
                    line=0,
                    severity=rule.severity,
                    rule=rule.name,
                    message=rule.message,
                    original=ENTIRE_CODE_MARKER,
                )
            )

    return issues
