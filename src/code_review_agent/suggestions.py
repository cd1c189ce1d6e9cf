"""Remediation tips for triggered rules."""

from .models import Issue


FALLBACK_SUGGESTION = "Code looks great! Keep following best practices."

RULE_SUGGESTIONS = {
    "no-var": "Replace all 'var' declarations with 'const' or 'let'.",
    "strict-equality": "Use strict equality (===) to avoid type coercion bugs.",
    "type-check": "Add type checks (typeof) to validate function inputs.",
    "error-handling": "Wrap risky operations in try/catch blocks.",
    "formatting": "Break one-liner functions into multiple lines.",
    "semicolon": "Add semicolons at the end of statements.",
    "no-console": "Replace console.log with a logging library.",
}


def suggest(issues: list[Issue]) -> list[str]:
    """Return one tip per distinct rule, in order of the rule's first appearance."""
    suggestions: list[str] = []
    seen: set[str] = set()

    for issue in issues:
        if issue.rule in seen:
            continue
        seen.add(issue.rule)
        tip = RULE_SUGGESTIONS.get(issue.rule)
        if tip:
            suggestions.append(tip)

    if not suggestions:
        suggestions.append(FALLBACK_SUGGESTION)

    return suggestions
