"""Detection rules for JavaScript/TypeScript source lines.

Each rule is a plain predicate over text. Line rules receive the trimmed line,
file rules receive the whole (normalized) file. The analyzer evaluates the
tables below in declaration order, which is also the order issues are
reported in.
"""

import re
from typing import Callable, NamedTuple

from .models import Severity


class Rule(NamedTuple):
    """A named detection predicate with its metadata."""

    name: str
    severity: Severity
    message: str
    check: Callable[[str], bool]


FUNCTION_DECL_RE = re.compile(r"function\s+\w+\s*\(", re.ASCII)
VAR_RE = re.compile(r"\bvar\b", re.ASCII)
# A bare "==" with a non "="/"!" character before it and a non "=" after it
LOOSE_EQUALITY_RE = re.compile(r"([^=!])={2}([^=])")
ONE_LINE_FUNCTION_RE = re.compile(r"function\s+\w+\s*\(.*\)\s*\{.*\}", re.ASCII)
STATEMENT_END_RE = re.compile(r"[\w)\"']$", re.ASCII)
CONSOLE_LOG_RE = re.compile(r"console\.log\s*\(")
TRY_BLOCK_RE = re.compile(r"try\s*\{")

COMMENT_PREFIX = "//"
ENTIRE_CODE_MARKER = "(entire code)"

TERMINATOR_SUFFIXES = (";", "{", "}", "(", ",")
BLOCK_KEYWORD_PREFIXES = ("function", "if", "else", "for", "while")


# Whitespace plus the byte-order mark, which str.strip() keeps
_EDGE_CHARS_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(line: str) -> str:
    """Strip surrounding whitespace and byte-order marks from a line."""
    return _EDGE_CHARS_RE.sub("", line)


def is_skippable(trimmed: str) -> bool:
    """Blank and line-comment lines are never analyzed or rewritten."""
    return not trimmed or trimmed.startswith(COMMENT_PREFIX)


def missing_semicolon(trimmed: str, extra_prefixes: tuple[str, ...] = ()) -> bool:
    """Check if a trimmed line looks like a statement missing its terminator."""
    if trimmed.endswith(TERMINATOR_SUFFIXES):
        return False
    if trimmed.startswith(BLOCK_KEYWORD_PREFIXES + extra_prefixes):
        return False
    return STATEMENT_END_RE.search(trimmed) is not None


def _lacks_type_check(trimmed: str) -> bool:
    return FUNCTION_DECL_RE.search(trimmed) is not None and "typeof" not in trimmed


def _has_no_try_block(text: str) -> bool:
    return TRY_BLOCK_RE.search(text) is None


LINE_RULES: list[Rule] = [
    Rule(
        name="type-check",
        severity=Severity.warning,
        message="Function has no type validation for its parameters.",
        check=_lacks_type_check,
    ),
    Rule(
        name="no-var",
        severity=Severity.warning,
        message="Use 'let' or 'const' instead of 'var'.",
        check=lambda line: VAR_RE.search(line) is not None,
    ),
    Rule(
        name="strict-equality",
        severity=Severity.warning,
        message="Use '===' instead of '==' for strict comparison.",
        check=lambda line: LOOSE_EQUALITY_RE.search(line) is not None,
    ),
    Rule(
        name="formatting",
        severity=Severity.info,
        message="Function body is on one line — expand for readability.",
        check=lambda line: ONE_LINE_FUNCTION_RE.search(line) is not None,
    ),
    Rule(
        name="semicolon",
        severity=Severity.info,
        message="Possibly missing semicolon.",
        check=missing_semicolon,
    ),
    Rule(
        name="no-console",
        severity=Severity.info,
        message="Avoid console.log in production — use a proper logger.",
        check=lambda line: CONSOLE_LOG_RE.search(line) is not None,
    ),
]

FILE_RULES: list[Rule] = [
    Rule(
        name="error-handling",
        severity=Severity.warning,
        message="No error handling found — consider adding try/catch blocks.",
        check=_has_no_try_block,
    ),
]
