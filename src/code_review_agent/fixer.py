"""Textual auto-fixer for the patterns the analyzer reports.

Applies, line by line:
- 'var' -> 'const'
- '==' -> '===' (bare loose equality only)
- semicolon insertion for statements missing a terminator
- one-liner 'function f(a) { return expr }' expansion with typeof guards

Standalone call statements are left as they are; the fixer never wraps code
in try/catch.
"""

import re

from .analyzer import split_lines
from .rules import LOOSE_EQUALITY_RE, VAR_RE, is_skippable, missing_semicolon, trim


ONE_LINER_RE = re.compile(
    r"^(\s*)function\s+(\w+)\s*\(([^)]*)\)\s*\{\s*return\s+(.*)\s*\}$",
    re.ASCII,
)

# Lines opening an exception block never get a semicolon
EXCEPTION_BLOCK_PREFIXES = ("try", "catch")

INDENT_STEP = "  "


def _replace_var(line: str) -> str:
    return VAR_RE.sub("const", line)


def _replace_loose_equality(line: str) -> str:
    return LOOSE_EQUALITY_RE.sub(r"\1===\2", line)


def _add_semicolon(line: str) -> str:
    trimmed = trim(line)
    if trimmed and missing_semicolon(trimmed, EXCEPTION_BLOCK_PREFIXES):
        return line.rstrip() + ";"
    return line


def expand_one_liner(line: str) -> list[str] | None:
    """Expand a one-line 'return' function into a guarded multi-line block.

    Every parameter gets a runtime check that throws when its value is not a
    number. Returns None if the line is not a one-liner function.
    """
    match = ONE_LINER_RE.match(line)
    if not match:
        return None

    indent, name, params, body = match.groups()
    param_list = [p.strip() for p in params.split(",") if p.strip()]
    inner = indent + INDENT_STEP

    expanded = [f"{indent}function {name}({', '.join(param_list)}) {{"]
    for param in param_list:
        expanded.append(f'{inner}if (typeof {param} !== "number") {{')
        expanded.append(
            f"{inner}{INDENT_STEP}throw new Error(\"{name}(): '{param}' must be a number, got \" + typeof {param});"
        )
        expanded.append(f"{inner}}}")
    expanded.append("")
    expanded.append(f"{inner}return {body.rstrip()};")
    expanded.append(f"{indent}}}")
    return expanded


def fix_line(line: str) -> list[str]:
    """Rewrite a single source line. May return several lines."""
    if is_skippable(trim(line)):
        return [line]

    line = _replace_var(line)
    line = _replace_loose_equality(line)
    line = _add_semicolon(line)

    expanded = expand_one_liner(line)
    if expanded is not None:
        return expanded
    return [line]


def fix(text: str) -> str:
    """Return the rewritten version of a file's text."""
    fixed: list[str] = []
    for line in split_lines(text):
        fixed.extend(fix_line(line))
    return "\n".join(fixed)
