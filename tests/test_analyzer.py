"""Tests for the rule engine."""

import pytest

from code_review_agent.analyzer import analyze
from code_review_agent.models import Severity
from code_review_agent.rules import ENTIRE_CODE_MARKER, missing_semicolon


SAMPLE = "\n".join([
    "var x = 1;",
    "function double(n) { return n * 2 }",
    'if (x == 1) { console.log("hi") }',
])


def _rules(issues):
    return [(i.line, i.rule) for i in issues]


class TestAnalyzeSample:
    """Test the three-line reference file."""

    def test_issues_in_report_order(self):
        """Issues are ordered by line, then rule order, whole-file rule last."""
        issues = analyze(SAMPLE)

        assert _rules(issues) == [
            (1, "no-var"),
            (2, "type-check"),
            (2, "formatting"),
            (3, "strict-equality"),
            (3, "no-console"),
            (0, "error-handling"),
        ]

    def test_severities(self):
        """Test each issue carries the severity of its rule."""
        severities = {i.rule: i.severity for i in analyze(SAMPLE)}

        assert severities["no-var"] == Severity.warning
        assert severities["type-check"] == Severity.warning
        assert severities["strict-equality"] == Severity.warning
        assert severities["error-handling"] == Severity.warning
        assert severities["formatting"] == Severity.info
        assert severities["no-console"] == Severity.info

    def test_original_is_trimmed_line(self):
        issues = analyze("    var count = 0;")
        assert issues[0].original == "var count = 0;"

    def test_whole_file_issue(self):
        """Test error-handling issue uses line 0 and the whole-file marker."""
        issue = analyze(SAMPLE)[-1]

        assert issue.line == 0
        assert issue.original == ENTIRE_CODE_MARKER
        assert issue.message == "No error handling found — consider adding try/catch blocks."


class TestSkippedLines:
    """Test blank and comment lines are never analyzed."""

    def test_comment_and_blank_lines_with_try_block(self):
        code = "// var x == 1\n\n   \n  // console.log('x')\n// try {"
        assert analyze(code) == []

    def test_empty_string_only_reports_error_handling(self):
        issues = analyze("")
        assert _rules(issues) == [(0, "error-handling")]

    def test_try_block_anywhere_disables_error_handling(self):
        code = "try {\n  run();\n} catch (e) {\n  handle(e);\n}\n"
        assert analyze(code) == []

    def test_try_without_space(self):
        code = "try{\n  run();\n} catch (e) {}"
        assert all(i.rule != "error-handling" for i in analyze(code))


class TestLineRules:
    """Test each per-line rule in isolation."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("var x = 1;", True),
            ("for (var i = 0; i < n; i++) {", True),
            ("const variable = 1;", False),
            ("const var_name = 1;", False),
            ("let invariant = 1;", False),
        ],
    )
    def test_no_var(self, line, expected):
        found = any(i.rule == "no-var" for i in analyze(line))
        assert found is expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("if (a == b) {", True),
            ("if (a==b) {", True),
            ("if (a === b) {", False),
            ("if (a !== b) {", False),
            ("if (a != b) {", False),
            ("const ok = a >= b;", False),
            ("==b;", False),
        ],
    )
    def test_strict_equality(self, line, expected):
        found = any(i.rule == "strict-equality" for i in analyze(line))
        assert found is expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("function add(a, b) {", True),
            ("export async function load (id) {", True),
            ("function check(a) { if (typeof a !== 'number') throw e; }", False),
            ("const f = function (a) {", False),
        ],
    )
    def test_type_check(self, line, expected):
        found = any(i.rule == "type-check" for i in analyze(line))
        assert found is expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("function id(a) { return a }", True),
            ("function noop() {}", True),
            ("function open(a) {", False),
        ],
    )
    def test_formatting(self, line, expected):
        found = any(i.rule == "formatting" for i in analyze(line))
        assert found is expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("const y = 2", True),
            ("return value", True),
            ("doSomething()", True),
            ("let s = 'a'", True),
            ('let s = "a"', True),
            ("const y = 2;", False),
            ("if (ready) {", False),
            ("}", False),
            ("call(", False),
            ("[1,", False),
            ("else done()", False),
            ("for (const a of list)", False),
            ("while (running)", False),
            ("const total = a +", False),
        ],
    )
    def test_semicolon(self, line, expected):
        found = any(i.rule == "semicolon" for i in analyze(line))
        assert found is expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("console.log('x');", True),
            ("console.log ('x');", True),
            ("console.error('x');", False),
            ("logger.log('x');", False),
        ],
    )
    def test_no_console(self, line, expected):
        found = any(i.rule == "no-console" for i in analyze(line))
        assert found is expected

    def test_multiple_rules_on_one_line(self):
        """Test every applicable rule fires on the same line."""
        issues = analyze("var ok = a == b")
        assert [i.rule for i in issues if i.line == 1] == ["no-var", "strict-equality", "semicolon"]


class TestMissingSemicolon:
    def test_extra_prefixes(self):
        assert missing_semicolon("catch (err)")
        assert not missing_semicolon("catch (err)", ("try", "catch"))


class TestLineNumbers:
    """Test line numbering across line endings."""

    def test_crlf_matches_lf(self):
        lf = "const a = 1;\n\nvar b = 2;"
        crlf = lf.replace("\n", "\r\n")

        assert _rules(analyze(crlf)) == _rules(analyze(lf))
        assert analyze(crlf)[0].line == 3

    def test_one_based(self):
        issues = analyze("var a = 1;")
        assert issues[0].line == 1


class TestByteOrderMark:
    """Test a leading byte-order mark is treated as whitespace."""

    def test_comment_line_after_bom_is_skipped(self):
        code = "\ufeff// Shared helpers for the server\ntry {\n} catch (e) {\n}"
        assert analyze(code) == []

    def test_original_excludes_bom(self):
        issues = analyze("\ufeffvar x = 1;\ntry {\n} catch (e) {\n}")

        assert _rules(issues) == [(1, "no-var")]
        assert issues[0].original == "var x = 1;"


class TestTotality:
    """Test the analyzer never raises on unusual input."""

    @pytest.mark.parametrize(
        "text",
        [
            "\x00\x01\x02binary\xff",
            "function f(" + "(" * 5000,
            "function a(" + "x)" * 2000 + "{" + "}" * 2000,
            "=" * 10000,
            "\r\n" * 100,
        ],
    )
    def test_returns_list(self, text):
        issues = analyze(text)
        assert isinstance(issues, list)
