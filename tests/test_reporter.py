"""
Tests for the reporter
======================

These tests verify token grouping, the console report formats, file
loading, and the end-to-end file pipeline.
"""

import json

import pytest

from clex.config import ReportOptions, ScanOptions
from clex.errors import ClexError, SourceFileError
from clex.reporter import (
    category_name,
    format_cleaned_text,
    format_token_list,
    format_token_table,
    group_tokens,
    load_source,
    render_report,
    result_to_dict,
    tokenize_file,
)
from clex.scanner import Token, TokenCategory, tokenize


SAMPLE = """\
#include <iostream>
using namespace std;

/* entry point */
int main() {
    int x = 2;
    int y = x << 1; // shift
    cout << "done" << endl;
    return 0;
}
"""


# =============================================================================
# Test Grouping
# =============================================================================

class TestGroupTokens:
    """Tests for group_tokens()."""

    def test_empty(self):
        assert group_tokens([]) == {}

    def test_duplicates_collapse(self):
        """The same lexeme in one category appears once."""
        groups = group_tokens(tokenize("x = x + x;").tokens)
        assert groups[TokenCategory.IDENTIFIER] == ["x"]

    def test_cross_category_duplicates_kept(self):
        """The same text may appear under two categories."""
        tokens = [
            Token(TokenCategory.LITERAL, "int"),
            Token(TokenCategory.KEYWORD, "int"),
        ]
        groups = group_tokens(tokens)
        assert groups[TokenCategory.KEYWORD] == ["int"]
        assert groups[TokenCategory.LITERAL] == ["int"]

    def test_categories_in_enum_order(self):
        """Categories follow TokenCategory order, not first appearance."""
        groups = group_tokens(tokenize('; "s" @ x + int').tokens)
        assert list(groups) == [
            TokenCategory.KEYWORD,
            TokenCategory.IDENTIFIER,
            TokenCategory.LITERAL,
            TokenCategory.OPERATOR,
            TokenCategory.SEPARATOR,
            TokenCategory.UNKNOWN,
        ]

    def test_missing_categories_omitted(self):
        groups = group_tokens(tokenize("a b").tokens)
        assert list(groups) == [TokenCategory.IDENTIFIER]

    def test_lexemes_sorted(self):
        groups = group_tokens(tokenize("zeta Alpha beta a1").tokens)
        assert groups[TokenCategory.IDENTIFIER] == ["Alpha", "a1", "beta", "zeta"]

    def test_sample_program(self):
        groups = group_tokens(tokenize(SAMPLE).tokens)
        assert groups == {
            TokenCategory.KEYWORD: [
                "#include", "cout", "endl", "int", "iostream",
                "namespace", "return", "std", "using",
            ],
            TokenCategory.IDENTIFIER: ["main", "x", "y"],
            TokenCategory.LITERAL: ["0", "1", "2", "done"],
            TokenCategory.OPERATOR: ["<", "<<", "=", ">"],
            TokenCategory.SEPARATOR: ["(", ")", ";", "{", "}"],
        }


# =============================================================================
# Test Formatting
# =============================================================================

class TestFormatting:
    """Tests for the text formatters."""

    def test_category_name(self):
        assert category_name(TokenCategory.KEYWORD) == "KEYWORD"
        assert category_name(TokenCategory.UNKNOWN) == "UNKNOWN"

    def test_token_list(self):
        text = format_token_list(tokenize("int x;").tokens)
        assert text.splitlines() == [
            "Type: KEYWORD, Value: int",
            "Type: IDENTIFIER, Value: x",
            "Type: SEPARATOR, Value: ;",
        ]

    def test_token_list_empty(self):
        assert format_token_list([]) == ""

    def test_token_table(self):
        groups = group_tokens(tokenize("int x = 1; int y;").tokens)
        lines = format_token_table(groups).splitlines()
        assert lines == [
            "Category       Tokens         ",
            "-" * 35,
            "KEYWORD        int   ",
            "IDENTIFIER     x   y   ",
            "LITERAL        1   ",
            "OPERATOR       =   ",
            "SEPARATOR      ;   ",
        ]

    def test_token_table_column_width(self):
        groups = {TokenCategory.LITERAL: ["7"]}
        lines = format_token_table(groups, column_width=10).splitlines()
        assert lines[0] == "Category  Tokens    "
        assert lines[2] == "LITERAL   7   "

    def test_token_table_empty(self):
        assert format_token_table({}).splitlines() == [
            "Category       Tokens         ",
            "-" * 35,
        ]

    def test_cleaned_text(self):
        assert format_cleaned_text("int x;") == "Cleaned-up Input:\nint x;\n"


# =============================================================================
# Test Report Rendering
# =============================================================================

class TestRenderReport:
    """Tests for render_report() and result_to_dict()."""

    def test_default_report(self):
        report = render_report(tokenize("int x; // c"))
        assert report.startswith("Cleaned-up Input:\nint x; \n")
        assert "Category" in report
        assert "KEYWORD        int   " in report
        assert "Type:" not in report
        assert "// c" not in report

    def test_report_with_token_list(self):
        options = ReportOptions(show_tokens=True)
        report = render_report(tokenize("int x;"), options)
        assert "Type: IDENTIFIER, Value: x" in report

    def test_report_sections_disabled(self):
        options = ReportOptions(show_cleaned=False, show_table=False, show_tokens=True)
        report = render_report(tokenize("x"), options)
        assert report.strip() == "Type: IDENTIFIER, Value: x"

    def test_result_to_dict(self):
        data = result_to_dict(tokenize('cout << "hi";'))
        assert data["tokens"] == [
            {"category": "KEYWORD", "lexeme": "cout"},
            {"category": "OPERATOR", "lexeme": "<<"},
            {"category": "LITERAL", "lexeme": "hi"},
            {"category": "SEPARATOR", "lexeme": ";"},
        ]
        assert data["groups"]["LITERAL"] == ["hi"]
        assert data["cleaned_text"] == 'cout << "hi";'
        # Must be JSON serializable
        assert json.loads(json.dumps(data)) == data


# =============================================================================
# Test File Loading
# =============================================================================

class TestLoadSource:
    """Tests for load_source() and tokenize_file()."""

    def test_load_source(self, tmp_path):
        path = tmp_path / "prog.cpp"
        path.write_text("int main() {}\n")
        assert load_source(path) == "int main() {}\n"

    def test_load_source_accepts_str(self, tmp_path):
        path = tmp_path / "prog.cpp"
        path.write_text("x")
        assert load_source(str(path)) == "x"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.cpp"
        with pytest.raises(SourceFileError, match="no such file") as exc_info:
            load_source(path)
        assert exc_info.value.path == path
        assert str(exc_info.value).startswith(f"{path}: error: file could not be opened")
        assert "hint:" in str(exc_info.value)

    def test_directory(self, tmp_path):
        with pytest.raises(SourceFileError, match="is a directory"):
            load_source(tmp_path)

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "prog.cpp"
        path.write_text("x")
        with pytest.raises(SourceFileError, match="unknown encoding"):
            load_source(path, encoding="no-such-codec")

    def test_source_file_error_is_clex_error(self, tmp_path):
        with pytest.raises(ClexError):
            load_source(tmp_path / "nope.cpp")

    def test_undecodable_bytes_replaced(self, tmp_path):
        """Invalid UTF-8 becomes U+FFFD and scans as UNKNOWN."""
        path = tmp_path / "bad.cpp"
        path.write_bytes(b"int \xff;")
        result = tokenize_file(path)
        assert [(t.category, t.lexeme) for t in result.tokens] == [
            (TokenCategory.KEYWORD, "int"),
            (TokenCategory.UNKNOWN, "\ufffd"),
            (TokenCategory.SEPARATOR, ";"),
        ]

    def test_latin1_encoding(self, tmp_path):
        path = tmp_path / "latin.cpp"
        path.write_bytes(b"x\xe9")
        result = tokenize_file(path, encoding="latin-1")
        assert result.tokens[-1] == Token(TokenCategory.UNKNOWN, "é")

    def test_tokenize_file(self, tmp_path):
        path = tmp_path / "sample.cpp"
        path.write_text(SAMPLE)
        result = tokenize_file(path)
        assert result == tokenize(SAMPLE)
        assert "entry point" not in result.cleaned_text
        assert "shift" not in result.cleaned_text

    def test_tokenize_file_with_options(self, tmp_path):
        path = tmp_path / "u.cpp"
        path.write_text("_a b")
        result = tokenize_file(
            path,
            ScanOptions(keep_whitespace=False, underscore_identifiers=True),
        )
        assert [t.lexeme for t in result.tokens] == ["_a", "b"]
        assert result.cleaned_text == "_ab"
