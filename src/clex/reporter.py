"""
clex Reporter
=============

Display helpers around the scanner: loading a source file, grouping tokens
by category, and formatting the console report.

Report Layout
-------------
    Cleaned-up Input:
    int main() { cout << "hi"; }


    Category       Tokens
    -----------------------------------
    KEYWORD        cout   int
    IDENTIFIER     main
    LITERAL        hi
    OPERATOR       <<
    SEPARATOR      (   )   ;   {   }

Categories appear in TokenCategory order and only when at least one token
of that category was found. Lexemes within a category are unique and
sorted.
"""

from pathlib import Path
from typing import Iterable, Optional, Union
import logging

from clex.config import ReportOptions, ScanOptions
from clex.errors import SourceFileError
from clex.scanner import ScanResult, Token, TokenCategory, tokenize

logger = logging.getLogger(__name__)

TABLE_RULE_WIDTH = 35
LEXEME_SEPARATOR = "   "


def category_name(category: TokenCategory) -> str:
    """Display name of a category, e.g. "KEYWORD"."""
    return category.name


# =============================================================================
# Grouping
# =============================================================================

def group_tokens(tokens: Iterable[Token]) -> dict[TokenCategory, list[str]]:
    """
    Group token lexemes by category.

    Duplicate lexemes collapse within a category; the same lexeme may still
    appear under two categories.

    Args:
        tokens: Tokens in any order

    Returns:
        Mapping of category to sorted unique lexemes, in TokenCategory order
    """
    buckets: dict[TokenCategory, set[str]] = {}
    for token in tokens:
        buckets.setdefault(token.category, set()).add(token.lexeme)

    return {
        category: sorted(buckets[category])
        for category in TokenCategory
        if category in buckets
    }


# =============================================================================
# Formatting
# =============================================================================

def format_token_list(tokens: Iterable[Token]) -> str:
    """One "Type: ..., Value: ..." line per token, in scan order."""
    return "\n".join(
        f"Type: {category_name(token.category)}, Value: {token.lexeme}"
        for token in tokens
    )


def format_token_table(
    groups: dict[TokenCategory, list[str]],
    column_width: int = 15,
) -> str:
    """
    Format grouped lexemes as a two-column table.

    Args:
        groups: Output of group_tokens()
        column_width: Width of the category column

    Returns:
        Table text, one row per category
    """
    lines = [
        f"{'Category':<{column_width}}{'Tokens':<{column_width}}",
        "-" * TABLE_RULE_WIDTH,
    ]
    for category, lexemes in groups.items():
        row = f"{category_name(category):<{column_width}}"
        row += "".join(lexeme + LEXEME_SEPARATOR for lexeme in lexemes)
        lines.append(row)
    return "\n".join(lines)


def format_cleaned_text(text: str) -> str:
    return f"Cleaned-up Input:\n{text}\n"


def render_report(
    result: ScanResult,
    options: Optional[ReportOptions] = None,
) -> str:
    """
    Build the full console report for a scan.

    Sections, each optional per ReportOptions: cleaned text, every token in
    order, and the unique-token table.
    """
    options = options or ReportOptions()
    sections = []

    if options.show_cleaned:
        sections.append(format_cleaned_text(result.cleaned_text))

    if options.show_tokens and result.tokens:
        sections.append(format_token_list(result.tokens) + "\n")

    if options.show_table:
        groups = group_tokens(result.tokens)
        sections.append(format_token_table(groups, options.column_width))

    return "\n".join(sections)


def result_to_dict(result: ScanResult) -> dict:
    """JSON-ready form of a scan result."""
    return {
        "tokens": [
            {"category": category_name(token.category), "lexeme": token.lexeme}
            for token in result.tokens
        ],
        "groups": {
            category_name(category): lexemes
            for category, lexemes in group_tokens(result.tokens).items()
        },
        "cleaned_text": result.cleaned_text,
    }


# =============================================================================
# File Loading
# =============================================================================

def load_source(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a source file into memory.

    Undecodable bytes are replaced rather than rejected; the scanner will
    report them as UNKNOWN characters.

    Raises:
        SourceFileError: If the file is missing, a directory, or unreadable
    """
    path = Path(path)

    if not path.exists():
        raise SourceFileError(path, "no such file", hint="check the path and try again")
    if path.is_dir():
        raise SourceFileError(path, "is a directory")

    try:
        text = path.read_text(encoding=encoding, errors="replace")
    except LookupError as e:
        raise SourceFileError(path, f"unknown encoding '{encoding}'") from e
    except OSError as e:
        raise SourceFileError(path, e.strerror or str(e)) from e

    logger.debug(f"Loaded {len(text)} characters from {path}")
    return text


def tokenize_file(
    path: Union[str, Path],
    options: Optional[ScanOptions] = None,
    encoding: str = "utf-8",
) -> ScanResult:
    """
    Load a source file and scan it.

    Raises:
        SourceFileError: If the file cannot be loaded (nothing is scanned)
    """
    source = load_source(path, encoding)
    return tokenize(source, options)
