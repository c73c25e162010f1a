"""
clex - Lexical Scanner for a C-like Language
============================================

This package scans C-like source text into a flat sequence of classified
tokens and produces a cleaned copy of the input with comments stripped.

Main Components
---------------
- **scanner**: the single-pass scanner (Scanner, Token, TokenCategory)
- **reporter**: file loading, token grouping and console report
- **cli**: the `clex` command-line tool

Quick Start
-----------
Scan a string:
    >>> from clex import tokenize
    >>> result = tokenize('cout << "hi";')
    >>> [t.category.name for t in result.tokens]
    ['KEYWORD', 'OPERATOR', 'LITERAL', 'SEPARATOR']

Scan a file and print the report:
    >>> from clex import tokenize_file, render_report
    >>> print(render_report(tokenize_file("hello.cpp")))

Or use the command-line tool:
    $ clex hello.cpp
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from clex.config import ReportOptions, ScanOptions
from clex.errors import ClexError, SourceFileError
from clex.scanner import (
    KEYWORDS,
    Scanner,
    ScanResult,
    Span,
    Token,
    TokenCategory,
    tokenize,
)
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

__all__ = [
    # Version info
    "__version__",
    # Configuration
    "ScanOptions",
    "ReportOptions",
    # Exception hierarchy
    "ClexError",
    "SourceFileError",
    # Scanner
    "KEYWORDS",
    "Scanner",
    "ScanResult",
    "Span",
    "Token",
    "TokenCategory",
    "tokenize",
    # Reporter
    "category_name",
    "format_cleaned_text",
    "format_token_list",
    "format_token_table",
    "group_tokens",
    "load_source",
    "render_report",
    "result_to_dict",
    "tokenize_file",
]
