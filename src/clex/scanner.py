"""
clex Scanner
============

This module implements the scanner for a small C-like language. It makes
one left-to-right pass over the source text and produces a flat sequence
of classified tokens plus a "cleaned" copy of the input with comments
removed.

Token Categories
----------------
- KEYWORD:    int, float, if, while, cout, #include, ... (fixed table)
- IDENTIFIER: any other alphabetic-led word
- LITERAL:    numbers (123, 3.14) and the content of "double quoted" strings
- OPERATOR:   + - * = < > ^ / and the shifts << >>
- SEPARATOR:  ( ) { } , ;
- UNKNOWN:    any other single character

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Robustness
----------
The scanner never raises on its input. Every byte either is skipped as
whitespace or comment text, or ends up in a token (UNKNOWN if nothing else
fits). Unterminated strings and comments run to the end of the input.

Example Usage
-------------
>>> from clex.scanner import Scanner
>>> result = Scanner('int x = 42; // answer').tokenize()
>>> for token in result.tokens:
...     print(token)
Token(KEYWORD, 'int')
Token(IDENTIFIER, 'x')
Token(OPERATOR, '=')
Token(LITERAL, '42')
Token(SEPARATOR, ';')
>>> result.cleaned_text
'int x = 42; '
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional
import logging
import string

from clex.config import ScanOptions

logger = logging.getLogger(__name__)


# =============================================================================
# Token Category Enumeration
# =============================================================================

class TokenCategory(Enum):
    """
    Closed set of token categories.

    Member order is the display order used by the reporter.
    """

    KEYWORD = auto()
    IDENTIFIER = auto()
    LITERAL = auto()
    OPERATOR = auto()
    SEPARATOR = auto()
    UNKNOWN = auto()


# =============================================================================
# Keyword Table
# =============================================================================

# Language keywords, built-in type names, and a few standard library names
# that this toy grammar treats as keywords. Read-only after import.
KEYWORDS: Mapping[str, TokenCategory] = MappingProxyType({
    # Types
    "int": TokenCategory.KEYWORD,
    "float": TokenCategory.KEYWORD,
    "string": TokenCategory.KEYWORD,
    "void": TokenCategory.KEYWORD,

    # Control flow
    "if": TokenCategory.KEYWORD,
    "else": TokenCategory.KEYWORD,
    "while": TokenCategory.KEYWORD,
    "do": TokenCategory.KEYWORD,
    "for": TokenCategory.KEYWORD,
    "return": TokenCategory.KEYWORD,

    # Standard library and preprocessor
    "#include": TokenCategory.KEYWORD,
    "using": TokenCategory.KEYWORD,
    "namespace": TokenCategory.KEYWORD,
    "std": TokenCategory.KEYWORD,
    "cout": TokenCategory.KEYWORD,
    "endl": TokenCategory.KEYWORD,
    "iostream": TokenCategory.KEYWORD,
    "fstream": TokenCategory.KEYWORD,
    "vector": TokenCategory.KEYWORD,
})

OPERATOR_CHARS = "+-*=<>^/"
SEPARATOR_CHARS = "(){},;"
SHIFT_OPERATORS = ("<<", ">>")


# =============================================================================
# Character Classification
# =============================================================================

def is_whitespace(char: str) -> bool:
    return char in (" ", "\t", "\n", "\r")


def is_alpha(char: str) -> bool:
    """ASCII letters only; non-ASCII letters are not alphabetic here."""
    return char != "" and char in string.ascii_letters


def is_digit(char: str) -> bool:
    return char != "" and char in string.digits


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


# =============================================================================
# Token and Result Data Classes
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        category: The TokenCategory classification
        lexeme: The source text of the token. For string literals this is
            the inner content with escape backslashes removed.
    """
    category: TokenCategory
    lexeme: str

    def __repr__(self) -> str:
        return f"Token({self.category.name}, {self.lexeme!r})"


@dataclass(frozen=True)
class Span:
    """Half-open range [start, end) of source offsets covered by a lexeme."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ScanResult:
    """
    Output of one scan.

    Attributes:
        tokens: Tokens in source order
        cleaned_text: The input with comments removed
    """
    tokens: tuple[Token, ...]
    cleaned_text: str

    @property
    def categories(self) -> list[TokenCategory]:
        """Category of each token, in order."""
        return [token.category for token in self.tokens]


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes C-like source text.

    Each iteration of the main loop takes exactly one branch, checked in
    this order:

    1. whitespace
    2. block comment (/* ... */) and line comment (// ...)
    3. directive (#word)
    4. word, underscore identifier, number
    5. shift operator, operator, separator
    6. string literal
    7. unknown character

    Sub-scans return a Span and the loop moves the cursor to its end, so
    the cursor always sits on the first character not yet consumed.

    A Scanner is good for one scan. Calling tokenize() again returns the
    first result without rescanning.

    Usage:
        scanner = Scanner(source_text)
        result = scanner.tokenize()
        result.tokens, result.cleaned_text
    """

    def __init__(self, source: str, options: Optional[ScanOptions] = None):
        """
        Args:
            source: The full source text to scan
            options: Scan options (defaults to ScanOptions())
        """
        self.source = source
        self.options = options or ScanOptions()

        self._pos = 0
        self._tokens: list[Token] = []
        self._cleaned: list[str] = []
        self._result: Optional[ScanResult] = None

    def tokenize(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult with the tokens and the cleaned text
        """
        if self._result is not None:
            return self._result

        while not self._at_end():
            self._scan_next()

        self._result = ScanResult(
            tokens=tuple(self._tokens),
            cleaned_text="".join(self._cleaned),
        )
        logger.debug(
            f"Scanned {len(self.source)} characters into "
            f"{len(self._tokens)} tokens"
        )
        return self._result

    @property
    def cleaned_text(self) -> str:
        """Cleaned text accumulated so far."""
        return "".join(self._cleaned)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _lookahead(self, length: int) -> str:
        """Return up to `length` characters from the cursor, clamped to the end."""
        return self.source[self._pos:self._pos + length]

    # =========================================================================
    # Output Helpers
    # =========================================================================

    def _emit(self, category: TokenCategory, lexeme: str) -> None:
        """Record a token and echo its lexeme into the cleaned text."""
        self._tokens.append(Token(category, lexeme))
        self._cleaned.append(lexeme)

    def _emit_span(self, category: TokenCategory, span: Span) -> None:
        self._emit(category, self.source[span.start:span.end])
        self._pos = span.end

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_next(self) -> None:
        """Consume one whitespace character, one comment, or one token."""
        char = self._peek()
        pair = self._lookahead(2)

        if is_whitespace(char):
            self._skip_whitespace()
        elif pair == "/*":
            self._skip_block_comment()
        elif pair == "//":
            self._skip_line_comment()
        elif char == "#":
            self._scan_directive()
        elif is_alpha(char):
            self._scan_word()
        elif char == "_" and self.options.underscore_identifiers:
            self._emit_span(TokenCategory.IDENTIFIER, self._underscore_span(self._pos))
        elif is_digit(char):
            self._emit_span(TokenCategory.LITERAL, self._number_span(self._pos))
        elif pair in SHIFT_OPERATORS:
            self._emit_span(TokenCategory.OPERATOR, Span(self._pos, self._pos + 2))
        elif char in OPERATOR_CHARS:
            self._emit_span(TokenCategory.OPERATOR, Span(self._pos, self._pos + 1))
        elif char in SEPARATOR_CHARS:
            self._emit_span(TokenCategory.SEPARATOR, Span(self._pos, self._pos + 1))
        elif char == '"':
            self._scan_string()
        else:
            self._emit_span(TokenCategory.UNKNOWN, Span(self._pos, self._pos + 1))

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        if self.options.keep_whitespace:
            self._cleaned.append(self._peek())
        self._pos += 1

    def _skip_block_comment(self) -> None:
        """
        Skip a /* ... */ comment, closing delimiter included.

        The search for */ starts after the opening /*, so "/*/" does not
        close itself. An unterminated comment runs to the end of input.
        """
        close = self.source.find("*/", self._pos + 2)
        if close == -1:
            logger.debug(f"Unterminated block comment at offset {self._pos}")
            end = len(self.source)
        else:
            end = close + 2

        # Keep neighbouring lexemes apart: a/**/b must not become "ab"
        if self.options.keep_whitespace:
            self._cleaned.append(" ")
        self._pos = end

    def _skip_line_comment(self) -> None:
        """Skip a // comment up to, not including, the newline."""
        newline = self.source.find("\n", self._pos)
        self._pos = len(self.source) if newline == -1 else newline

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_directive(self) -> None:
        """
        Scan a preprocessor directive such as #include.

        The # and the alphanumeric run after it form one KEYWORD lexeme.
        A # with nothing alphanumeric after it is an UNKNOWN character.
        """
        word = self._word_span(self._pos + 1)
        if len(word) == 0:
            logger.debug(f"Bare '#' at offset {self._pos}")
            self._emit_span(TokenCategory.UNKNOWN, Span(self._pos, self._pos + 1))
            return
        self._emit_span(TokenCategory.KEYWORD, Span(self._pos, word.end))

    def _scan_word(self) -> None:
        """Scan an alphabetic-led word and classify it as keyword or identifier."""
        span = self._word_span(self._pos)
        word = self.source[span.start:span.end]
        category = KEYWORDS.get(word, TokenCategory.IDENTIFIER)
        self._emit_span(category, span)

    def _word_span(self, start: int) -> Span:
        """
        Maximal run of ASCII letters and digits starting at `start`.

        Underscores end the run. A run that reaches the end of input is
        returned whole.
        """
        end = start
        while end < len(self.source) and is_alphanumeric(self.source[end]):
            end += 1
        return Span(start, end)

    def _underscore_span(self, start: int) -> Span:
        """Maximal run of letters, digits and underscores starting at `start`."""
        end = start
        while end < len(self.source) and (
            is_alphanumeric(self.source[end]) or self.source[end] == "_"
        ):
            end += 1
        return Span(start, end)

    def _number_span(self, start: int) -> Span:
        """
        Maximal run of digits containing at most one decimal point.

        A second '.' ends the run and is left for the next iteration, so
        "3.14.15" scans as 3.14 then '.' then 15.
        """
        end = start
        seen_point = False
        while end < len(self.source):
            char = self.source[end]
            if char == ".":
                if seen_point:
                    logger.debug(f"Second decimal point at offset {end} ends number")
                    break
                seen_point = True
            elif not is_digit(char):
                break
            end += 1
        return Span(start, end)

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        A backslash is dropped and the character after it is kept as-is,
        so \\" does not close the string. The token holds only the inner
        content; an empty string produces no token. The cleaned text gets
        the raw inner text between quotes.

        If the input ends before the closing quote, whatever was collected
        becomes the literal. A backslash that is the last character of the
        input is dropped from both the literal and the cleaned text.
        """
        start = self._pos + 1
        pos = start
        chars = []
        raw_end = None

        while pos < len(self.source):
            char = self.source[pos]
            if char == "\\":
                if pos + 1 >= len(self.source):
                    logger.debug(f"Dangling backslash at offset {pos} dropped")
                    break
                chars.append(self.source[pos + 1])
                pos += 2
                continue
            if char == '"':
                raw_end = pos
                pos += 1
                break
            chars.append(char)
            pos += 1

        if raw_end is None:
            logger.debug(f"Unterminated string literal at offset {self._pos}")
            raw_end = pos
            pos = len(self.source)

        content = "".join(chars)
        if content:
            self._tokens.append(Token(TokenCategory.LITERAL, content))
        self._cleaned.append('"' + self.source[start:raw_end] + '"')
        self._pos = pos


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str, options: Optional[ScanOptions] = None) -> ScanResult:
    """
    Scan source text with a fresh Scanner.

    Args:
        source: The source text
        options: Scan options (defaults to ScanOptions())

    Returns:
        ScanResult with the tokens and the cleaned text
    """
    return Scanner(source, options).tokenize()
