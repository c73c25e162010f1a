"""
clex Configuration
==================

Scanner and report settings. Configuration can come from:
- Default values (defined here)
- Environment variables (via from_env())
- Command-line flags (applied by the CLI on top of from_env())

Environment Variables
---------------------
CLEX_KEEP_WHITESPACE          Keep whitespace in the cleaned text (1/0)
CLEX_UNDERSCORE_IDENTIFIERS   Scan underscore-led identifiers (1/0)
CLEX_ENCODING                 Encoding used to read source files
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, ignoring unrecognised values."""
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass(frozen=True)
class ScanOptions:
    """
    Options controlling a single scan.

    Attributes:
        keep_whitespace: Copy whitespace into the cleaned text and replace
            each block comment with one space, so lexemes that were apart
            in the source stay apart. When False the cleaned text is the
            bare concatenation of lexemes.
        underscore_identifiers: Treat an underscore followed by letters,
            digits or underscores as one IDENTIFIER. When False a lone
            underscore is an UNKNOWN character.
    """

    keep_whitespace: bool = True
    underscore_identifiers: bool = False

    @classmethod
    def from_env(cls) -> "ScanOptions":
        """Create ScanOptions from CLEX_* environment variables."""
        defaults = cls()
        return cls(
            keep_whitespace=_env_flag(
                "CLEX_KEEP_WHITESPACE", defaults.keep_whitespace
            ),
            underscore_identifiers=_env_flag(
                "CLEX_UNDERSCORE_IDENTIFIERS", defaults.underscore_identifiers
            ),
        )


# =============================================================================
# Report Options
# =============================================================================

@dataclass
class ReportOptions:
    """
    Options controlling how a scan result is loaded and displayed.

    Attributes:
        encoding: Text encoding used when reading source files
        show_cleaned: Print the cleaned-up input
        show_tokens: Print every token in scan order
        show_table: Print the unique-token table grouped by category
        column_width: Width of the category column in the table
    """

    encoding: str = "utf-8"
    show_cleaned: bool = True
    show_tokens: bool = False
    show_table: bool = True
    column_width: int = 15

    @classmethod
    def from_env(cls) -> "ReportOptions":
        """Create ReportOptions from CLEX_* environment variables."""
        config = cls()

        if encoding := os.environ.get("CLEX_ENCODING"):
            config.encoding = encoding

        return config
