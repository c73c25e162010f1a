"""
clex Error Hierarchy
====================

This module defines the exception hierarchy for clex. All exceptions
inherit from ClexError, allowing callers to catch every clex error with
a single except clause.

Exception Hierarchy
-------------------
ClexError (base)
└── SourceFileError - source file missing, unreadable, or not a file

The scanner itself never raises: unknown characters, unterminated strings
and unterminated comments are recovered locally and show up in the token
stream instead. Errors only happen at the file boundary, before any
scanning starts.

Error messages follow this format:
    path: error: description
    hint: suggestion for fixing (when available)
"""

from pathlib import Path
from typing import Optional, Union


# =============================================================================
# Base Exception Class
# =============================================================================

class ClexError(Exception):
    """
    Base exception for all clex errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Source File Errors
# =============================================================================

class SourceFileError(ClexError):
    """
    A source file could not be loaded.

    Raised by the reporter when the input path does not exist, names a
    directory, or cannot be read. The scanner is never invoked in that case.

    Attributes:
        path: The offending path
        reason: Short description of what went wrong
    """

    def __init__(
        self,
        path: Union[str, Path],
        reason: str,
        hint: Optional[str] = None,
    ):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"file could not be opened: {reason}", hint=hint)

    def _format_message(self) -> str:
        """
        Prefix the message with the path, e.g.:

            missing.cpp: error: file could not be opened: no such file
            hint: check the path and try again
        """
        parts = [f"{self.path}: error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)
