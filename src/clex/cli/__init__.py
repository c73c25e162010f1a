"""
clex Command-Line Interface
===========================

- **clex**: scan a source file and print the cleaned text and token table

The tool is a Click-based CLI application with help text and
consistent exit codes (see clex.cli.errors).
"""

__all__ = ["clex"]
