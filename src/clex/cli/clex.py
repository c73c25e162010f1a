"""
clex - Scanner Command-Line Interface
=====================================

Scans a C-like source file and prints the cleaned-up input (comments
removed) followed by a table of unique tokens grouped by category.

Usage Examples
--------------
Basic report:
    $ clex hello.cpp

Also list every token in order:
    $ clex --tokens hello.cpp

Machine-readable output:
    $ clex --json hello.cpp

Bare concatenated cleaned text:
    $ clex --compact hello.cpp

Exit Codes
----------
0 - Success
1 - Source file could not be loaded
2 - Invalid arguments
3 - Internal error
"""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import click

from clex import __version__
from clex.cli.errors import handle_cli_exception
from clex.config import ReportOptions, ScanOptions
from clex.reporter import render_report, result_to_dict, tokenize_file

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(path_type=Path),
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Also list every token in scan order",
)
@click.option(
    "--no-cleaned",
    is_flag=True,
    help="Do not print the cleaned-up input",
)
@click.option(
    "--no-table",
    is_flag=True,
    help="Do not print the unique-token table",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens, groups and cleaned text as JSON",
)
@click.option(
    "--compact",
    is_flag=True,
    help="Drop whitespace from the cleaned text",
)
@click.option(
    "--underscore-identifiers",
    is_flag=True,
    help="Scan _name as one identifier instead of '_' + name",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: utf-8, or $CLEX_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="clex")
def main(
    input_file: Path,
    tokens: bool,
    no_cleaned: bool,
    no_table: bool,
    as_json: bool,
    compact: bool,
    underscore_identifiers: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Scan a C-like source file into classified tokens.

    INPUT_FILE is the source file to scan.

    \b
    Token categories:
        KEYWORD, IDENTIFIER, LITERAL, OPERATOR, SEPARATOR, UNKNOWN

    \b
    Examples:
        clex hello.cpp               # Cleaned text + token table
        clex --tokens hello.cpp      # Also list every token
        clex --json hello.cpp        # JSON output
    """
    setup_logging(verbose)

    scan_options = ScanOptions.from_env()
    if compact:
        scan_options = dataclasses.replace(scan_options, keep_whitespace=False)
    if underscore_identifiers:
        scan_options = dataclasses.replace(scan_options, underscore_identifiers=True)

    report_options = ReportOptions.from_env()
    if encoding:
        report_options.encoding = encoding
    if tokens:
        report_options.show_tokens = True
    if no_cleaned:
        report_options.show_cleaned = False
    if no_table:
        report_options.show_table = False

    try:
        logger.debug(f"Scanning {input_file} ({report_options.encoding})")
        result = tokenize_file(input_file, scan_options, report_options.encoding)

        if as_json:
            click.echo(json.dumps(result_to_dict(result), indent=2))
        else:
            click.echo(render_report(result, report_options))

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
