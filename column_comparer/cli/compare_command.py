"""
Compare Command - Compare two columns of every sheet in a workbook

Options can be given as -i / -I / /i / /I (and likewise for -c, -f, -s).
Missing or invalid required options print the usage text and nothing is
compared.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from column_comparer.core.config import get_settings
from column_comparer.engine.comparer import ComparisonRequest, compare_file
from column_comparer.interfaces import WorkbookOpenError
from column_comparer.registry import register_all_components, registry
from column_comparer.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)

PROG_NAME = 'column-comparer'

USAGE = (
    f"Usage:\n{PROG_NAME} -i targetExcelFilePath -c column1,column2 -f\n"
    "\n"
    "-i targetExcelFilePath\tExcel file path.\n"
    "-c column1,column2\tFirst column and second column to compare.\n"
    "-f\t\t\tShow full row.\n"
    "-s separator\t\tSeparator used for full rows (default: ,).\n"
    "\n"
    "ex.\n"
    "\n"
    f"{PROG_NAME} -i xxx.xlsx -c 1,2"
)

CONTEXT_SETTINGS = dict(
    # -I and /I behave like -i and /i
    token_normalize_func=lambda token: token.lower(),
    ignore_unknown_options=True,
    allow_extra_args=True,
    help_option_names=['-h', '--help'],
)


def print_usage() -> None:
    click.echo(USAGE)


def resolve_input_path(text: Optional[str]) -> Optional[Path]:
    """Absolute path of an existing file, or None."""
    if not text or not text.strip():
        return None
    path = Path(text)
    if not path.is_file():
        logger.debug(f"Input file does not exist: {text}")
        return None
    return path.resolve()


def parse_columns(text: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse 'column1,column2'.

    Extra comma-separated parts after the first two are ignored.

    Returns:
        (column1, column2), or None if there are fewer than two parts or
        either of the first two is not an integer
    """
    if not text:
        return None
    parts = text.split(',')
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        logger.debug(f"Columns are not integers: {text}")
        return None


class UsageOnErrorCommand(click.Command):
    """Command that prints the usage text instead of click's parse errors."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug(f"Invalid command line: {e}")
            print_usage()
            ctx.exit(0)


@click.command(
    PROG_NAME,
    cls=UsageOnErrorCommand,
    context_settings=CONTEXT_SETTINGS,
)
@click.option('-i', '/i', 'input_path', default=None, metavar='PATH',
              help='Excel file path.')
@click.option('-c', '/c', 'columns', default=None, metavar='COLUMN1,COLUMN2',
              help='First column and second column to compare.')
@click.option('-f', '/f', 'full_row', is_flag=True, default=False,
              help='Show full row.')
@click.option('-s', '/s', 'separator', default=None, metavar='CHAR',
              help='Separator used for full rows (default: from configuration, ",").')
def compare_command(input_path, columns, full_row, separator):
    """
    Report rows where two columns of every sheet differ.

    \b
    Examples:
      # Compare columns 1 and 2 of every sheet
      column-comparer -i book.xlsx -c 1,2

      # Print the whole differing row as CSV
      column-comparer -i book.xlsx -c 1,3 -f

      # Same, separated by semicolons
      column-comparer -i book.xlsx -c 1,3 -f -s ";"
    """
    try:
        settings = get_settings()
    except ValidationError:
        # Bad settings are a usage error like bad options
        print_usage()
        return

    setup_logging(log_level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, component=PROG_NAME)

    target = resolve_input_path(input_path)
    column_pair = parse_columns(columns)
    if target is None or column_pair is None:
        print_usage()
        return

    try:
        request = ComparisonRequest(
            column1=column_pair[0],
            column2=column_pair[1],
            full_row_enabled=full_row,
            separator=separator if separator is not None else settings.CSV_SEPARATOR,
        )
    except ValueError as e:
        logger.debug(f"Invalid comparison request: {e}")
        print_usage()
        return

    register_all_components()
    try:
        provider = registry.provider_for_path(target, {}, default=settings.DEFAULT_PROVIDER)
    except ValueError as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    try:
        compare_file(target, request, provider, click.echo)
    except WorkbookOpenError as e:
        logger.error(f"Comparison aborted: {e}")
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)


def main():
    """Console script entry point"""
    compare_command(prog_name=PROG_NAME)
