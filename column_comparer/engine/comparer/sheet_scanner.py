"""
Sheet-level scan: compares the two requested columns on every row of a sheet.
"""
from dataclasses import dataclass
from typing import Callable, Iterator
import logging

from column_comparer.interfaces import TabularSheet
from column_comparer.engine.comparer.request import ComparisonRequest
from column_comparer.engine.comparer.row_comparator import DifferenceRecord, compare_row

logger = logging.getLogger(__name__)

# Report sink, receives one line at a time
Emit = Callable[[str], None]


@dataclass(frozen=True)
class SheetTally:
    """Outcome of scanning one sheet"""
    sheet_number: int
    sheet_name: str
    row_count: int
    column_count: int
    in_range: bool
    difference_count: int


def columns_in_range(column1: int, column2: int, column_count: int) -> bool:
    """Check that both columns lie within [1, column_count]."""
    return 1 <= column1 <= column_count and 1 <= column2 <= column_count


def iter_differences(sheet: TabularSheet, request: ComparisonRequest) -> Iterator[DifferenceRecord]:
    """
    Lazily yield the differences of one sheet, in ascending row order.

    Nothing is yielded when either column lies outside the sheet.

    Args:
        sheet: Sheet to scan
        request: Columns and display mode

    Yields:
        DifferenceRecord for each differing row
    """
    row_count = sheet.row_count
    column_count = sheet.column_count

    if not columns_in_range(request.column1, request.column2, column_count):
        return

    full_row_width = column_count if request.full_row_enabled else None

    for row in range(1, row_count + 1):
        record = compare_row(
            row,
            request.column1,
            request.column2,
            sheet.cell_text,
            full_row_width=full_row_width,
        )
        if record is not None:
            yield record


def scan_sheet(
    sheet: TabularSheet,
    sheet_number: int,
    request: ComparisonRequest,
    emit: Emit,
) -> SheetTally:
    """
    Scan one sheet and write its block of the report.

    Emits, in order: the row/column count header, one line per difference,
    and the sheet difference count.

    Args:
        sheet: Sheet to scan
        sheet_number: 1-based position of the sheet in its workbook
        request: Columns and display mode
        emit: Report sink

    Returns:
        SheetTally for this sheet
    """
    row_count = sheet.row_count
    column_count = sheet.column_count
    in_range = columns_in_range(request.column1, request.column2, column_count)

    logger.debug(
        f"Scanning sheet {sheet_number} '{sheet.name}' "
        f"({row_count} rows, {column_count} columns)"
    )
    emit(f"sheet{sheet_number} - row count: {row_count}, column count: {column_count}")

    if not in_range:
        logger.debug(
            f"Columns {request.column1},{request.column2} outside sheet '{sheet.name}', skipped"
        )

    difference_count = 0
    for record in iter_differences(sheet, request):
        emit(record.display_line(request.separator))
        difference_count += 1

    emit(f"Sheet difference count: {difference_count}")

    return SheetTally(
        sheet_number=sheet_number,
        sheet_name=sheet.name,
        row_count=row_count,
        column_count=column_count,
        in_range=in_range,
        difference_count=difference_count,
    )
