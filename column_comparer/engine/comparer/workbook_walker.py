"""
Workbook-level walk: scans every sheet and totals the differences.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import logging

from column_comparer.interfaces import TabularWorkbook, WorkbookProviderInterface
from column_comparer.engine.comparer.request import ComparisonRequest
from column_comparer.engine.comparer.sheet_scanner import Emit, SheetTally, scan_sheet

logger = logging.getLogger(__name__)


@dataclass
class WalkResult:
    """Totals of one workbook walk"""
    total_difference_count: int = 0
    sheets: List[SheetTally] = field(default_factory=list)


def walk_workbook(workbook: TabularWorkbook, request: ComparisonRequest, emit: Emit) -> WalkResult:
    """
    Compare the requested columns on every sheet of a workbook.

    Sheets are scanned one after the other in the workbook's own order.
    The report starts with the column pair and ends with the total.

    Args:
        workbook: Opened workbook
        request: Columns and display mode
        emit: Report sink

    Returns:
        WalkResult with the total and the per-sheet tallies
    """
    emit(request.describe())

    result = WalkResult()
    for sheet_number, sheet in enumerate(workbook.sheets, start=1):
        tally = scan_sheet(sheet, sheet_number, request, emit)
        result.sheets.append(tally)
        result.total_difference_count += tally.difference_count

    emit(f"Difference count: {result.total_difference_count}")

    logger.info(
        f"Compared {len(result.sheets)} sheet(s), "
        f"{result.total_difference_count} difference(s)"
    )
    return result


def compare_file(
    path: Path,
    request: ComparisonRequest,
    provider: WorkbookProviderInterface,
    emit: Emit,
) -> WalkResult:
    """
    Open a workbook through a provider, walk it and close it again.

    Raises:
        WorkbookOpenError: If the provider cannot open the file
    """
    logger.info(f"Opening {path} with {provider.get_name()}")
    with provider.open_workbook(path) as workbook:
        return walk_workbook(workbook, request, emit)
