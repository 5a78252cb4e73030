"""Column comparison engine"""

from .csv_encoder import DEFAULT_SEPARATOR, encode_csv_line
from .request import ComparisonRequest
from .row_comparator import DifferenceRecord, compare_row
from .sheet_scanner import SheetTally, iter_differences, scan_sheet
from .workbook_walker import WalkResult, compare_file, walk_workbook

__all__ = [
    'DEFAULT_SEPARATOR',
    'encode_csv_line',
    'ComparisonRequest',
    'DifferenceRecord',
    'compare_row',
    'SheetTally',
    'iter_differences',
    'scan_sheet',
    'WalkResult',
    'compare_file',
    'walk_workbook',
]
