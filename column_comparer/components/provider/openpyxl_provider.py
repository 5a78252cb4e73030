"""
OpenpyxlWorkbookProvider - WorkbookProviderInterface implementation for .xlsx/.xlsm

Reads cached cell values (data_only=True), so formula cells compare by the
result Excel last calculated, not by the formula text.
"""

from pathlib import Path
from typing import List, Sequence
import logging
import warnings

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from column_comparer.interfaces import (
    TabularSheet,
    TabularWorkbook,
    WorkbookOpenError,
    WorkbookProviderInterface,
)
from column_comparer.engine.comparer.normalizer import normalize_cell_text

logger = logging.getLogger(__name__)


class OpenpyxlSheet(TabularSheet):
    """TabularSheet backed by an openpyxl Worksheet"""

    def __init__(self, worksheet: Worksheet):
        self.worksheet = worksheet

    @property
    def name(self) -> str:
        return self.worksheet.title

    @property
    def row_count(self) -> int:
        return self.worksheet.max_row

    @property
    def column_count(self) -> int:
        return self.worksheet.max_column

    def cell_text(self, row: int, column: int) -> str:
        # Worksheet.cell() would create and keep a cell for every empty position read
        cell = self.worksheet._cells.get((row, column))
        if cell is None:
            return ""
        return normalize_cell_text(cell.value)


class OpenpyxlWorkbook(TabularWorkbook):
    """TabularWorkbook backed by an openpyxl Workbook (worksheets only, no chartsheets)"""

    def __init__(self, workbook: Workbook):
        self.workbook = workbook
        self._sheets: List[OpenpyxlSheet] = [OpenpyxlSheet(ws) for ws in workbook.worksheets]

    @property
    def sheets(self) -> Sequence[TabularSheet]:
        return self._sheets

    def close(self) -> None:
        self.workbook.close()


class OpenpyxlWorkbookProvider(WorkbookProviderInterface):
    """
    Openpyxl-based provider.

    Config keys:
        - max_file_size_mb: Refuse larger files (optional, default: 200)
    """

    SUPPORTED_EXTENSIONS = ['.xlsx', '.xlsm', '.xltx', '.xltm']

    def __init__(self, config: dict):
        super().__init__(config)
        self.max_file_size_mb = config.get('max_file_size_mb', 200)

    def open_workbook(self, path: Path) -> TabularWorkbook:
        """
        Open an Excel workbook with openpyxl.

        Args:
            path: Path to .xlsx/.xlsm file

        Returns:
            OpenpyxlWorkbook

        Raises:
            WorkbookOpenError: If the file is missing, too large, of an
                unsupported type or cannot be parsed
        """
        path = Path(path)
        self._validate_file(path)

        try:
            # Suppress openpyxl warnings about unsupported features (conditional formatting, etc.)
            with warnings.catch_warnings():
                warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')
                wb = load_workbook(filename=str(path), data_only=True)
        except Exception as e:
            logger.error(f"Failed to load workbook {path}: {e}", exc_info=True)
            raise WorkbookOpenError(f"Cannot open workbook {path}: {e}") from e

        logger.info(f"✓ Workbook loaded ({len(wb.worksheets)} sheets)")
        return OpenpyxlWorkbook(wb)

    def _validate_file(self, path: Path) -> None:
        if not path.is_file():
            raise WorkbookOpenError(f"File not found: {path}")

        file_size_mb = path.stat().st_size / (1024 * 1024)
        if file_size_mb > self.max_file_size_mb:
            raise WorkbookOpenError(
                f"File too large: {file_size_mb:.1f}MB "
                f"(max: {self.max_file_size_mb}MB)"
            )

        # .xls and .xlsb are not readable by openpyxl
        if path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            raise WorkbookOpenError(
                f"Unsupported file type: {path.suffix} "
                f"(supported: {', '.join(self.SUPPORTED_EXTENSIONS)})"
            )

    def get_name(self) -> str:
        return 'OpenpyxlWorkbookProvider'
