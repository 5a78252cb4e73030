"""
CsvWorkbookProvider - reads a .csv file as a workbook with one sheet.
"""

import csv
from pathlib import Path
from typing import List, Sequence
import logging

from column_comparer.interfaces import (
    TabularSheet,
    TabularWorkbook,
    WorkbookOpenError,
    WorkbookProviderInterface,
)
from column_comparer.engine.comparer.normalizer import normalize_cell_text

logger = logging.getLogger(__name__)


class CsvSheet(TabularSheet):
    """
    Sheet over parsed CSV rows.

    Rows may be ragged: the column count is the widest row, and cells past
    the end of a shorter row read as ''.
    """

    def __init__(self, name: str, rows: List[List[str]]):
        self._name = name
        self.rows = rows
        self._column_count = max((len(r) for r in rows), default=0)

    @property
    def name(self) -> str:
        return self._name

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return self._column_count

    def cell_text(self, row: int, column: int) -> str:
        if not 1 <= row <= len(self.rows):
            return ""
        values = self.rows[row - 1]
        if not 1 <= column <= len(values):
            return ""
        return normalize_cell_text(values[column - 1])


class CsvWorkbook(TabularWorkbook):
    """Workbook holding a single CsvSheet"""

    def __init__(self, sheet: CsvSheet):
        self._sheets = [sheet]

    @property
    def sheets(self) -> Sequence[TabularSheet]:
        return self._sheets


class CsvWorkbookProvider(WorkbookProviderInterface):
    """
    CSV provider.

    Config keys:
        - delimiter: Field delimiter of the input (optional, default: ',')
        - encoding: File encoding (optional, default: 'utf-8-sig')
    """

    def __init__(self, config: dict):
        super().__init__(config)
        self.delimiter = config.get('delimiter', ',')
        self.encoding = config.get('encoding', 'utf-8-sig')

    def open_workbook(self, path: Path) -> TabularWorkbook:
        """
        Parse a CSV file into a one-sheet workbook named after the file stem.

        Raises:
            WorkbookOpenError: If the file is missing or cannot be decoded/parsed
        """
        path = Path(path)
        if not path.is_file():
            raise WorkbookOpenError(f"File not found: {path}")

        try:
            with open(path, 'r', newline='', encoding=self.encoding) as f:
                rows = list(csv.reader(f, delimiter=self.delimiter))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error(f"Failed to read CSV {path}: {e}")
            raise WorkbookOpenError(f"Cannot open CSV file {path}: {e}") from e

        logger.info(f"✓ CSV loaded ({len(rows)} rows)")
        return CsvWorkbook(CsvSheet(path.stem, rows))

    def get_name(self) -> str:
        return 'CsvWorkbookProvider'
