"""
Shared fixtures:

- **`restore_logging`** (autouse): puts the root logger back after tests
  that call `setup_logging`.
- **`fresh_settings`** (autouse): forgets cached settings so each test sees
  its own environment.
- **`make_workbook`**: builds an in-memory `FakeWorkbook` from lists of rows.
- **`make_xlsx`**: writes a real `.xlsx` file with openpyxl into `tmp_path`.
"""
import logging
from typing import Dict, List, Optional, Sequence

import pytest
from openpyxl import Workbook

from column_comparer.core.config import reset_settings
from column_comparer.engine.comparer.normalizer import normalize_cell_text
from column_comparer.interfaces import TabularSheet, TabularWorkbook


class FakeSheet(TabularSheet):
    """Sheet over a list of rows; column count is the widest row unless given."""

    def __init__(self, rows: List[List[object]], name: str = "Sheet1",
                 column_count: Optional[int] = None):
        self._name = name
        self.rows = rows
        self._column_count = (
            column_count if column_count is not None
            else max((len(r) for r in rows), default=0)
        )
        self.reads: List[tuple] = []

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
        self.reads.append((row, column))
        values = self.rows[row - 1]
        if column > len(values):
            return ""
        return normalize_cell_text(values[column - 1])


class FakeWorkbook(TabularWorkbook):
    def __init__(self, sheets: Sequence[FakeSheet]):
        self._sheets = list(sheets)
        self.closed = False

    @property
    def sheets(self):
        return self._sheets

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_workbook():
    def _make(*sheets: List[List[object]]) -> FakeWorkbook:
        return FakeWorkbook([
            FakeSheet(rows, name=f"Sheet{n}") for n, rows in enumerate(sheets, start=1)
        ])
    return _make


@pytest.fixture
def make_xlsx(tmp_path):
    def _make(sheets: Dict[str, List[List[object]]], name: str = "book.xlsx"):
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path
    return _make
