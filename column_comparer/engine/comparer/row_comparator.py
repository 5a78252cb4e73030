"""
Row-level comparison of two columns.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import logging

from column_comparer.engine.comparer.csv_encoder import DEFAULT_SEPARATOR, encode_csv_line
from column_comparer.engine.comparer.normalizer import normalize_cell_text

logger = logging.getLogger(__name__)

# (row, column) -> cell text, both 1-based
CellReader = Callable[[int, int], str]


@dataclass(frozen=True)
class DifferenceRecord:
    """One row where the two compared columns hold different text"""
    row: int
    column1: int
    column2: int
    text1: str
    text2: str
    full_row: Optional[Tuple[str, ...]] = None

    def display_line(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Render the report line for this difference.

        Full-row records print the whole row as CSV, the others print
        both cell positions and their values.
        """
        if self.full_row is not None:
            return encode_csv_line(self.full_row, separator)
        return (
            f"(row:{self.row}, column1:{self.column1}) - [{self.text1}] - "
            f"(row:{self.row}, column2:{self.column2}) - [{self.text2}]"
        )


def read_cell(cell_reader: CellReader, row: int, column: int) -> str:
    """
    Read one cell through the reader, blank-normalized.

    A failing reader yields "" instead of an exception.
    """
    try:
        value = cell_reader(row, column)
    except Exception as e:
        logger.debug(f"Could not read cell (row:{row}, column:{column}): {e}")
        return ""
    return normalize_cell_text(value)


def read_row_texts(cell_reader: CellReader, row: int, column_count: int) -> List[str]:
    """
    Read all cells of a row, left to right.

    Args:
        cell_reader: Cell accessor
        row: Row number (1-based)
        column_count: Number of columns to read

    Returns:
        List of column_count normalized texts
    """
    return [read_cell(cell_reader, row, column) for column in range(1, column_count + 1)]


def compare_row(
    row: int,
    column1: int,
    column2: int,
    cell_reader: CellReader,
    full_row_width: Optional[int] = None,
) -> Optional[DifferenceRecord]:
    """
    Compare two cells of one row.

    Equality is exact string equality after blank normalization, so case
    and inner/outer whitespace of non-blank text matter.

    Args:
        row: Row number (1-based)
        column1: First column (1-based)
        column2: Second column (1-based)
        cell_reader: Cell accessor
        full_row_width: When given, the record also carries this many
            cells of the row

    Returns:
        DifferenceRecord when the texts differ, otherwise None
    """
    text1 = read_cell(cell_reader, row, column1)
    text2 = read_cell(cell_reader, row, column2)

    if text1 == text2:
        return None

    full_row = None
    if full_row_width is not None:
        full_row = tuple(read_row_texts(cell_reader, row, full_row_width))

    return DifferenceRecord(
        row=row,
        column1=column1,
        column2=column2,
        text1=text1,
        text2=text2,
        full_row=full_row,
    )
