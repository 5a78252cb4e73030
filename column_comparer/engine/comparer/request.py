"""
The immutable input of one comparison run.
"""
from dataclasses import dataclass

from column_comparer.engine.comparer.csv_encoder import DEFAULT_SEPARATOR


@dataclass(frozen=True)
class ComparisonRequest:
    """
    Which two columns to compare and how to print differences.

    The separator is fixed here so that a whole report run uses one value.

    Raises:
        ValueError: If a column is not a positive integer or the separator
            is not a single character
    """
    column1: int
    column2: int
    full_row_enabled: bool = False
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        for name in ("column1", "column2"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(f"separator must be a single character, got {self.separator!r}")

    def describe(self) -> str:
        """Leading report line naming the column pair."""
        return f"column1: {self.column1}, column2: {self.column2}"
