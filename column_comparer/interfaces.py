"""
Column Comparer - Tabular Data Provider Interfaces

WHAT THIS FILE DOES:
    Defines the read-only contract between the comparison engine and whatever
    actually holds the spreadsheet. The engine never touches openpyxl (or any
    other library) directly, it only sees these interfaces.

THE THREE INTERFACES:
    1. WorkbookProviderInterface - Open a file and hand back a TabularWorkbook
    2. TabularWorkbook - An ordered collection of sheets
    3. TabularSheet - Row/column extent plus cell text lookup (1-based)

EXAMPLE USAGE:
    from column_comparer.registry import registry

    provider = registry.create_provider('openpyxl', {})
    with provider.open_workbook(Path('book.xlsx')) as workbook:
        for sheet in workbook.sheets:
            print(sheet.name, sheet.row_count, sheet.column_count)
            print(sheet.cell_text(1, 1))

SEE ALSO:
    - components/provider/ - Provider implementations
    - registry.py - Name / extension lookup for providers
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence


class WorkbookOpenError(Exception):
    """Raised when a provider cannot open or read a workbook."""
    pass


class TabularSheet(ABC):
    """One sheet of a workbook, addressed with 1-based row/column numbers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Sheet name as shown in the workbook"""
        pass

    @property
    @abstractmethod
    def row_count(self) -> int:
        """Number of used rows"""
        pass

    @property
    @abstractmethod
    def column_count(self) -> int:
        """Number of used columns"""
        pass

    @abstractmethod
    def cell_text(self, row: int, column: int) -> str:
        """
        Get the display text of one cell.

        Args:
            row: Row number (1-based)
            column: Column number (1-based)

        Returns:
            Cell text; empty, whitespace-only and missing cells give ''
        """
        pass


class TabularWorkbook(ABC):
    """An ordered, read-only collection of sheets"""

    @property
    @abstractmethod
    def sheets(self) -> Sequence[TabularSheet]:
        """Sheets in the workbook's own order"""
        pass

    def close(self) -> None:
        """Release whatever the workbook holds open"""
        pass

    def __enter__(self) -> 'TabularWorkbook':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class WorkbookProviderInterface(ABC):
    """Interface for anything that can open a file as a TabularWorkbook"""

    def __init__(self, config: dict):
        """
        Initialize provider.

        Args:
            config: Provider-specific configuration
        """
        self.config = config

    @abstractmethod
    def open_workbook(self, path: Path) -> TabularWorkbook:
        """
        Open a workbook for reading.

        Args:
            path: Path to the file

        Returns:
            Opened TabularWorkbook (caller closes it)

        Raises:
            WorkbookOpenError: If the file cannot be opened or parsed
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get provider name for logging"""
        pass
