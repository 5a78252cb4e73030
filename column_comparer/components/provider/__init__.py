"""
Tabular data providers.

Main exports:
- OpenpyxlWorkbookProvider: .xlsx/.xlsm through openpyxl
- CsvWorkbookProvider: .csv as a one-sheet workbook
"""
from .openpyxl_provider import OpenpyxlWorkbookProvider
from .csv_provider import CsvWorkbookProvider

__all__ = [
    'OpenpyxlWorkbookProvider',
    'CsvWorkbookProvider',
]
