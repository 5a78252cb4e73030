"""Column Comparer - report rows where two columns of a workbook differ"""

__version__ = '1.0.0'
