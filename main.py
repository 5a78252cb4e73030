#!/usr/bin/env python3
"""
Column Comparer - Main Entry Point

Compares two columns of every sheet in a workbook, row by row, and prints
the rows where they differ.

Usage:
  python main.py -i ./data/sample.xlsx -c 1,2
  python main.py -i ./data/sample.xlsx -c 1,2 -f
"""

from column_comparer.cli.compare_command import main


if __name__ == '__main__':
    main()
