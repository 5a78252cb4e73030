from column_comparer.engine.comparer.request import ComparisonRequest
from column_comparer.engine.comparer.sheet_scanner import (
    columns_in_range,
    iter_differences,
    scan_sheet,
)

from conftest import FakeSheet


def scan(sheet, request, sheet_number=1):
    lines = []
    tally = scan_sheet(sheet, sheet_number, request, lines.append)
    return tally, lines


def test_columns_in_range():
    assert columns_in_range(1, 2, 2)
    assert not columns_in_range(1, 3, 2)
    assert not columns_in_range(0, 1, 2)
    assert not columns_in_range(1, 1, 0)


def test_scan_reports_header_differences_and_count():
    sheet = FakeSheet([["x", "x"], ["y", "z"], ["y", "y"]])

    tally, lines = scan(sheet, ComparisonRequest(1, 2))

    assert lines == [
        "sheet1 - row count: 3, column count: 2",
        "(row:2, column1:1) - [y] - (row:2, column2:2) - [z]",
        "Sheet difference count: 1",
    ]
    assert tally.difference_count == 1
    assert tally.row_count == 3
    assert tally.column_count == 2
    assert tally.in_range


def test_rows_are_scanned_in_ascending_order():
    sheet = FakeSheet([["a", "b"], ["c", "c"], ["d", "e"], ["f", "g"]])

    rows = [record.row for record in iter_differences(sheet, ComparisonRequest(1, 2))]

    assert rows == [1, 3, 4]


def test_differences_are_produced_lazily():
    sheet = FakeSheet([["a", "b"], ["c", "d"], ["e", "f"]])

    differences = iter_differences(sheet, ComparisonRequest(1, 2))
    first = next(differences)

    assert first.row == 1
    assert {row for row, _ in sheet.reads} == {1}


def test_out_of_range_column_is_skipped_silently():
    sheet = FakeSheet([["a", "b"], ["c", "d"]])

    tally, lines = scan(sheet, ComparisonRequest(3, 1), sheet_number=2)

    assert lines == [
        "sheet2 - row count: 2, column count: 2",
        "Sheet difference count: 0",
    ]
    assert tally.difference_count == 0
    assert not tally.in_range
    assert sheet.reads == []


def test_same_column_never_differs():
    sheet = FakeSheet([["a", "b"], ["c", "d"]])

    tally, _ = scan(sheet, ComparisonRequest(2, 2))

    assert tally.difference_count == 0


def test_full_row_mode_prints_csv_of_all_columns():
    sheet = FakeSheet([["x", "x", ""], ["y", "z", "note,1"], ["y", "y", ""]])

    tally, lines = scan(sheet, ComparisonRequest(1, 2, full_row_enabled=True))

    assert lines[1] == 'y,z,"note,1"'
    assert tally.difference_count == 1


def test_full_row_mode_uses_request_separator():
    sheet = FakeSheet([["a", "b", "c;d"]])

    _, lines = scan(sheet, ComparisonRequest(1, 2, full_row_enabled=True, separator=";"))

    assert lines[1] == 'a;b;"c;d"'


def test_empty_sheet():
    sheet = FakeSheet([], column_count=0)

    tally, lines = scan(sheet, ComparisonRequest(1, 2))

    assert lines == [
        "sheet1 - row count: 0, column count: 0",
        "Sheet difference count: 0",
    ]
    assert tally.difference_count == 0
