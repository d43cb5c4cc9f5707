"""Tests for CSV order input."""

import pytest

from pieceweight.calculator import OrderItem
from pieceweight.csv_orders import read_csv_orders
from pieceweight.errors import ErrorKind, PieceweightError


def _csv(tmp_path, content: str):
    p = tmp_path / "orders.csv"
    p.write_text(content, encoding="utf-8")
    return p


def test_reads_rows_in_file_order(tmp_path):
    """The first row is data, not a header."""
    path = _csv(tmp_path, "pistachio,10\nalmond, 5 \n")
    assert read_csv_orders(path) == [
        OrderItem("pistachio", 10),
        OrderItem("almond", 5),
    ]


def test_has_header_skips_first_row(tmp_path):
    path = _csv(tmp_path, "id,count\npistachio,10\n")
    assert read_csv_orders(path, has_header=True) == [OrderItem("pistachio", 10)]


def test_blank_lines_and_extra_columns(tmp_path):
    path = _csv(tmp_path, "\npistachio,2,ignored\n\nalmond,3\n")
    assert read_csv_orders(path) == [
        OrderItem("pistachio", 2),
        OrderItem("almond", 3),
    ]


def test_unknown_ids_are_not_checked(tmp_path):
    """Catalog membership is checked when the receipt is built."""
    path = _csv(tmp_path, "no_such_sweet,4\n")
    assert read_csv_orders(path) == [OrderItem("no_such_sweet", 4)]


def test_missing_file(tmp_path):
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(tmp_path / "missing.csv")
    assert exc.value.kind is ErrorKind.FILE


def test_missing_count_column(tmp_path):
    path = _csv(tmp_path, "pistachio,10\nalmond\n")
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.PARSE
    assert exc.value.message == "Row 2: Missing count column"


def test_empty_id(tmp_path):
    path = _csv(tmp_path, " ,10\n")
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.VALIDATION
    assert exc.value.message == "Row 1: ID cannot be empty"


@pytest.mark.parametrize(
    "count", ["abc", "-2", "1.5", "", "18446744073709551616", "9" * 400]
)
def test_invalid_count(tmp_path, count):
    path = _csv(tmp_path, f"pistachio,{count}\n")
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.PARSE
    assert exc.value.message == "Row 1: Invalid count value"


def test_zero_count(tmp_path):
    path = _csv(tmp_path, "pistachio,1\nalmond,0\n")
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.VALIDATION
    assert exc.value.message == "Row 2: Quantity must be greater than 0"


def test_malformed_row(tmp_path):
    """Broken quoting is a read failure naming the row."""
    path = _csv(tmp_path, 'pistachio,1\n"almond"x,2\n')
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.FILE
    assert "row 2" in exc.value.message


@pytest.mark.parametrize("content", ["", "\n\n", "id,count\n"])
def test_no_orders(tmp_path, content):
    path = _csv(tmp_path, content)
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path, has_header=content.startswith("id"))
    assert exc.value.kind is ErrorKind.VALIDATION
    assert exc.value.message == "CSV file contains no valid orders"


def test_byte_order_mark_is_ignored(tmp_path):
    """Spreadsheet exports often start with a UTF-8 BOM."""
    path = tmp_path / "orders.csv"
    path.write_bytes(b"\xef\xbb\xbfpistachio,10\nalmond,5\n")
    assert read_csv_orders(path) == [
        OrderItem("pistachio", 10),
        OrderItem("almond", 5),
    ]


def test_invalid_utf8(tmp_path):
    path = tmp_path / "orders.csv"
    path.write_bytes(b"pistachio,1\n\xff,2\n")
    with pytest.raises(PieceweightError) as exc:
        read_csv_orders(path)
    assert exc.value.kind is ErrorKind.FILE
