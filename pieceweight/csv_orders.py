"""Batch order input from a CSV file."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from .calculator import OrderItem, parse_count
from .errors import ErrorKind, PieceweightError

logger = logging.getLogger(__name__)


def read_csv_orders(path: str | Path, has_header: bool = False) -> list[OrderItem]:
    """Read ``id,count`` rows from a CSV file.

    Every problem aborts the whole batch. Category ids are not checked
    against the catalog here; unknown ids fail later, when the receipt is
    built. Blank lines are skipped and don't count as rows; columns after
    the second are ignored.

    Args:
        path: CSV file to read.
        has_header: Skip the first record.

    Raises:
        PieceweightError: FILE for unreadable files or malformed CSV,
            PARSE for missing/invalid columns, VALIDATION for empty ids,
            zero counts or an empty file.
    """
    path = Path(path)
    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            items = [
                _parse_record(record, row_num)
                for row_num, record in _records(f, has_header)
            ]
    except OSError as e:
        raise PieceweightError(
            ErrorKind.FILE, f"Cannot read CSV file '{path}': {e}"
        ) from e

    if not items:
        raise PieceweightError(
            ErrorKind.VALIDATION, "CSV file contains no valid orders"
        )

    logger.info("Read %d order rows from %s", len(items), path)
    return items


def _records(f, has_header: bool) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(row number, fields)`` for each non-blank record."""
    reader = csv.reader(f, strict=True)
    row_num = 0
    skip = has_header
    while True:
        try:
            record = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as e:
            raise PieceweightError(
                ErrorKind.FILE, f"Error reading CSV row {row_num + 1}: {e}"
            ) from e

        if not record:
            continue
        if skip:
            skip = False
            continue
        row_num += 1
        logger.debug("CSV row %d: %s", row_num, record)
        yield row_num, record


def _parse_record(record: list[str], row_num: int) -> OrderItem:
    category_id = record[0].strip()
    if not category_id:
        raise PieceweightError(
            ErrorKind.VALIDATION, f"Row {row_num}: ID cannot be empty"
        )

    if len(record) < 2:
        raise PieceweightError(
            ErrorKind.PARSE, f"Row {row_num}: Missing count column"
        )
    count = parse_count(record[1].strip())
    if count is None:
        raise PieceweightError(
            ErrorKind.PARSE, f"Row {row_num}: Invalid count value"
        )
    if count == 0:
        raise PieceweightError(
            ErrorKind.VALIDATION,
            f"Row {row_num}: Quantity must be greater than 0",
        )

    return OrderItem(category_id=category_id, count=count)
