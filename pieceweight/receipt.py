"""Console and persisted renderings of a receipt."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import TextIO

from .calculator import OrderItem, Receipt, build_receipt
from .catalog import Catalog
from .errors import ErrorKind, PieceweightError

logger = logging.getLogger(__name__)

RECEIPT_PATH = "receipt.csv"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_BOX_WIDTH = 80
_TABLE_WIDTH = 70
_BOX_RULE = "=" * _BOX_WIDTH
_REPORT_RULE = "  " + "─" * 79
_REPORT_TITLE = " " * 22 + "PIECEWEIGHT - ORDER RECEIPT" + " " * 22
_REPORT_COLUMNS = (
    "  ID              Item Name                   Qty      Weight (kg)     Price (€)  "
)


def format_header(title: str) -> str:
    """Boxed, centred title with a blank line above and below."""
    return "\n".join(["", _BOX_RULE, f"{title:^{_BOX_WIDTH}}", _BOX_RULE, ""])


def format_subheader(title: str) -> str:
    return "\n".join(["", title, "-" * len(title), ""])


def format_categories(catalog: Catalog) -> str:
    """Category listing table, in catalog order."""
    lines: list[str] = [format_subheader("Available Categories")]
    lines.append(f"{'ID':<8} | {'Name':<28} | {'g/piece':<10} | {'€/kg':<10}")
    lines.append("-" * _TABLE_WIDTH)
    for c in catalog:
        lines.append(
            f"{c.id:<8} | {c.name:<28} | "
            f"{c.grams_per_piece:>10.1f} | {c.price_per_kg:>10.2f}"
        )
    return "\n".join(lines)


def format_console_receipt(receipt: Receipt) -> str:
    """Receipt table for the terminal."""
    totals = receipt.totals
    lines: list[str] = [format_header("ORDER RECEIPT")]
    lines.append(f"{'Item':<20} {'Qty':>8} {'Weight(kg)':>12} {'Price(€)':>12}")
    lines.append("-" * _TABLE_WIDTH)
    for row in receipt.rows:
        lines.append(
            f"{row.name:<20} {row.count:>8} "
            f"{row.weight_kg:>12.3f} {row.price:>12.2f}"
        )
    lines.append("-" * _TABLE_WIDTH)
    lines.append(
        f"{'TOTAL':<20} {totals.pieces:>8} "
        f"{totals.weight_kg:>12.3f} {totals.price:>12.2f}"
    )
    return "\n".join(lines)


def _report_row(id_: str, name: str, count: int, weight: float, price: float) -> str:
    return (
        f"  {id_:<12}    {name:<24}    {count:>6}       "
        f"{weight:>12.3f}       {price:>10.2f}"
    )


def format_report(receipt: Receipt, timestamp: str) -> str:
    """Fixed-width text report written to the receipt file.

    Args:
        receipt: Computed rows and totals.
        timestamp: Local time, already formatted with ``TIMESTAMP_FORMAT``.
    """
    totals = receipt.totals
    lines: list[str] = [
        _BOX_RULE,
        _REPORT_TITLE,
        _BOX_RULE,
        f"Date: {timestamp:<65}",
        _BOX_RULE,
        "",
        _REPORT_COLUMNS,
        _REPORT_RULE,
    ]
    for row in receipt.rows:
        lines.append(
            _report_row(row.id, row.name, row.count, row.weight_kg, row.price)
        )
    lines.append(_REPORT_RULE)
    lines.append(
        _report_row("TOTAL", "", totals.pieces, totals.weight_kg, totals.price)
    )
    lines.append(_REPORT_RULE)
    lines.append("")

    # Summary
    lines.append("  SUMMARY")
    lines.append(_REPORT_RULE)
    lines.append(f"  Total Items (pieces)           {totals.pieces:>50}")
    lines.append(f"  Total Weight                   {totals.weight_kg:>45.3f} kg")
    lines.append(f"  Total Price                    {totals.price:>47.2f} €")
    lines.append(
        f"  Average Price per Item         {totals.avg_price_per_item:>47.2f} €"
    )
    lines.append(
        f"  Average Weight per Item        {totals.avg_grams_per_item:>46.1f} g"
    )
    lines.append(_REPORT_RULE)
    lines.append(_BOX_RULE)
    return "\n".join(lines) + "\n"


def save_report(
    receipt: Receipt,
    output_path: str | Path = RECEIPT_PATH,
    now: datetime | None = None,
) -> Path:
    """Write the text report, replacing any existing file.

    Raises:
        PieceweightError: FILE if the file can't be written.
    """
    output_path = Path(output_path)
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    content = format_report(receipt, timestamp)
    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise PieceweightError(
            ErrorKind.FILE, f"Failed to save {output_path}: {e}"
        ) from e
    logger.info("Receipt report written to %s", output_path)
    return output_path


def print_receipt(
    catalog: Catalog,
    items: Iterable[OrderItem],
    output_path: str | Path = RECEIPT_PATH,
    out: TextIO | None = None,
    now: datetime | None = None,
) -> Receipt:
    """Build the receipt, print it and persist the report.

    Nothing is printed or written if any item fails to resolve.
    """
    out = out or sys.stdout
    receipt = build_receipt(catalog, items)

    print(format_console_receipt(receipt), file=out)
    saved = save_report(receipt, output_path, now=now)
    print(f"📄 Receipt saved to: {saved}", file=out)
    print("\n✅ Receipt generated successfully!", file=out)
    return receipt
