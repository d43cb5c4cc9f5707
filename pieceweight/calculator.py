"""Weight and price calculation for piece-counted orders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .catalog import Catalog, Category
from .errors import ErrorKind, PieceweightError

MAX_COUNT = 2**64 - 1


def weight_kg(grams_per_piece: float, count: int) -> float:
    """Total weight in kilograms of ``count`` pieces."""
    return (grams_per_piece / 1000.0) * count


def price_for(category: Category, count: int) -> float:
    """Price of ``count`` pieces, charged by weight."""
    return weight_kg(category.grams_per_piece, count) * category.price_per_kg


@dataclass(frozen=True)
class OrderItem:
    """A requested (category id, piece count) pair."""

    category_id: str
    count: int


@dataclass
class ReceiptRow:
    """One computed receipt line."""

    id: str
    name: str
    count: int
    weight_kg: float
    price: float


@dataclass
class ReceiptTotals:
    """Sums across all receipt rows."""

    pieces: int = 0
    weight_kg: float = 0.0
    price: float = 0.0

    def add(self, row: ReceiptRow) -> None:
        self.pieces += row.count
        self.weight_kg += row.weight_kg
        self.price += row.price

    @property
    def avg_price_per_item(self) -> float:
        """Average price of a single piece."""
        if self.pieces == 0:
            return 0.0
        return self.price / self.pieces

    @property
    def avg_grams_per_item(self) -> float:
        """Average weight of a single piece, in grams."""
        if self.pieces == 0:
            return 0.0
        return (self.weight_kg * 1000.0) / self.pieces


@dataclass
class Receipt:
    """Receipt rows in order-entry order, plus their totals."""

    rows: list[ReceiptRow] = field(default_factory=list)
    totals: ReceiptTotals = field(default_factory=ReceiptTotals)


def build_receipt(catalog: Catalog, items: Iterable[OrderItem]) -> Receipt:
    """Resolve each order item against the catalog and compute figures.

    Raises:
        PieceweightError: VALIDATION if an item names an unknown category.
    """
    receipt = Receipt()
    for item in items:
        category = catalog.get(item.category_id)
        if category is None:
            raise PieceweightError(
                ErrorKind.VALIDATION, f"Unknown category: {item.category_id}"
            )

        row = ReceiptRow(
            id=item.category_id,
            name=category.name,
            count=item.count,
            weight_kg=weight_kg(category.grams_per_piece, item.count),
            price=price_for(category, item.count),
        )
        receipt.rows.append(row)
        receipt.totals.add(row)
    return receipt


def parse_count(text: str) -> int | None:
    """Parse an unsigned piece count.

    Accepts ASCII digits with an optional leading ``+``, up to ``MAX_COUNT``.
    Returns None for anything else, including negative numbers, decimals
    and values too large for an unsigned 64-bit count.
    """
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    # int() refuses very long digit strings, so bound the length first
    if len(digits.lstrip("0")) > len(str(MAX_COUNT)):
        return None
    count = int(digits)
    if count > MAX_COUNT:
        return None
    return count
