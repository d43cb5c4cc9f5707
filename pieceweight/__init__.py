"""Weight and price calculator for sweets sold by the piece."""

__version__ = "0.1.0"

from .calculator import (
    OrderItem,
    Receipt,
    ReceiptRow,
    ReceiptTotals,
    build_receipt,
    price_for,
    weight_kg,
)
from .catalog import Catalog, Category
from .config import load_config
from .csv_orders import read_csv_orders
from .errors import ErrorKind, PieceweightError
from .interactive import InteractiveCollector
from .receipt import format_report, print_receipt, save_report

__all__ = [
    "Category",
    "Catalog",
    "load_config",
    "OrderItem",
    "ReceiptRow",
    "ReceiptTotals",
    "Receipt",
    "build_receipt",
    "weight_kg",
    "price_for",
    "InteractiveCollector",
    "read_csv_orders",
    "format_report",
    "print_receipt",
    "save_report",
    "ErrorKind",
    "PieceweightError",
]
