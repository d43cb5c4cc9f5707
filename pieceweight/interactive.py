"""Line-by-line interactive order entry."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .calculator import OrderItem, parse_count
from .catalog import Catalog
from .errors import ErrorKind, PieceweightError
from .receipt import format_categories, format_header

logger = logging.getLogger(__name__)

PROMPT = "➜ "


class InteractiveCollector:
    """Reads ``id,count`` lines until a blank line or end of input.

    Bad lines are reported on ``stderr`` and skipped; only failures of the
    streams themselves are raised.
    """

    def __init__(
        self,
        catalog: Catalog,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._catalog = catalog
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def print_intro(self) -> None:
        title = "PIECEWEIGHT - Interactive Order Entry"
        print(format_header(title), file=self._stdout)
        print(format_categories(self._catalog), file=self._stdout)
        print("\n📝 Enter orders in format: id,count", file=self._stdout)
        print("   Example: pistachio,10", file=self._stdout)
        print("   Press ENTER on empty line to finish.\n", file=self._stdout)

    def collect(self) -> list[OrderItem]:
        """Run the read loop and return the accepted items in entry order.

        An empty list means nothing was entered; the caller should not
        build a receipt.

        Raises:
            PieceweightError: IO if the prompt can't be written or input
                can't be read.
        """
        items: list[OrderItem] = []

        while True:
            line = self._read_line().strip()
            if not line:
                break
            if line.startswith("#"):
                continue

            item = self.parse_line(line)
            if item is None:
                continue

            items.append(item)
            name = self._catalog.get(item.category_id).name
            print(f"   ✓ Added: {name} x{item.count}", file=self._stdout)

        logger.debug("Collected %d interactive items", len(items))
        if not items:
            print("⚠️  No items entered.", file=self._stdout)
        return items

    def parse_line(self, line: str) -> OrderItem | None:
        """Validate one trimmed entry line, reporting any problem."""
        parts = [p.strip() for p in line.split(",")]
        if len(parts) != 2:
            self._report(f"Invalid format: expected 'id,count', got '{line}'")
            return None

        category_id, count_text = parts
        count = parse_count(count_text)
        if count is None:
            self._report(f"Invalid quantity: '{count_text}' is not a valid number")
            return None
        if count == 0:
            self._report("Quantity must be greater than 0")
            return None

        if category_id not in self._catalog:
            self._report(f"Unknown category ID: '{category_id}'. Available IDs:")
            for valid_id in self._catalog.ids():
                print(f"   - {valid_id}", file=self._stderr)
            return None

        return OrderItem(category_id=category_id, count=count)

    def _report(self, message: str) -> None:
        print(f"❌ {message}", file=self._stderr)

    def _read_line(self) -> str:
        # readline() returns "" at end of input, which ends entry like a blank line
        try:
            self._stdout.write(PROMPT)
            self._stdout.flush()
        except OSError as e:
            raise PieceweightError(ErrorKind.IO, str(e)) from e
        try:
            return self._stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise PieceweightError(
                ErrorKind.IO, f"Failed to read input: {e}"
            ) from e
