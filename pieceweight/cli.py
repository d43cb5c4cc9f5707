"""CLI entry point for pieceweight."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .catalog import Catalog
from .config import default_config_path, load_config
from .csv_orders import read_csv_orders
from .errors import PieceweightError
from .interactive import InteractiveCollector
from .receipt import RECEIPT_PATH, format_categories, format_header, print_receipt

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pieceweight",
        description="Calculate total weight and price for piece-based sweets orders",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to categories configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # interactive
    sub.add_parser("interactive", help="Start interactive order entry")

    # from-csv
    csv_parser = sub.add_parser(
        "from-csv", help="Calculate from CSV file (format: id,count)"
    )
    csv_parser.add_argument("file", type=str, help="CSV file with id,count rows")
    csv_parser.add_argument(
        "--has-header",
        action="store_true",
        help="Skip the first row of the file",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except PieceweightError as e:
        logger.debug("Fatal %s error", e.kind.name)
        print(f"\n❌ {e}\n", file=sys.stderr)
        sys.exit(1)


def run(args: argparse.Namespace) -> None:
    config_path = args.config or default_config_path()
    catalog = load_config(config_path)

    match args.command:
        case "interactive":
            _cmd_interactive(catalog)
        case "from-csv":
            _cmd_from_csv(catalog, Path(args.file), args.has_header)


def _cmd_interactive(catalog: Catalog) -> None:
    collector = InteractiveCollector(catalog)
    collector.print_intro()
    items = collector.collect()
    if not items:
        return
    print_receipt(catalog, items, RECEIPT_PATH)


def _cmd_from_csv(catalog: Catalog, path: Path, has_header: bool) -> None:
    print(format_header("PIECEWEIGHT - Batch Order from CSV"))
    print(format_categories(catalog))
    items = read_csv_orders(path, has_header=has_header)
    print(f"\n📥 Loaded {len(items)} order rows from {path}")
    print_receipt(catalog, items, RECEIPT_PATH)
