"""TOML category configuration loader."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from .catalog import Catalog, Category
from .errors import ErrorKind, PieceweightError

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/sample_categories.toml"
CONFIG_ENV_VAR = "PIECEWEIGHT_CONFIG"

_STRING_FIELDS = ("id", "name")
_NUMBER_FIELDS = ("grams_per_piece", "price_per_kg")


def default_config_path() -> str:
    """Config path from the environment, falling back to the bundled sample."""
    return os.environ.get(CONFIG_ENV_VAR, "") or DEFAULT_CONFIG_PATH


def load_config(path: str | Path) -> Catalog:
    """Load and validate the category catalog from a TOML file.

    The file holds one array of tables named ``categories``; each table has
    ``id``, ``name``, ``grams_per_piece`` and ``price_per_kg``.

    Raises:
        PieceweightError: FILE if the file can't be read, CONFIG if it is not
            valid TOML or doesn't have the expected shape, VALIDATION if the
            categories themselves are invalid.
    """
    p = Path(path)
    if tomllib is None:
        raise ImportError(
            "tomli is required on Python < 3.11: pip install tomli"
        )

    try:
        content = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PieceweightError(
            ErrorKind.FILE, f"Cannot read config file '{p}': {e}"
        ) from e

    try:
        raw = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise PieceweightError(
            ErrorKind.CONFIG, f"Invalid TOML format in config file: {e}"
        ) from e

    catalog = Catalog(parse_categories(raw))
    logger.info("Loaded %d categories from %s", len(catalog), p)
    return catalog


def parse_categories(raw: dict[str, Any]) -> list[Category]:
    """Turn a decoded TOML document into Category records.

    Only the shape is checked here; value rules live in ``Catalog``.
    """
    records = raw.get("categories")
    if records is None:
        raise PieceweightError(ErrorKind.CONFIG, "missing field `categories`")
    if not isinstance(records, list):
        raise PieceweightError(
            ErrorKind.CONFIG, "`categories` must be an array of tables"
        )

    return [_category_from_record(i, rec) for i, rec in enumerate(records)]


def _category_from_record(index: int, rec: Any) -> Category:
    if not isinstance(rec, dict):
        raise PieceweightError(
            ErrorKind.CONFIG, f"categories[{index}] must be a table"
        )

    for key in _STRING_FIELDS + _NUMBER_FIELDS:
        if key not in rec:
            raise PieceweightError(
                ErrorKind.CONFIG, f"categories[{index}]: missing field `{key}`"
            )

    for key in _STRING_FIELDS:
        if not isinstance(rec[key], str):
            raise PieceweightError(
                ErrorKind.CONFIG,
                f"categories[{index}]: `{key}` must be a string",
            )

    for key in _NUMBER_FIELDS:
        value = rec[key]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PieceweightError(
                ErrorKind.CONFIG,
                f"categories[{index}]: `{key}` must be a number",
            )

    return Category(
        id=rec["id"],
        name=rec["name"],
        grams_per_piece=float(rec["grams_per_piece"]),
        price_per_kg=float(rec["price_per_kg"]),
    )
