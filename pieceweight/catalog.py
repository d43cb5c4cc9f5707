"""Category records and the validated catalog built from them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import ErrorKind, PieceweightError


@dataclass(frozen=True)
class Category:
    """A product type sold by the piece but priced by weight."""

    id: str
    name: str
    grams_per_piece: float
    price_per_kg: float

    def validate(self) -> None:
        """Check the record on its own.

        Raises:
            PieceweightError: VALIDATION, naming the offending field.
        """
        if not self.id:
            raise PieceweightError(
                ErrorKind.VALIDATION, "Category ID cannot be empty"
            )
        if not self.name:
            raise PieceweightError(
                ErrorKind.VALIDATION,
                f"Category name cannot be empty for {self.id}",
            )
        if self.grams_per_piece <= 0:
            raise PieceweightError(
                ErrorKind.VALIDATION,
                f"Invalid weight for {self.id}: must be positive",
            )
        if self.price_per_kg <= 0:
            raise PieceweightError(
                ErrorKind.VALIDATION,
                f"Invalid price for {self.id}: must be positive",
            )


class Catalog:
    """Read-only collection of categories, kept in load order."""

    def __init__(self, categories: Iterable[Category]) -> None:
        self._categories: tuple[Category, ...] = tuple(categories)
        self._validate()
        self._by_id: dict[str, Category] = {c.id: c for c in self._categories}

    def _validate(self) -> None:
        if not self._categories:
            raise PieceweightError(
                ErrorKind.VALIDATION,
                "Configuration must contain at least one category",
            )

        for category in self._categories:
            category.validate()

        ids = {c.id for c in self._categories}
        if len(ids) != len(self._categories):
            raise PieceweightError(
                ErrorKind.VALIDATION, "Duplicate category IDs found"
            )

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def ids(self) -> list[str]:
        """Category ids in load order."""
        return [c.id for c in self._categories]

    def get(self, category_id: str) -> Category | None:
        return self._by_id.get(category_id)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)
