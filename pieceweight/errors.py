"""Error taxonomy for pieceweight."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure, each with the label shown to the user."""

    CONFIG = "Configuration Error"
    FILE = "File Error"
    PARSE = "Parse Error"
    IO = "I/O Error"
    VALIDATION = "Validation Error"


class PieceweightError(Exception):
    """A failure tagged with its kind.

    Args:
        kind: Which part of the taxonomy the failure belongs to.
        message: Human-readable detail, without the kind label.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"PieceweightError({self.kind.name}, {self.message!r})"
