"""Tests for the error taxonomy."""

import pytest

from pieceweight.errors import ErrorKind, PieceweightError


@pytest.mark.parametrize(
    "kind, label",
    [
        (ErrorKind.CONFIG, "Configuration Error"),
        (ErrorKind.FILE, "File Error"),
        (ErrorKind.PARSE, "Parse Error"),
        (ErrorKind.IO, "I/O Error"),
        (ErrorKind.VALIDATION, "Validation Error"),
    ],
)
def test_str_is_prefixed_with_label(kind, label):
    err = PieceweightError(kind, "something broke")
    assert str(err) == f"{label}: something broke"


def test_kind_and_message_are_kept():
    err = PieceweightError(ErrorKind.PARSE, "Row 3: Invalid count value")
    assert err.kind is ErrorKind.PARSE
    assert err.message == "Row 3: Invalid count value"
    assert isinstance(err, Exception)
