"""Notation package."""

from idlegrowth.notation.formatter import (
    NOTATION_GROUP,
    NOTATION_PRECISION,
    NotationError,
    NotationFormatter,
    to_notation,
)

__all__ = [
    "NOTATION_GROUP",
    "NOTATION_PRECISION",
    "NotationError",
    "NotationFormatter",
    "to_notation",
]
