"""Argument validation guard clauses."""

from . import ensure
from .errors import (
    ArgumentError,
    EmptyError,
    InvalidEnumError,
    NullError,
    OutOfRangeError,
)

__all__ = [
    "ensure",
    "ArgumentError",
    "NullError",
    "EmptyError",
    "OutOfRangeError",
    "InvalidEnumError",
]
