"""Small standalone helpers."""

from .exceptions import detail_message
from .nullable import if_not_none, is_none_or_default
from .typeinfo import (
    derives_from_generic_parent,
    get_implemented_generic_bases,
    implements_generic_base,
    is_concrete,
)

__all__ = [
    "detail_message",
    "if_not_none",
    "is_none_or_default",
    "is_concrete",
    "get_implemented_generic_bases",
    "implements_generic_base",
    "derives_from_generic_parent",
]
