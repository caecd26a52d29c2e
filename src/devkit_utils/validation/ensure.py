"""Guard clauses for argument validation.

Each function returns the validated value or raises an ArgumentError
subclass naming the offending parameter. Callers pass the parameter name
explicitly:

    self._path = ensure.not_null_or_whitespace(path, "path")
    self._retries = ensure.not_out_of_range(retries, "retries", lower_bound=0)
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Iterable, Sized
from enum import Enum
from typing import Any, TypeVar

from .errors import EmptyError, InvalidEnumError, NullError, OutOfRangeError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

NULL_MESSAGE = "Value cannot be null."
EMPTY_STRING_MESSAGE = "Value cannot be empty."
EMPTY_UUID_MESSAGE = "Value cannot be an all-zero UUID."
EMPTY_COLLECTION_MESSAGE = "Collection must contain at least one element."
WHITESPACE_MESSAGE = "Value cannot be whitespace."


def not_null(value: T | None, param_name: str, message: str | None = None) -> T:
    """Ensure value is not None.

    Raises:
        NullError: If value is None
    """
    if value is None:
        raise NullError(message or NULL_MESSAGE, param_name)
    return value


def not_null_or_empty(value: Any, param_name: str, message: str | None = None) -> Any:
    """Ensure a string, UUID or collection is present and has content.

    Sized collections are checked with len(). Other iterables (e.g.
    generators) are probed for a first element; an equivalent iterator that
    still yields that element is returned in their place.

    Args:
        value: str, uuid.UUID or iterable to check
        param_name: Name reported in the error
        message: Overrides the default error text

    Returns:
        The value (or an equivalent iterator for unsized iterables)

    Raises:
        NullError: If value is None
        EmptyError: If value has no content
        TypeError: If value is none of the supported kinds
    """
    not_null(value, param_name, message)

    if isinstance(value, str):
        if len(value) == 0:
            raise EmptyError(message or EMPTY_STRING_MESSAGE, param_name)
        return value

    if isinstance(value, uuid.UUID):
        if value.int == 0:
            raise EmptyError(message or EMPTY_UUID_MESSAGE, param_name)
        return value

    if isinstance(value, Sized):
        if len(value) == 0:
            raise EmptyError(message or EMPTY_COLLECTION_MESSAGE, param_name)
        return value

    if isinstance(value, Iterable):
        iterator = iter(value)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyError(message or EMPTY_COLLECTION_MESSAGE, param_name) from None
        return itertools.chain((first,), iterator)

    raise TypeError(
        f"Cannot check emptiness of {type(value).__name__} (parameter '{param_name}')"
    )


def not_null_or_whitespace(
    value: str | None, param_name: str, message: str | None = None
) -> str:
    """Ensure a string is present, non-empty and not only whitespace.

    Raises:
        NullError: If value is None
        EmptyError: If value is empty or whitespace
        TypeError: If value is not a string
    """
    not_null(value, param_name, message)
    if not isinstance(value, str):
        raise TypeError(
            f"Expected a string, got {type(value).__name__} (parameter '{param_name}')"
        )
    not_null_or_empty(value, param_name, message)

    if value.isspace():
        raise EmptyError(message or WHITESPACE_MESSAGE, param_name)
    return value


def _out_of_range_message(lower_bound: Any, upper_bound: Any) -> str:
    if lower_bound is not None and upper_bound is not None:
        return f"Value must be between {lower_bound} and {upper_bound}, inclusive."
    if lower_bound is not None:
        return f"Value must be greater than or equal to {lower_bound}."
    return f"Value must be less than or equal to {upper_bound}."


def not_out_of_range(
    value: T,
    param_name: str,
    lower_bound: T | None = None,
    upper_bound: T | None = None,
    message: str | None = None,
) -> T:
    """Ensure lower_bound <= value <= upper_bound.

    A bound of None is not checked.

    Raises:
        OutOfRangeError: If value violates a bound
    """
    if (lower_bound is not None and value < lower_bound) or (
        upper_bound is not None and value > upper_bound
    ):
        raise OutOfRangeError(
            message or _out_of_range_message(lower_bound, upper_bound),
            param_name,
            actual_value=value,
        )
    return value


def not_invalid_enum(
    value: Any, enum_type: type[E], param_name: str, message: str | None = None
) -> Any:
    """Ensure value is a defined member of enum_type, or a defined member's value.

    Combined flag values that are not declared members are rejected.

    Raises:
        InvalidEnumError: If value is not defined
    """
    for member in enum_type.__members__.values():
        if value is member or (not isinstance(value, Enum) and value == member.value):
            return value

    raise InvalidEnumError(
        message
        or (
            f"The value of argument '{param_name}' ({value!r}) is invalid "
            f"for Enum type '{enum_type.__name__}'."
        ),
        param_name,
        invalid_value=value,
        enum_type=enum_type,
    )
