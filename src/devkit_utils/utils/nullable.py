"""None-aware helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def if_not_none(target: T | None, func: Callable[[T], R]) -> R | None:
    """Return func(target), or None when target is None."""
    if target is not None:
        return func(target)
    return None


def is_none_or_default(value: Any) -> bool:
    """Whether value is None or equal to its type's default instance.

    0, "", False, empty containers and the like are defaults. Types that
    cannot be constructed without arguments have no default.
    """
    if value is None:
        return True
    try:
        default = type(value)()
    except TypeError:
        return False
    return value == default
