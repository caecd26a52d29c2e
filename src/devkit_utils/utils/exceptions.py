"""Exception message formatting."""

from __future__ import annotations

import traceback


def _qualified_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _chained(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _describe(exc: BaseException) -> str:
    detail = f"{_qualified_name(exc)}: {exc}"
    if exc.__traceback__ is not None:
        stack = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
        if stack:
            detail += "\n" + stack
    return detail


def detail_message(exc: BaseException, include_inner: bool = True) -> str:
    """Describe an exception with its type, message and traceback.

    Each chained cause is appended as " [Cause (n): ...]", numbered from 1.

    Args:
        exc: Exception to describe
        include_inner: Whether to append chained causes

    Returns:
        Detail message
    """
    parts = [_describe(exc)]
    if not include_inner:
        return parts[0]

    seen = {id(exc)}
    depth = 0
    inner = _chained(exc)
    while inner is not None and id(inner) not in seen:
        seen.add(id(inner))
        depth += 1
        parts.append(f" [Cause ({depth}): {_describe(inner)}]")
        inner = _chained(inner)
    return "".join(parts)
