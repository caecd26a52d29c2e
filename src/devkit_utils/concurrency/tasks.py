"""Awaitable helpers."""

from __future__ import annotations

import asyncio
import contextvars
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


async def without_capturing_context(awaitable: Awaitable[T]) -> T:
    """Await in a fresh contextvars.Context.

    ContextVar values set by the caller are not visible to the awaitable,
    and values it sets do not leak back. Cancelling the caller cancels the
    awaitable.
    """
    loop = asyncio.get_running_loop()
    task = loop.create_task(_await(awaitable), context=contextvars.Context())
    return await task
