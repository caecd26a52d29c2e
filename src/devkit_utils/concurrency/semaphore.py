"""Scoped semaphore acquisition.

Acquiring a slot yields a disposable handle that returns the slot when it
is disposed, on scope exit, or as a last resort on finalization:

    releaser = acquire_and_release(lock, timeout=5)
    if releaser is None:
        ...  # timed out, no slot held
    with releaser:
        ...

    async with await acquire_and_release_async(sem) as releaser:
        ...

The semaphore belongs to the caller. It is only acquired and released,
never closed or replaced.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Protocol

from ..lifecycle import AsyncDisposable, Disposable
from ..validation import ensure

logger = logging.getLogger(__name__)


class SyncSemaphore(Protocol):
    """threading.Semaphore / threading.BoundedSemaphore."""

    def acquire(self, blocking: bool = True, timeout: float | None = None) -> bool: ...

    def release(self) -> None: ...


class AsyncSemaphore(Protocol):
    """asyncio.Semaphore / asyncio.BoundedSemaphore."""

    async def acquire(self) -> bool: ...

    def release(self) -> None: ...

    def locked(self) -> bool: ...


def _timeout_seconds(timeout: float | timedelta | None) -> float | None:
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()
    return ensure.not_out_of_range(timeout, "timeout", lower_bound=0)


class _SlotHolder:
    """Returns one semaphore slot, at most once."""

    def __init__(self, semaphore: SyncSemaphore | AsyncSemaphore):
        self._semaphore = semaphore
        self._held = True

    @property
    def held(self) -> bool:
        return self._held

    def release_slot(self) -> None:
        if not self._held:
            return
        self._held = False
        self._semaphore.release()
        logger.debug(f"Released slot on {type(self._semaphore).__name__}")


class SemaphoreReleaser(Disposable):
    """Handle for a slot acquired from a threading semaphore."""

    def __init__(self, semaphore: SyncSemaphore):
        super().__init__()
        self._semaphore = semaphore
        self._slot = _SlotHolder(semaphore)

    @property
    def semaphore(self) -> SyncSemaphore:
        """The semaphore the slot was taken from."""
        return self._semaphore

    @property
    def holds_slot(self) -> bool:
        """Whether the slot has not been returned yet."""
        return self._slot.held

    def release_managed_resources(self) -> None:
        self._slot.release_slot()
        super().release_managed_resources()

    def release_unmanaged_resources(self) -> None:
        # Only still held when reached through finalization
        self._slot.release_slot()
        super().release_unmanaged_resources()


class AsyncSemaphoreReleaser(AsyncDisposable):
    """Handle for a slot acquired from an asyncio semaphore.

    Both dispose() and dispose_async() return the slot. asyncio semaphores
    are not thread-safe, so when finalization runs off the owning loop's
    thread the slot is handed back through loop.call_soon_threadsafe().
    Once that loop is closed the slot is returned directly.
    """

    def __init__(self, semaphore: AsyncSemaphore):
        super().__init__()
        self._semaphore = semaphore
        self._slot = _SlotHolder(semaphore)
        try:
            self._loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            self._loop = None

    @property
    def semaphore(self) -> AsyncSemaphore:
        """The semaphore the slot was taken from."""
        return self._semaphore

    @property
    def holds_slot(self) -> bool:
        """Whether the slot has not been returned yet."""
        return self._slot.held

    def release_managed_resources(self) -> None:
        self._slot.release_slot()
        super().release_managed_resources()

    def release_unmanaged_resources(self) -> None:
        if self._slot.held:
            if self._on_owning_loop() or self._loop is None or self._loop.is_closed():
                self._slot.release_slot()
            else:
                self._loop.call_soon_threadsafe(self._slot.release_slot)
        super().release_unmanaged_resources()

    def _on_owning_loop(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    async def release_managed_resources_async(self) -> None:
        self._slot.release_slot()
        await super().release_managed_resources_async()


def acquire_and_release(
    semaphore: SyncSemaphore,
    timeout: float | timedelta | None = None,
) -> SemaphoreReleaser | None:
    """Block until a slot is available and wrap it in a releaser.

    Args:
        semaphore: Semaphore to take a slot from
        timeout: Seconds (or timedelta) to wait; None waits forever

    Returns:
        Releaser holding the slot, or None if the timeout elapsed

    Raises:
        NullError: If semaphore is None
        OutOfRangeError: If timeout is negative
    """
    ensure.not_null(semaphore, "semaphore")
    seconds = _timeout_seconds(timeout)

    if not semaphore.acquire(blocking=True, timeout=seconds):
        logger.debug(f"Timed out after {seconds}s waiting for semaphore")
        return None
    return SemaphoreReleaser(semaphore)


async def acquire_and_release_async(
    semaphore: AsyncSemaphore,
    timeout: float | timedelta | None = None,
) -> AsyncSemaphoreReleaser | None:
    """Wait until a slot is available and wrap it in an async releaser.

    Cancelling the awaiting task aborts the wait; asyncio.CancelledError
    propagates and no slot is taken.

    Args:
        semaphore: Semaphore to take a slot from
        timeout: Seconds (or timedelta) to wait; None waits forever

    Returns:
        Releaser holding the slot, or None if the timeout elapsed

    Raises:
        NullError: If semaphore is None
        OutOfRangeError: If timeout is negative
        asyncio.CancelledError: If the wait was cancelled
    """
    ensure.not_null(semaphore, "semaphore")
    seconds = _timeout_seconds(timeout)

    # wait_for would cancel a zero-timeout acquire before it runs
    if seconds is None or not semaphore.locked():
        await semaphore.acquire()
    else:
        try:
            await asyncio.wait_for(semaphore.acquire(), timeout=seconds)
        except asyncio.TimeoutError:
            logger.debug(f"Timed out after {seconds}s waiting for semaphore")
            return None
    return AsyncSemaphoreReleaser(semaphore)
