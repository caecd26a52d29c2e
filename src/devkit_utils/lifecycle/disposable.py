"""Disposal lifecycle base classes.

Managed resources are released only on explicit disposal (dispose(),
dispose_async(), scope exit). Unmanaged resources are released on every
path, including the finalization fallback when an entity is reclaimed
without having been disposed.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from ..config import get_config
from .state import DisposalGuard, DisposalState

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsRelease(Protocol):
    """Release hooks consumed by the synchronous lifecycle."""

    def release_managed_resources(self) -> None: ...

    def release_unmanaged_resources(self) -> None: ...


@runtime_checkable
class SupportsAsyncRelease(SupportsRelease, Protocol):
    """Release hooks consumed by the asynchronous lifecycle."""

    async def release_managed_resources_async(self) -> None: ...


def _release(guard: DisposalGuard, releaser: SupportsRelease, disposing: bool) -> bool:
    """Run release hooks once. Returns False if another path already won."""
    if not guard.try_begin():
        return False
    try:
        try:
            if disposing:
                releaser.release_managed_resources()
        finally:
            releaser.release_unmanaged_resources()
    finally:
        guard.complete()
    return True


async def _release_async(guard: DisposalGuard, releaser: SupportsAsyncRelease) -> bool:
    """Await the async managed hook, then run the unmanaged hook, once."""
    if not guard.try_begin():
        return False
    try:
        try:
            await releaser.release_managed_resources_async()
        finally:
            releaser.release_unmanaged_resources()
    finally:
        guard.complete()
    return True


class Disposable:
    """Base class for objects that own resources needing deterministic cleanup.

    Subclasses override release_managed_resources() and/or
    release_unmanaged_resources() and chain to the base implementation.
    dispose() is idempotent and may be called from any thread.

    Usage:
        with MyResource() as resource:
            ...
        # resource.is_disposed is True
    """

    def __init__(self) -> None:
        self._disposal = DisposalGuard(type(self).__name__)

    @property
    def is_disposed(self) -> bool:
        """Whether disposal has completed."""
        return self._disposal.is_disposed

    @property
    def is_disposing(self) -> bool:
        """Whether disposal is currently running."""
        return self._disposal.is_disposing

    @property
    def disposal_state(self) -> DisposalState:
        """Current lifecycle state."""
        return self._disposal.state

    def dispose(self) -> None:
        """Release managed then unmanaged resources. Later calls are no-ops."""
        self._dispose(disposing=True)

    def _dispose(self, disposing: bool) -> None:
        """Shared entry point for explicit disposal and finalization.

        Args:
            disposing: True when called explicitly; False from the finalizer,
                in which case managed resources are left alone
        """
        _release(self._disposal, self, disposing)

    def check_not_disposed(self) -> None:
        """Raise ObjectDisposedError if disposal has started."""
        self._disposal.check_not_disposed()

    def release_managed_resources(self) -> None:
        """Release resources that reference other live objects."""

    def release_unmanaged_resources(self) -> None:
        """Release resources that must be freed on every path."""

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.dispose()

    def __del__(self) -> None:
        guard = getattr(self, "_disposal", None)
        if guard is None or guard.state != DisposalState.LIVE:
            return

        if get_config().warn_on_undisposed:
            logger.warning(
                f"{type(self).__name__} was reclaimed without being disposed"
            )

        try:
            self._dispose(disposing=False)
        except Exception:
            # No caller to report to
            logger.exception(f"Finalization of {type(self).__name__} failed")


class AsyncDisposable(Disposable):
    """Disposable whose managed cleanup is itself asynchronous.

    dispose_async() awaits release_managed_resources_async() and then runs
    release_unmanaged_resources(). The synchronous release_managed_resources()
    hook is not called on this path. Whichever of dispose() and
    dispose_async() claims the transition first performs it; the other is
    a no-op, even while the first is still suspended.

    Usage:
        async with MyConnection() as conn:
            ...
    """

    async def dispose_async(self) -> None:
        """Asynchronously release resources. Later calls are no-ops."""
        await self._dispose_async_core()

    async def _dispose_async_core(self) -> None:
        """Returns without suspending when disposal already started."""
        if self._disposal.state != DisposalState.LIVE:
            return
        await _release_async(self._disposal, self)

    async def release_managed_resources_async(self) -> None:
        """Asynchronously release resources that reference other live objects."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args) -> None:
        await self.dispose_async()


class Disposer(AsyncDisposable):
    """Gives any SupportsRelease object the disposal lifecycle by composition.

    The wrapped object's hooks run through this wrapper's guard, so they
    execute at most once however the wrapper is disposed. If the wrapped
    object has no release_managed_resources_async(), the async path falls
    back to its synchronous managed hook.
    """

    def __init__(self, releaser: SupportsRelease):
        super().__init__()
        self._releaser = releaser

    @property
    def releaser(self) -> SupportsRelease:
        """The wrapped object."""
        return self._releaser

    def release_managed_resources(self) -> None:
        self._releaser.release_managed_resources()
        super().release_managed_resources()

    def release_unmanaged_resources(self) -> None:
        self._releaser.release_unmanaged_resources()
        super().release_unmanaged_resources()

    async def release_managed_resources_async(self) -> None:
        if isinstance(self._releaser, SupportsAsyncRelease):
            await self._releaser.release_managed_resources_async()
        else:
            self._releaser.release_managed_resources()
        await super().release_managed_resources_async()
