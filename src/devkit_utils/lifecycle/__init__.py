"""Disposal lifecycle for resource-owning objects.

Provides:
- Idempotent dispose() with managed/unmanaged release hooks
- Awaitable dispose_async() for asynchronous cleanup
- Finalization fallback with undisposed-entity warnings
- Atomic LIVE → DISPOSING → DISPOSED transition safe across threads
"""

from .disposable import (
    AsyncDisposable,
    Disposable,
    Disposer,
    SupportsAsyncRelease,
    SupportsRelease,
)
from .state import DisposalGuard, DisposalState, ObjectDisposedError

__all__ = [
    "Disposable",
    "AsyncDisposable",
    "Disposer",
    "SupportsRelease",
    "SupportsAsyncRelease",
    "DisposalGuard",
    "DisposalState",
    "ObjectDisposedError",
]
