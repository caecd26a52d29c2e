"""Concurrency helpers.

Provides:
- Scoped acquisition of threading and asyncio semaphores
- Awaiting without the caller's context variables
"""

from .semaphore import (
    AsyncSemaphoreReleaser,
    SemaphoreReleaser,
    acquire_and_release,
    acquire_and_release_async,
)
from .tasks import without_capturing_context

__all__ = [
    "SemaphoreReleaser",
    "AsyncSemaphoreReleaser",
    "acquire_and_release",
    "acquire_and_release_async",
    "without_capturing_context",
]
