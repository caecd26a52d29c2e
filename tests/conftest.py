"""Pytest fixtures for devkit-utils tests."""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from devkit_utils import configure  # noqa: E402
from devkit_utils.lifecycle import AsyncDisposable, Disposable  # noqa: E402


class DisposableSpy(Disposable):
    """Records every release hook call."""

    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    def release_managed_resources(self):
        self.calls.append("managed")
        super().release_managed_resources()

    def release_unmanaged_resources(self):
        self.calls.append("unmanaged")
        super().release_unmanaged_resources()


class AsyncDisposableSpy(AsyncDisposable):
    """Records every release hook call, including the async one."""

    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    def release_managed_resources(self):
        self.calls.append("managed")
        super().release_managed_resources()

    def release_unmanaged_resources(self):
        self.calls.append("unmanaged")
        super().release_unmanaged_resources()

    async def release_managed_resources_async(self):
        self.calls.append("managed_async")
        await super().release_managed_resources_async()


@pytest.fixture(autouse=True)
def quiet_finalization():
    """Silence undisposed warnings from objects left alive by tests."""
    configure(warn_on_undisposed=False)
    yield
    configure(warn_on_undisposed=False)


@pytest.fixture
def spy():
    """Fresh synchronous disposable spy."""
    return DisposableSpy()


@pytest.fixture
def async_spy():
    """Fresh asynchronous disposable spy."""
    return AsyncDisposableSpy()
