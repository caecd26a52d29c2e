"""Disposal state machine.

LIVE → DISPOSING → DISPOSED

Exactly one caller wins LIVE → DISPOSING. DISPOSED is terminal.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum

logger = logging.getLogger(__name__)


class DisposalState(str, Enum):
    """Disposal lifecycle states."""

    LIVE = "live"
    DISPOSING = "disposing"  # Winning path is running release hooks
    DISPOSED = "disposed"


class ObjectDisposedError(RuntimeError):
    """Raised when an operation is attempted on a disposed object."""

    def __init__(self, object_name: str):
        super().__init__(f"Cannot access a disposed object: {object_name}")
        self.object_name = object_name


class DisposalGuard:
    """One-time LIVE → DISPOSED transition shared by all disposal paths.

    Thread-safe via threading.Lock; the lock is only held for the state
    check, never while release hooks run.
    """

    def __init__(self, owner: str = ""):
        self._owner = owner
        self._state = DisposalState.LIVE
        self._lock = threading.Lock()

    @property
    def state(self) -> DisposalState:
        """Current disposal state."""
        return self._state

    @property
    def is_disposed(self) -> bool:
        """Whether the transition has completed."""
        return self._state == DisposalState.DISPOSED

    @property
    def is_disposing(self) -> bool:
        """Whether a disposal is in flight."""
        return self._state == DisposalState.DISPOSING

    def try_begin(self) -> bool:
        """Claim the transition.

        Returns:
            True for exactly one caller; that caller must call complete()
        """
        with self._lock:
            if self._state != DisposalState.LIVE:
                return False
            self._state = DisposalState.DISPOSING
        logger.debug(f"{self._owner or 'object'}: live -> disposing")
        return True

    def complete(self) -> None:
        """Commit the transition claimed by try_begin()."""
        with self._lock:
            if self._state != DisposalState.DISPOSING:
                raise RuntimeError(
                    f"Cannot complete disposal from state {self._state.value}"
                )
            self._state = DisposalState.DISPOSED
        logger.debug(f"{self._owner or 'object'}: disposing -> disposed")

    def check_not_disposed(self) -> None:
        """Raise ObjectDisposedError unless still LIVE."""
        if self._state != DisposalState.LIVE:
            raise ObjectDisposedError(self._owner or "object")
