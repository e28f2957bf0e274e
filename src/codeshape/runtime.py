"""Cancellation context threaded through the scan and extraction loops."""

from __future__ import annotations

import time
from typing import Optional

from .exceptions import AnalysisCancelledError


class Deadline:
    """A cooperative cancellation token with an optional time limit.

    Long-running loops call ``check()`` once per unit of work. The token
    raises ``AnalysisCancelledError`` once the time budget is spent or after
    ``cancel()`` has been called from another thread.
    """

    def __init__(self, seconds: Optional[float] = None, clock=time.monotonic):
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds
        self._cancelled = False

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        return cls(seconds)

    @classmethod
    def never(cls) -> Deadline:
        return cls(None)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        if self._cancelled:
            return True
        return self._expires_at is not None and self._clock() >= self._expires_at

    def remaining(self) -> Optional[float]:
        """Seconds left, or None when there is no time limit."""
        if self._expires_at is None:
            return None
        return max(self._expires_at - self._clock(), 0.0)

    def check(self, stage: Optional[str] = None) -> None:
        if self._cancelled:
            raise AnalysisCancelledError("cancelled by caller", stage=stage)
        if self._expires_at is not None and self._clock() >= self._expires_at:
            raise AnalysisCancelledError("deadline expired", stage=stage)
