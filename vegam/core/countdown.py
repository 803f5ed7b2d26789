"""Cooperative countdown driven by polling.

The countdown never schedules anything itself. The host calls :meth:`poll`
as often as it redraws (once per frame in the desktop UI), so the precision of
the remaining time is bounded by the poll rate.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]
"""Zero-argument callable returning monotonic seconds."""


def remaining_seconds(started_at: float, now: float, duration: float) -> float:
    """Seconds left of ``duration`` at ``now`` for a countdown started at ``started_at``."""
    return max(0.0, duration - (now - started_at))


class Countdown:
    def __init__(
        self,
        duration: float,
        clock: Clock = time.monotonic,
        on_expired: Optional[Callable[[], None]] = None,
    ) -> None:
        self._duration = float(duration)
        self._clock = clock
        self._on_expired = on_expired
        self._started_at: Optional[float] = None
        self._remaining = self._duration
        self._expired = False

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def started_at(self) -> Optional[float]:
        return self._started_at

    @property
    def is_active(self) -> bool:
        """True between :meth:`start` and expiry or cancellation."""
        return self._started_at is not None and not self._expired

    @property
    def is_expired(self) -> bool:
        return self._expired

    @property
    def remaining(self) -> float:
        """Remaining seconds as of the last poll."""
        return self._remaining

    def set_duration(self, duration: float) -> bool:
        """Change the duration; refused (returns False) while counting."""
        if self.is_active:
            return False
        self._duration = float(duration)
        if not self._expired:
            self._remaining = self._duration
        return True

    def start(self, duration: Optional[float] = None, now: Optional[float] = None) -> None:
        """Begin counting down from ``duration`` (defaults to the current one)."""
        if duration is not None:
            self._duration = float(duration)
        self._started_at = self._clock() if now is None else now
        self._remaining = self._duration
        self._expired = False

    def poll(self, now: Optional[float] = None) -> float:
        """Return the remaining seconds, firing ``on_expired`` once when it hits zero."""
        if not self.is_active:
            return self._remaining
        current = self._clock() if now is None else now
        self._remaining = remaining_seconds(self._started_at, current, self._duration)
        if self._remaining <= 0:
            self._remaining = 0.0
            self._expired = True
            if self._on_expired is not None:
                self._on_expired()
        return self._remaining

    def cancel(self) -> None:
        """Stop counting and rewind to the full duration."""
        self._started_at = None
        self._remaining = self._duration
        self._expired = False
