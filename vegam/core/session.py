from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from vegam.core.countdown import Clock, Countdown
from vegam.core.processor import apply_key
from vegam.core.state import (
    DEFAULT_DURATION,
    DURATIONS,
    KeyEvent,
    Phase,
    SessionState,
    new_session,
)
from vegam.core.stats import Stats, compute_stats, progress

logger = logging.getLogger(__name__)


class TypingSession:
    """Owns the current :class:`SessionState` and its countdown.

    This is the only mutable piece of the core. Key events and countdown polls
    are expected on the same thread (the UI event loop); each replaces
    ``state`` with the result of a pure transition.
    """

    def __init__(
        self,
        duration: int = DEFAULT_DURATION,
        seed: int = 0,
        clock: Clock = time.monotonic,
        on_finished: Optional[Callable[[Stats], None]] = None,
    ) -> None:
        """Create an idle session for ``seed``; ``duration`` must be one of DURATIONS."""
        self._state = new_session(seed=seed, duration=duration)
        self._on_finished = on_finished
        self._countdown = Countdown(duration, clock=clock, on_expired=self._finish)

    @property
    def state(self) -> SessionState:
        """Current read-only snapshot."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def duration(self) -> int:
        return self._state.duration

    @property
    def seed(self) -> int:
        return self._state.seed

    @property
    def remaining(self) -> float:
        """Seconds left as of the last poll."""
        return self._countdown.remaining

    def handle_key(self, event: KeyEvent) -> SessionState:
        """Apply one key event; the first one starts the countdown."""
        if self._state.phase is Phase.ACTIVE:
            self.poll()
        if self._state.phase is Phase.FINISHED:
            return self._state

        was_idle = self._state.phase is Phase.IDLE
        self._state = apply_key(self._state, event)
        if was_idle and self._state.phase is Phase.ACTIVE:
            self._countdown.start(self._state.duration)
            logger.info("Typing test started (%ss, seed %s)", self._state.duration, self._state.seed)
        return self._state

    def poll(self) -> float:
        """Advance the countdown; call once per frame while active."""
        return self._countdown.poll()

    def set_duration(self, duration: int) -> bool:
        """Pick a new duration. Only honoured while idle."""
        if self._state.phase is not Phase.IDLE:
            logger.debug("Ignoring duration change to %s: test already %s", duration, self._state.phase.value)
            return False
        if duration not in DURATIONS:
            logger.debug("Ignoring unsupported duration %r", duration)
            return False
        self._countdown.set_duration(duration)
        self._state = self._state.evolve(duration=duration)
        return True

    def restart(self) -> SessionState:
        """Drop everything and start over, idle, with the next seed."""
        self._countdown.cancel()
        self._countdown.set_duration(self._state.duration)
        self._state = new_session(seed=self._state.seed + 1, duration=self._state.duration)
        logger.info("Typing test restarted (seed %s)", self._state.seed)
        return self._state

    def stats(self) -> Stats:
        return compute_stats(self._state, self._countdown.remaining)

    def progress(self) -> float:
        """Fraction of the countdown used up, for a progress bar."""
        return progress(self._countdown.remaining, self._state.duration)

    def _finish(self) -> None:
        if self._state.phase is Phase.FINISHED:
            return
        self._state = self._state.evolve(phase=Phase.FINISHED)
        result = self.stats()
        logger.info(
            "Typing test finished: %s wpm, %.1f%% accuracy, %s keystrokes",
            result.wpm,
            result.accuracy,
            result.total,
        )
        if self._on_finished is not None:
            self._on_finished(result)
