from __future__ import annotations

import math
from dataclasses import dataclass

from vegam.core.state import Phase, SessionState

CHARS_PER_WORD = 5
MIN_MINUTES = 0.01


@dataclass(frozen=True)
class Stats:
    """Metrics shown while typing and on the summary overlay.

    WPM counts correct keystrokes only, at five characters per word. Elapsed
    time is derived from the countdown: floored while running, ceiled once
    finished, so the final reading is the whole duration.
    """

    wpm: int
    accuracy: float
    correct: int
    incorrect: int
    elapsed: int
    remaining: float

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy_label(self) -> str:
        return f"{self.accuracy:.0f}%"

    @property
    def time_left_label(self) -> str:
        return f"{math.ceil(self.remaining)}s"


def accuracy(correct: int, incorrect: int) -> float:
    total = correct + incorrect
    if total == 0:
        return 100.0
    return 100.0 * correct / total


def elapsed_seconds(phase: Phase, duration: int, remaining: float) -> int:
    if phase is Phase.IDLE:
        return 0
    if phase is Phase.FINISHED:
        return duration - math.ceil(remaining)
    return duration - math.floor(remaining)


def words_per_minute(correct: int, elapsed: float) -> int:
    minutes = max(MIN_MINUTES, elapsed / 60)
    return math.floor(correct / CHARS_PER_WORD / minutes)


def compute_stats(state: SessionState, remaining: float) -> Stats:
    elapsed = elapsed_seconds(state.phase, state.duration, remaining)
    return Stats(
        wpm=words_per_minute(state.correct, elapsed),
        accuracy=accuracy(state.correct, state.incorrect),
        correct=state.correct,
        incorrect=state.incorrect,
        elapsed=elapsed,
        remaining=remaining,
    )


def progress(remaining: float, duration: float) -> float:
    """Fraction of the countdown used up, clamped to [0, 1]."""
    if duration <= 0:
        return 0.0
    return max(0.0, min(1.0, 1 - remaining / duration))
