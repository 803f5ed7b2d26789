"""Immutable session state and the normalized key event it consumes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from vegam.core.words import generate

DURATIONS: Tuple[int, ...] = (15, 30, 60, 120)
DEFAULT_DURATION = 30

WORD_MARKER = " "
"""Appended to a typed buffer when its word is finalized with space."""


class Phase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"


class KeyKind(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    SPACE = "space"
    TAB = "tab"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def char_key(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, char)


BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
SPACE = KeyEvent(KeyKind.SPACE)
TAB = KeyEvent(KeyKind.TAB)
OTHER = KeyEvent(KeyKind.OTHER)


@dataclass(frozen=True)
class SessionState:
    """One snapshot of a typing test.

    ``typed`` holds one entry per word reached so far; a finalized word ends
    with :data:`WORD_MARKER`. Every transition builds a new instance, so two
    snapshots can be compared with ``==``.
    """

    words: Tuple[str, ...]
    seed: int = 0
    duration: int = DEFAULT_DURATION
    phase: Phase = Phase.IDLE
    word_index: int = 0
    char_index: int = 0
    typed: Tuple[str, ...] = field(default_factory=tuple)
    correct: int = 0
    incorrect: int = 0

    @property
    def cursor(self) -> Tuple[int, int]:
        return (self.word_index, self.char_index)

    @property
    def current_word(self) -> str:
        """Target word under the cursor, empty once past the last word."""
        return self.word_at(self.word_index)

    def word_at(self, index: int) -> str:
        if 0 <= index < len(self.words):
            return self.words[index]
        return ""

    def typed_at(self, index: int) -> str:
        if 0 <= index < len(self.typed):
            return self.typed[index]
        return ""

    def with_typed(self, index: int, text: str) -> Tuple[str, ...]:
        """Return a copy of ``typed`` with entry ``index`` replaced by ``text``.

        Trailing empty entries are dropped so that erasing everything typed
        for a word gives back the same tuple as never having typed it.
        """
        buffers = list(self.typed)
        if index >= len(buffers):
            buffers.extend([""] * (index + 1 - len(buffers)))
        buffers[index] = text
        while buffers and not buffers[-1]:
            buffers.pop()
        return tuple(buffers)

    def evolve(self, **changes) -> "SessionState":
        return replace(self, **changes)


def new_session(seed: int = 0, duration: int = DEFAULT_DURATION) -> SessionState:
    """Fresh IDLE state with the word list for ``seed``."""
    if duration not in DURATIONS:
        raise ValueError(f"duration must be one of {DURATIONS}, got {duration!r}")
    return SessionState(words=generate(seed), seed=seed, duration=duration)
