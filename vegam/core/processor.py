"""Keystroke transitions for a typing test.

:func:`apply_key` is total: it never raises, and anything it cannot make sense
of (a finished session, typing past the last word, backspace at the very
start) leaves the state untouched.
"""

from __future__ import annotations

from vegam.core.state import WORD_MARKER, KeyEvent, KeyKind, Phase, SessionState


def apply_key(state: SessionState, event: KeyEvent) -> SessionState:
    """Return the state after ``event``; the same object if nothing changed."""
    if state.phase is Phase.FINISHED:
        return state
    if state.phase is Phase.IDLE:
        state = state.evolve(phase=Phase.ACTIVE)

    if event.kind is KeyKind.CHAR and event.char:
        return _type_char(state, event.char)
    if event.kind is KeyKind.SPACE:
        return _finalize_word(state)
    if event.kind is KeyKind.BACKSPACE:
        return _backspace(state)
    # Tab is swallowed so the host never moves focus; other keys are ignored.
    return state


def _type_char(state: SessionState, char: str) -> SessionState:
    if state.word_index >= len(state.words):
        return state
    target = state.current_word
    pos = state.char_index
    typed = state.typed_at(state.word_index) + char
    hit = pos < len(target) and target[pos] == char
    return state.evolve(
        typed=state.with_typed(state.word_index, typed),
        char_index=pos + 1,
        correct=state.correct + (1 if hit else 0),
        incorrect=state.incorrect + (0 if hit else 1),
    )


def _finalize_word(state: SessionState) -> SessionState:
    if state.word_index >= len(state.words):
        return state
    target = state.current_word
    attempt = state.typed_at(state.word_index)
    missed = max(0, len(target) - len(attempt))
    return state.evolve(
        typed=state.with_typed(state.word_index, attempt + WORD_MARKER),
        word_index=state.word_index + 1,
        char_index=0,
        incorrect=state.incorrect + missed,
    )


def _backspace(state: SessionState) -> SessionState:
    if state.char_index > 0:
        return _erase_char(state)
    if state.word_index > 0:
        return _step_back(state)
    return state


def _erase_char(state: SessionState) -> SessionState:
    index = state.word_index
    typed = state.typed_at(index)
    if not typed:
        return state.evolve(char_index=0)
    pos = len(typed) - 1
    removed = typed[pos]
    target = state.current_word
    was_correct = pos < len(target) and target[pos] == removed
    return state.evolve(
        typed=state.with_typed(index, typed[:pos]),
        char_index=pos,
        correct=max(0, state.correct - 1) if was_correct else state.correct,
        incorrect=state.incorrect if was_correct else max(0, state.incorrect - 1),
    )


def _step_back(state: SessionState) -> SessionState:
    prev = state.word_index - 1
    prev_word = state.word_at(prev)
    prev_typed = state.typed_at(prev)
    if prev_typed.endswith(WORD_MARKER):
        prev_typed = prev_typed[: -len(WORD_MARKER)]

    if len(prev_typed) > len(prev_word):
        # Trim one overflow character but keep the word finalized.
        return state.evolve(
            typed=state.with_typed(prev, prev_typed[:-1] + WORD_MARKER),
            incorrect=max(0, state.incorrect - 1),
        )
    return state.evolve(
        typed=state.with_typed(prev, prev_typed),
        word_index=prev,
        char_index=len(prev_typed),
    )
