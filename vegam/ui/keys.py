"""Translate Qt key presses into the core's normalized key events."""

from __future__ import annotations

from PySide6.QtCore import Qt

from vegam.core.state import BACKSPACE, OTHER, SPACE, TAB, KeyEvent

_NAMED_KEYS = {
    Qt.Key.Key_Backspace: BACKSPACE,
    Qt.Key.Key_Space: SPACE,
    Qt.Key.Key_Tab: TAB,
    Qt.Key.Key_Backtab: TAB,
}


def normalize_key(key, text: str) -> KeyEvent:
    """Map a Qt key code and its event text to a :class:`KeyEvent`.

    ``key`` may be a ``Qt.Key`` member or the plain int that
    ``QKeyEvent.key()`` returns.
    """
    try:
        qt_key = Qt.Key(key)
    except ValueError:
        qt_key = None
    if qt_key in _NAMED_KEYS:
        return _NAMED_KEYS[qt_key]
    if text == " ":
        return SPACE
    if len(text) == 1 and text.isprintable():
        return KeyEvent.char_key(text)
    return OTHER
