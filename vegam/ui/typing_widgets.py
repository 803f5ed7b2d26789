"""Typing test UI: word display and stat cards."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QTextBrowser, QWidget

from vegam.core.state import SessionState
from vegam.ui.colors import Palette
from vegam.ui.render import ACTIVE_ANCHOR, render_words_html


class WordsView(QTextBrowser):
    """Read-only word display that keeps the active word in view."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFocusPolicy(Qt.NoFocus)
        self.setFrameShape(QFrame.NoFrame)
        self.setOpenLinks(False)
        self.setTextInteractionFlags(Qt.NoTextInteraction)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setStyleSheet(f"QTextBrowser {{ background: transparent; color: {Palette.TEXT}; }}")
        self._last_html = ""

    def show_state(self, state: SessionState) -> None:
        markup = render_words_html(state)
        if markup == self._last_html:
            return
        self._last_html = markup
        # setHtml resets the scroll position, so re-anchor on every redraw.
        self.setHtml(markup)
        self.scrollToAnchor(ACTIVE_ANCHOR)


class StatCard(QFrame):
    """Label on the left, large value on the right."""

    def __init__(self, label: str, value: str = "", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("statCard")
        self.setStyleSheet(
            f"""
            QFrame#statCard {{
                background: {Palette.CARD_BG};
                border: 1px solid {Palette.CARD_BORDER};
                border-radius: 16px;
            }}
            """
        )
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        self._label = QLabel(label)
        self._label.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 13px; border: none;")
        self._value = QLabel(value)
        self._value.setStyleSheet(f"color: {Palette.TEXT}; font-size: 20px; font-weight: 600; border: none;")
        layout.addWidget(self._label, 0)
        layout.addStretch(1)
        layout.addWidget(self._value, 0)

    def set_value(self, value: str) -> None:
        self._value.setText(value)
