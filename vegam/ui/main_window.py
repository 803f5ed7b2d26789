from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import QEvent, Qt, QTimer
from PySide6.QtGui import QCloseEvent, QKeyEvent, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from vegam.core.session import TypingSession
from vegam.core.settings import SettingsStore
from vegam.core.state import DURATIONS, KeyKind, Phase
from vegam.core.stats import Stats
from vegam.ui.colors import Palette, progress_color
from vegam.ui.keys import normalize_key
from vegam.ui.summary_overlay import SummaryOverlay
from vegam.ui.typing_widgets import StatCard, WordsView

FRAME_INTERVAL_MS = 16


def _duration_button_style() -> str:
    return f"""
        QPushButton {{
            background: {Palette.BUTTON_BG};
            color: {Palette.BUTTON_TEXT};
            padding: 6px 12px;
            border: none;
            border-radius: 10px;
            font-weight: 600;
        }}
        QPushButton:hover {{ background: {Palette.BUTTON_HOVER}; }}
        QPushButton:checked {{ background: {Palette.ACCENT_BG}; color: {Palette.ACCENT}; }}
        QPushButton:disabled {{ color: {Palette.TEXT_FAINT}; }}
    """


class MainWindow(QMainWindow):
    """Single-screen typing test.

    Keys arrive through an event filter on a hidden line edit that always holds
    focus; they are normalized and handed to the :class:`TypingSession`. While
    a test is running a frame timer polls the countdown and redraws.
    """

    def __init__(self, settings: SettingsStore) -> None:
        super().__init__()
        self._settings = settings
        self._session = TypingSession(duration=settings.duration, on_finished=self._on_finished)

        self._duration_buttons: Dict[int, QPushButton] = {}
        self._words_view: Optional[WordsView] = None
        self._progress_bar: Optional[QProgressBar] = None
        self._progress_color = ""
        self._time_card: Optional[StatCard] = None
        self._wpm_card: Optional[StatCard] = None
        self._accuracy_card: Optional[StatCard] = None
        self._counts_card: Optional[StatCard] = None
        self._summary: Optional[SummaryOverlay] = None
        self.input_box: Optional[QLineEdit] = None

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

        self._build_ui()
        self._refresh()

    def _build_ui(self) -> None:
        self.setWindowTitle("Typing Test")
        self.resize(960, 640)

        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(f"QWidget#root {{ background: {Palette.BG}; }}")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(16)

        header = QFrame()
        header.setObjectName("header")
        header.setStyleSheet(
            f"""
            QFrame#header {{
                background: {Palette.CARD_BG};
                border: 1px solid {Palette.CARD_BORDER};
                border-radius: 16px;
            }}
            """
        )
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(16, 10, 16, 10)
        title = QLabel("Typing Test")
        title.setStyleSheet(f"color: {Palette.TEXT}; font-size: 16px; font-weight: 600; border: none;")
        header_layout.addWidget(title)
        header_layout.addStretch(1)

        for seconds in DURATIONS:
            btn = QPushButton(str(seconds))
            btn.setCheckable(True)
            btn.setFocusPolicy(Qt.NoFocus)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setStyleSheet(_duration_button_style())
            btn.clicked.connect(lambda _checked=False, s=seconds: self._choose_duration(s))
            header_layout.addWidget(btn)
            self._duration_buttons[seconds] = btn

        divider = QFrame()
        divider.setFixedSize(1, 24)
        divider.setStyleSheet(f"background: {Palette.CARD_BORDER}; border: none;")
        header_layout.addWidget(divider)

        restart_btn = QPushButton("Restart")
        restart_btn.setFocusPolicy(Qt.NoFocus)
        restart_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        restart_btn.setStyleSheet(_duration_button_style())
        restart_btn.clicked.connect(self._restart)
        header_layout.addWidget(restart_btn)
        layout.addWidget(header)

        self._progress_bar = QProgressBar()
        self._progress_bar.setRange(0, 1000)
        self._progress_bar.setTextVisible(False)
        self._progress_bar.setFixedHeight(4)
        layout.addWidget(self._progress_bar)

        card = QFrame()
        card.setObjectName("typingCard")
        card.setStyleSheet(
            f"""
            QFrame#typingCard {{
                background: {Palette.CARD_BG};
                border: 1px solid {Palette.CARD_BORDER};
                border-radius: 24px;
            }}
            """
        )
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 32, 32, 32)
        self._words_view = WordsView()
        self._words_view.setMinimumHeight(200)
        card_layout.addWidget(self._words_view)

        # Hidden input that owns keyboard focus; see eventFilter.
        self.input_box = QLineEdit(card)
        self.input_box.setFixedSize(1, 1)
        self.input_box.setStyleSheet("background: transparent; border: none; color: transparent;")
        self.input_box.installEventFilter(self)
        layout.addWidget(card, 1)

        stats_row = QHBoxLayout()
        stats_row.setSpacing(12)
        self._time_card = StatCard("Time left")
        self._wpm_card = StatCard("WPM")
        self._accuracy_card = StatCard("Accuracy")
        self._counts_card = StatCard("Correct / Wrong")
        for stat in (self._time_card, self._wpm_card, self._accuracy_card, self._counts_card):
            stats_row.addWidget(stat, 1)
        layout.addLayout(stats_row)

        self.setCentralWidget(root)

        self._summary = SummaryOverlay(root)
        self._summary.restart_requested.connect(self._restart)

        self.restart_shortcut = QShortcut(Qt.CTRL | Qt.Key_R, self)
        self.restart_shortcut.activated.connect(self._restart)

        QTimer.singleShot(0, lambda: self.input_box.setFocus())

    def eventFilter(self, obj, event) -> bool:
        """Route key presses on the hidden input into the session."""
        if obj is self.input_box and event.type() == QEvent.Type.KeyPress:
            return self._on_key_press(event)
        return super().eventFilter(obj, event)

    def mousePressEvent(self, event) -> None:
        super().mousePressEvent(event)
        if self.input_box is not None:
            self.input_box.setFocus()

    def _on_key_press(self, event: QKeyEvent) -> bool:
        if event.modifiers() & (Qt.ControlModifier | Qt.MetaModifier):
            return False
        key_event = normalize_key(event.key(), event.text())
        was_idle = self._session.phase is Phase.IDLE
        self._session.handle_key(key_event)
        if was_idle and self._session.phase is Phase.ACTIVE:
            self._frame_timer.start()
        self._refresh()
        # Everything except unrelated keys is consumed; Tab must never move focus.
        return key_event.kind is not KeyKind.OTHER

    def _on_frame(self) -> None:
        self._session.poll()
        self._refresh()

    def _on_finished(self, stats: Stats) -> None:
        self._frame_timer.stop()
        if self._summary is not None:
            self._summary.show_stats(stats)

    def _choose_duration(self, seconds: int) -> None:
        if self._session.set_duration(seconds):
            self._settings.set_duration(seconds)
        self._refresh()
        if self.input_box is not None:
            self.input_box.setFocus()

    def _restart(self) -> None:
        self._frame_timer.stop()
        if self._summary is not None:
            self._summary.hide()
        self._session.restart()
        self._refresh()
        if self.input_box is not None:
            self.input_box.setFocus()

    def _refresh(self) -> None:
        """Push the current snapshot and stats into every widget."""
        state = self._session.state
        stats = self._session.stats()
        idle = state.phase is Phase.IDLE

        for seconds, btn in self._duration_buttons.items():
            btn.setChecked(seconds == state.duration)
            btn.setEnabled(idle)
            btn.setToolTip("Set time" if idle else "Cannot change after start")

        if self._words_view is not None:
            self._words_view.show_state(state)
        if self._progress_bar is not None:
            fraction = self._session.progress()
            self._progress_bar.setValue(int(fraction * 1000))
            color = progress_color(fraction)
            if color != self._progress_color:
                self._progress_color = color
                self._progress_bar.setStyleSheet(
                    f"""
                    QProgressBar {{ background: {Palette.TRACK}; border: none; border-radius: 2px; }}
                    QProgressBar::chunk {{ background: {color}; border-radius: 2px; }}
                    """
                )
        if self._time_card is not None:
            self._time_card.set_value(stats.time_left_label)
        if self._wpm_card is not None:
            self._wpm_card.set_value(str(stats.wpm))
        if self._accuracy_card is not None:
            self._accuracy_card.set_value(stats.accuracy_label)
        if self._counts_card is not None:
            self._counts_card.set_value(f"{stats.correct} / {stats.incorrect}")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save settings before closing."""
        self._frame_timer.stop()
        self._settings.save()
        super().closeEvent(event)
