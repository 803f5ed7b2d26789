"""In-window "time's up" overlay with the final numbers."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from vegam.core.stats import Stats
from vegam.ui.colors import Palette


def _card_container(radius: int = 24, object_name: str = "summaryContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(360)
    container.setMaximumWidth(440)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {Palette.CARD_BG};
            border: 1px solid {Palette.CARD_BORDER};
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 0, 0, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.1);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def _primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: {Palette.TEXT};
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background: #3f3f46;
        }}
    """


class _MiniStat(QFrame):
    def __init__(self, label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("miniStat")
        self.setStyleSheet(
            f"""
            QFrame#miniStat {{
                background: {Palette.BG};
                border: 1px solid {Palette.CARD_BORDER};
                border-radius: 14px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(2)
        caption = QLabel(label)
        caption.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 11px; border: none;")
        self.value = QLabel("0")
        self.value.setStyleSheet(f"color: {Palette.TEXT}; font-size: 18px; font-weight: 600; border: none;")
        layout.addWidget(caption)
        layout.addWidget(self.value)


class SummaryOverlay(QWidget):
    """Shown when the countdown runs out. ``restart_requested`` fires on the button."""

    restart_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        # Clicking the backdrop does nothing; the test only ends via restart.
        overlay_bg = _overlay_background(self, lambda: None)
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _card_container()
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(16)

        title = QLabel("Time's up")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Palette.TEXT}; font-size: 20px; font-weight: 700; border: none;")
        content.addWidget(title)

        msg = QLabel("Great effort. Take a breath and try again.")
        msg.setAlignment(Qt.AlignCenter)
        msg.setWordWrap(True)
        msg.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 14px; border: none;")
        content.addWidget(msg)

        row = QHBoxLayout()
        row.setSpacing(10)
        self._wpm = _MiniStat("WPM")
        self._accuracy = _MiniStat("Accuracy")
        self._keystrokes = _MiniStat("Keystrokes")
        for stat in (self._wpm, self._accuracy, self._keystrokes):
            row.addWidget(stat, 1)
        content.addLayout(row)

        restart_btn = QPushButton("Restart")
        restart_btn.setStyleSheet(_primary_button_style())
        restart_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        restart_btn.setFocusPolicy(Qt.NoFocus)
        restart_btn.clicked.connect(lambda: (self.hide(), self.restart_requested.emit()))
        content.addWidget(restart_btn)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def show_stats(self, stats: Stats) -> None:
        self._wpm.value.setText(str(stats.wpm))
        self._accuracy.value.setText(stats.accuracy_label)
        self._keystrokes.value.setText(str(stats.total))
        self._update_geometry()
        self.raise_()
        self.show()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
