"""Application entry point and setup for the Vegam typing test."""

import logging
import sys

from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from vegam.core.settings import SettingsStore
from vegam.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def apply_application_font(app: QApplication) -> None:
    """Use a monospace family for the whole app so typed text never reflows."""
    font = QFont()
    font.setFamilies(["JetBrains Mono", "DejaVu Sans Mono", "Menlo", "Consolas", "monospace"])
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPointSize(11)
    app.setFont(font)
    logging.info("Default font families: %s", ", ".join(font.families()))


def run() -> None:
    """Initialize the application and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Vegam")
    app.setApplicationDisplayName("Vegam")

    apply_application_font(app)

    settings = SettingsStore()
    window = MainWindow(settings=settings)
    window.show()

    sys.exit(app.exec())
