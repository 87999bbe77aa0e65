"""Application entry point and setup for the Skriva tracing practice."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from skriva.core.activity import ActivityLog
from skriva.core.config import load_settings
from skriva.core.glyphs import GlyphLibrary
from skriva.core.lessons import LessonRepository
from skriva.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load glyphs, lessons and settings, then show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Skriva")
    app.setApplicationDisplayName("Skriva")

    settings = load_settings()
    library = GlyphLibrary()
    lessons = LessonRepository()
    activity_log = ActivityLog()

    window = MainWindow(
        library=library,
        lessons=lessons,
        activity_log=activity_log,
        settings=settings,
    )
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.resize(screen.availableGeometry().size() * 0.8)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
