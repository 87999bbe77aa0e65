from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from skriva.core.activity import ActivityLog
from skriva.core.composition import PracticeMode
from skriva.core.config import Settings
from skriva.core.content import InvalidContent, sanitize_sentence
from skriva.core.events import Event, SessionCompleted
from skriva.core.feedback import speech_for
from skriva.core.glyphs import GlyphLibrary
from skriva.core.lessons import Lesson, LessonRepository
from skriva.core.session import SessionController
from skriva.ui.colors import TraceColors
from skriva.ui.tracing_canvas import TracingCanvas

logger = logging.getLogger(__name__)

_BANNER_MS = 3000


class MainWindow(QMainWindow):
    def __init__(
        self,
        library: GlyphLibrary,
        lessons: LessonRepository,
        activity_log: ActivityLog,
        settings: Optional[Settings] = None,
    ) -> None:
        super().__init__()
        self._settings = settings or Settings()
        self._lessons = lessons
        self._activity_log = activity_log
        self._controller = SessionController(library=library, settings=self._settings.tracing)
        self._controller.subscribe(self._on_event)
        self._lesson: Optional[Lesson] = None
        self._item_index = 0

        self.setWindowTitle("Skriva")
        self._build_ui()
        self._populate_lessons()

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        side = QVBoxLayout()
        side.setSpacing(8)
        self._lesson_list = QListWidget()
        self._lesson_list.currentItemChanged.connect(self._on_lesson_selected)
        self._item_list = QListWidget()
        self._item_list.currentRowChanged.connect(self._on_item_selected)

        self._sentence_input = QLineEdit()
        self._sentence_input.setPlaceholderText("Skriv en egen mening …")
        self._sentence_input.returnPressed.connect(self._start_custom_sentence)
        sentence_button = QPushButton("Träna meningen")
        sentence_button.clicked.connect(self._start_custom_sentence)

        side.addWidget(QLabel("Lektioner"))
        side.addWidget(self._lesson_list, 1)
        side.addWidget(self._item_list, 2)
        side.addWidget(self._sentence_input)
        side.addWidget(sentence_button)

        main = QVBoxLayout()
        self._title = QLabel("")
        self._title.setAlignment(Qt.AlignCenter)
        self._title.setStyleSheet(f"font-size: 24px; font-weight: 800; color: {TraceColors.PRIMARY_DARK};")
        self._canvas = TracingCanvas(self._controller)
        self._banner = QLabel("")
        self._banner.setAlignment(Qt.AlignCenter)
        self._banner.setStyleSheet(f"font-size: 20px; color: {TraceColors.PRIMARY};")

        buttons = QHBoxLayout()
        reset_button = QPushButton("Börja om")
        reset_button.clicked.connect(self._reset)
        self._next_button = QPushButton("Nästa →")
        self._next_button.clicked.connect(self._next_item)
        buttons.addStretch(1)
        buttons.addWidget(reset_button)
        buttons.addWidget(self._next_button)

        main.addWidget(self._title)
        main.addWidget(self._canvas, 1)
        main.addWidget(self._banner)
        main.addLayout(buttons)

        layout.addLayout(side, 1)
        layout.addLayout(main, 3)
        self.setCentralWidget(central)

    def _populate_lessons(self) -> None:
        for lesson in self._lessons.all():
            item = QListWidgetItem(lesson.title)
            item.setData(Qt.UserRole, lesson.key)
            self._lesson_list.addItem(item)
        if self._lesson_list.count():
            self._lesson_list.setCurrentRow(0)

    def _on_lesson_selected(self, item: Optional[QListWidgetItem], _previous=None) -> None:
        if item is None:
            return
        self._lesson = self._lessons.get(item.data(Qt.UserRole))
        self._item_list.blockSignals(True)
        self._item_list.clear()
        self._item_list.addItems(self._lesson.items)
        self._item_list.blockSignals(False)
        self._item_list.setCurrentRow(0)

    def _on_item_selected(self, row: int) -> None:
        if self._lesson is None or row < 0:
            return
        self._item_index = row
        self._start(self._lesson.mode, self._lesson.items[row])

    def _next_item(self) -> None:
        if self._lesson is None:
            return
        row = self._item_index + 1
        if row < len(self._lesson.items):
            self._item_list.setCurrentRow(row)

    def _start_custom_sentence(self) -> None:
        text = sanitize_sentence(self._sentence_input.text())
        if not text:
            self._show_banner("Meningen måste innehålla bokstäver!")
            return
        self._start(PracticeMode.SENTENCE, text)

    def _start(self, mode: PracticeMode, content: str) -> None:
        try:
            self._controller.start(mode, content)
        except InvalidContent as e:
            logger.warning("Cannot practice %r: %s", content, e)
            self._show_banner(str(e))
            return
        self._title.setText(content)
        self._banner.clear()
        self._canvas.refresh()

    def _reset(self) -> None:
        self._controller.reset()
        self._banner.clear()
        self._canvas.refresh()

    def _on_event(self, event: Event) -> None:
        text = speech_for(event) if self._settings.sound_enabled else None
        if isinstance(event, SessionCompleted):
            content = self._controller.content
            if content is not None:
                self._activity_log.record_session(event, content.text)
        if text:
            self._show_banner(text)

    def _show_banner(self, text: str) -> None:
        self._banner.setText(text)
        QTimer.singleShot(_BANNER_MS, lambda: self._clear_banner(text))

    def _clear_banner(self, text: str) -> None:
        if self._banner.text() == text:
            self._banner.clear()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Total practice time: %d s", self._activity_log.total_practice_seconds())
        super().closeEvent(event)
