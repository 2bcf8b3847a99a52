"""Qt main window letting a learner work through a question bank."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pattern_quiz.constants.ui_constants import (
    IMPORT_BUTTON_TEXT,
    IMPORT_DIALOG_TITLE,
    IMPORT_ERROR_TITLE,
    IMPORT_FILE_FILTER,
    RESTART_BUTTON,
    WINDOW_TITLE,
)
from pattern_quiz.core.exceptions import QuizError
from pattern_quiz.core.models import Question, QuizViewState
from pattern_quiz.core.quiz_controller import QuizController
from pattern_quiz.core.quiz_importer import QuizImportError, load_quiz_from_file
from pattern_quiz.styling.color_palette import Theme
from pattern_quiz.styling.styles import Styles
from pattern_quiz.ui.components.quiz_panel import QuizPanel
from pattern_quiz.ui.components.summary_panel import SummaryPanel
from pattern_quiz.ui.dialog_helpers import confirm_restart_quiz, show_error, show_warning

logger = logging.getLogger(__name__)


class QuizWindow(QMainWindow):
    """Main window hosting one quiz session at a time."""

    def __init__(
        self,
        questions: Sequence[Question],
        title: str | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__()
        self._theme = theme
        self._controller = QuizController(questions)
        self._set_title(title)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self._render(self._controller.view_state())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        toolbar = QHBoxLayout()
        self.import_button = QPushButton(IMPORT_BUTTON_TEXT, self)
        self.import_button.clicked.connect(self._handle_import)
        toolbar.addWidget(self.import_button)

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self._handle_restart_request)
        toolbar.addWidget(self.restart_button)
        toolbar.addStretch()
        root_layout.addLayout(toolbar)

        self.stack = QStackedWidget(self)
        self.quiz_panel = QuizPanel(
            on_option=lambda index: self._dispatch(self._controller.on_option_click, index),
            on_check=lambda: self._dispatch(self._controller.on_check_click),
            on_next=self._handle_next,
            theme=self._theme,
            parent=self,
        )
        self.summary_panel = SummaryPanel(on_restart=self._restart, parent=self)
        self.stack.addWidget(self.quiz_panel)
        self.stack.addWidget(self.summary_panel)
        root_layout.addWidget(self.stack)

    def _set_title(self, title: str | None) -> None:
        self.setWindowTitle(f"{WINDOW_TITLE} - {title}" if title else WINDOW_TITLE)

    def _dispatch(self, action, *args: int) -> None:
        try:
            view = action(*args)
        except QuizError as exc:
            # Controls are gated by the view state; reaching this means a stale click.
            show_warning(self, WINDOW_TITLE, str(exc))
            return
        self._render(view)

    def _handle_next(self) -> None:
        if self._controller.view_state().can_finish:
            self._dispatch(self._controller.on_finish_click)
        else:
            self._dispatch(self._controller.on_next_click)

    def _handle_restart_request(self) -> None:
        progress = self._controller.view_state().progress
        if progress.answered_count and not self._controller.finished:
            if not confirm_restart_quiz(self):
                return
        self._restart()

    def _restart(self) -> None:
        self._render(self._controller.on_restart_click())

    def _handle_import(self) -> None:
        file_name, _ = QFileDialog.getOpenFileName(self, IMPORT_DIALOG_TITLE, "", IMPORT_FILE_FILTER)
        if not file_name:
            return
        try:
            imported = load_quiz_from_file(Path(file_name))
        except QuizImportError as exc:
            logger.warning("Import of %s failed: %s", file_name, exc)
            show_error(self, IMPORT_ERROR_TITLE, str(exc))
            return
        self._controller = QuizController(imported.questions)
        self._set_title(imported.title)
        self._render(self._controller.view_state())

    def _render(self, view: QuizViewState) -> None:
        if view.finished and view.summary is not None:
            self.summary_panel.render(view.summary)
            self.stack.setCurrentWidget(self.summary_panel)
            return
        self.quiz_panel.render(view)
        self.stack.setCurrentWidget(self.quiz_panel)
