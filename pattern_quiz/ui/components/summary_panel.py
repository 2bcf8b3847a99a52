"""Component for the quiz completion screen."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from pattern_quiz.constants.ui_constants import (
    QUIZ_COMPLETE_TITLE,
    RATING_MESSAGES,
    RESTART_BUTTON,
    SCORE_PERCENT_TEMPLATE,
    SCORE_TEMPLATE,
)
from pattern_quiz.core.models import QuizSummary
from pattern_quiz.styling.styles import Styles


class SummaryPanel(QWidget):
    """Displays the final score and feedback tier."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(QUIZ_COMPLETE_TITLE, self)
        title.setStyleSheet(Styles.get_large_label_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.score_label)

        self.percent_label = QLabel("", self)
        self.percent_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.percent_label)

        self.rating_label = QLabel("", self)
        self.rating_label.setWordWrap(True)
        self.rating_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.rating_label)

        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(on_restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignCenter)
        layout.addStretch()

    def render(self, summary: QuizSummary) -> None:
        self.score_label.setText(
            SCORE_TEMPLATE.format(correct=summary.correct_count, count=summary.question_count)
        )
        self.percent_label.setText(SCORE_PERCENT_TEMPLATE.format(percent=summary.score_percent))
        self.rating_label.setText(RATING_MESSAGES[summary.rating.value])
