"""Component rendering the current question of a quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pattern_quiz.constants.ui_constants import (
    CHECK_BUTTON,
    CORRECT_FEEDBACK,
    INCORRECT_FEEDBACK,
    NEXT_BUTTON,
    QUESTION_HEADER_TEMPLATE,
)
from pattern_quiz.core.explanation_renderer import renderer
from pattern_quiz.core.models import QuizViewState
from pattern_quiz.styling.color_palette import Theme
from pattern_quiz.styling.styles import Styles


class QuizPanel(QWidget):
    """Shows prompt, options, explanation, controls and progress for one view state."""

    def __init__(
        self,
        on_option: Callable[[int], None],
        on_check: Callable[[], None],
        on_next: Callable[[], None],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_option = on_option
        self._theme = theme
        self._option_buttons: list[QPushButton] = []
        self._selectable = False

        self._build_ui(on_check, on_next)

    def _build_ui(self, on_check: Callable[[], None], on_next: Callable[[], None]) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.header_label = QLabel("", self)
        self.header_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.header_label)

        self.prompt_label = QLabel("", self)
        self.prompt_label.setWordWrap(True)
        layout.addWidget(self.prompt_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.explanation_label = QLabel("", self)
        self.explanation_label.setWordWrap(True)
        self.explanation_label.setTextFormat(Qt.RichText)
        self.explanation_label.setStyleSheet(Styles.get_explanation_style(self._theme))
        self.explanation_label.setVisible(False)
        layout.addWidget(self.explanation_label)

        layout.addStretch()

        button_row = QHBoxLayout()
        self.check_button = QPushButton(CHECK_BUTTON, self)
        self.check_button.clicked.connect(on_check)
        button_row.addWidget(self.check_button)

        self.next_button = QPushButton(NEXT_BUTTON, self)
        self.next_button.clicked.connect(on_next)
        button_row.addWidget(self.next_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        progress_row = QHBoxLayout()
        self.answered_label = QLabel("0", self)
        progress_row.addWidget(self.answered_label)
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        progress_row.addWidget(self.progress_bar, stretch=1)
        self.total_label = QLabel("0", self)
        progress_row.addWidget(self.total_label)
        layout.addLayout(progress_row)

    def render(self, view: QuizViewState) -> None:
        self.header_label.setText(
            QUESTION_HEADER_TEMPLATE.format(number=view.question_number, count=view.question_count)
        )
        self.prompt_label.setText(view.prompt)
        self._selectable = view.selectable
        self._render_options(view)

        self.explanation_label.setVisible(view.explanation_visible)
        if view.explanation_visible:
            verdict = CORRECT_FEEDBACK if view.is_correct else INCORRECT_FEEDBACK
            self.explanation_label.setText(
                f"<p><b>{verdict}</b></p>{renderer.render_fragment(view.explanation)}"
            )

        self.check_button.setEnabled(view.can_check)
        self.next_button.setText(view.next_label)
        self.next_button.setEnabled(view.can_next or view.can_finish)

        progress = view.progress
        self.answered_label.setText(str(progress.answered_count))
        self.total_label.setText(str(progress.question_count))
        self.progress_bar.setValue(int(progress.percent_complete * 10))

    def _render_options(self, view: QuizViewState) -> None:
        while len(self._option_buttons) > len(view.options):
            button = self._option_buttons.pop()
            self.options_layout.removeWidget(button)
            button.deleteLater()
        while len(self._option_buttons) < len(view.options):
            index = len(self._option_buttons)
            button = QPushButton("", self)
            button.clicked.connect(lambda _checked=False, idx=index: self._handle_option(idx))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

        for button, option in zip(self._option_buttons, view.options):
            letter = chr(ord("A") + option.index)
            button.setText(f"{letter}. {option.text}")
            button.setStyleSheet(Styles.get_option_style(option.status, self._theme))
            button.setCursor(Qt.PointingHandCursor if view.selectable else Qt.ArrowCursor)

    def _handle_option(self, index: int) -> None:
        # Checked questions are read-only.
        if self._selectable:
            self._on_option(index)
