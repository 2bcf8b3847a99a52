"""Orchestrates learner actions against a quiz session and emits view state."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
import logging

from pattern_quiz.constants.ui_constants import FINISH_BUTTON, NEXT_BUTTON
from pattern_quiz.core.evaluator import evaluate
from pattern_quiz.core.exceptions import InvalidStateError, NotCheckedError, QuizError
from pattern_quiz.core.explanation_renderer import compose_explanation
from pattern_quiz.core.models import (
    OptionStatus,
    OptionView,
    Question,
    QuestionState,
    QuizSummary,
    QuizViewState,
)
from pattern_quiz.core.services.progress_tracker import compute_progress, summarize
from pattern_quiz.core.services.quiz_session import QuizSession

logger = logging.getLogger(__name__)


class QuizController:
    """State machine for one quiz view: Unanswered -> Selected -> Checked.

    Each ``on_*`` handler maps to a control in the rendering layer. Calls the
    view state marks as disabled are rejected with a typed ``QuizError`` and
    leave the session untouched.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        self._session = QuizSession(questions)
        self._finished: bool = False

    @property
    def session(self) -> QuizSession:
        return self._session

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def question_state(self) -> QuestionState:
        answer = self._session.current_answer
        if answer is None or answer.selected_index is None:
            return QuestionState.UNANSWERED
        if answer.checked:
            return QuestionState.CHECKED
        return QuestionState.SELECTED

    # --- Actions ---

    def on_option_click(self, option_index: int) -> QuizViewState:
        with self._rejections("select option"):
            self._ensure_not_finished()
            self._session.select_option(option_index)
        return self.view_state()

    def on_check_click(self) -> QuizViewState:
        with self._rejections("check answer"):
            self._ensure_not_finished()
            self._session.check_current_answer()
        return self.view_state()

    def on_next_click(self) -> QuizViewState:
        with self._rejections("next question"):
            self._ensure_not_finished()
            self._session.advance()
        return self.view_state()

    def on_finish_click(self) -> QuizViewState:
        with self._rejections("finish quiz"):
            self._ensure_not_finished()
            if not self._session.is_last_question:
                raise InvalidStateError("The quiz can only be finished from the last question.")
            if self.question_state is not QuestionState.CHECKED:
                raise NotCheckedError("Check the last answer before finishing the quiz.")
            self._finished = True
        summary = self.summary()
        logger.info(
            "Quiz finished: %d/%d correct (%s)",
            summary.correct_count,
            summary.question_count,
            summary.rating.value,
        )
        return self.view_state()

    def on_restart_click(self) -> QuizViewState:
        self._session.reset()
        self._finished = False
        logger.info("Quiz restarted")
        return self.view_state()

    # --- View state ---

    def summary(self) -> QuizSummary:
        return summarize(self._session)

    def view_state(self) -> QuizViewState:
        session = self._session
        question = session.current_question
        answer = session.current_answer
        state = self.question_state
        checked = state is QuestionState.CHECKED
        is_last = session.is_last_question

        if checked:
            statuses = evaluate(question, answer.selected_index).option_statuses
        else:
            selected = answer.selected_index if answer is not None else None
            statuses = tuple(
                OptionStatus.SELECTED if idx == selected else OptionStatus.NEUTRAL
                for idx in range(question.option_count)
            )

        options = tuple(
            OptionView(index=idx, text=option.text, status=status)
            for idx, (option, status) in enumerate(zip(question.options, statuses))
        )

        return QuizViewState(
            question_id=question.id,
            question_number=session.current_index + 1,
            question_count=session.question_count,
            prompt=question.prompt,
            options=options,
            question_state=state,
            is_correct=answer.correct if checked else None,
            explanation_visible=checked,
            explanation=compose_explanation(question) if checked else None,
            can_check=state is QuestionState.SELECTED and not self._finished,
            can_next=checked and not is_last and not self._finished,
            can_finish=checked and is_last and not self._finished,
            next_label=FINISH_BUTTON if is_last else NEXT_BUTTON,
            progress=compute_progress(session),
            finished=self._finished,
            summary=self.summary() if self._finished else None,
            selectable=not checked and not self._finished,
        )

    # --- Helpers ---

    def _ensure_not_finished(self) -> None:
        if self._finished:
            raise InvalidStateError("The quiz is finished; restart it to answer again.")

    @contextmanager
    def _rejections(self, action: str) -> Iterator[None]:
        try:
            yield
        except QuizError as exc:
            logger.warning(
                "Rejected '%s' on question %d: %s",
                action,
                self._session.current_index + 1,
                exc,
            )
            raise
