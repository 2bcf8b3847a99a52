"""Service holding one learner's pass through an ordered question list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
import logging

from pattern_quiz.core.evaluator import ensure_valid_option, evaluate
from pattern_quiz.core.exceptions import (
    EmptyQuizError,
    EndOfQuizError,
    InvalidStateError,
    NoSelectionError,
    NotCheckedError,
)
from pattern_quiz.core.models import Answer, Evaluation, Question

logger = logging.getLogger(__name__)


class QuizSession:
    """Owns the question order, the current position and the learner's answers.

    Answers are created lazily on first selection and locked once checked.
    Every mutator validates before touching state, so a rejected call leaves
    the session exactly as it was.
    """

    def __init__(self, questions: Sequence[Question]) -> None:
        if not questions:
            raise EmptyQuizError("A quiz session needs at least one question.")
        self._questions: tuple[Question, ...] = tuple(questions)
        self._answers: dict[int, Answer] = {}
        self._current_index: int = 0

    # --- Read side ---

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_question(self) -> Question:
        return self._questions[self._current_index]

    @property
    def current_answer(self) -> Answer | None:
        return self.answer_at(self._current_index)

    @property
    def answers(self) -> dict[int, Answer]:
        """Return copies of all recorded answers keyed by question index."""
        return {index: replace(answer) for index, answer in self._answers.items()}

    @property
    def is_last_question(self) -> bool:
        return self._current_index == len(self._questions) - 1

    @property
    def is_complete(self) -> bool:
        answer = self._answers.get(self._current_index)
        return self.is_last_question and answer is not None and answer.checked

    def answer_at(self, index: int) -> Answer | None:
        if not 0 <= index < len(self._questions):
            raise IndexError(f"Question index {index} out of range")
        answer = self._answers.get(index)
        return replace(answer) if answer is not None else None

    # --- Mutators ---

    def select_option(self, option_index: int) -> None:
        """Select (or re-select) an option on the current question."""
        question = self.current_question
        ensure_valid_option(question, option_index)

        answer = self._answers.get(self._current_index)
        if answer is not None and answer.checked:
            raise InvalidStateError(
                f"Question {self._current_index + 1} is already checked and cannot change."
            )

        if answer is None:
            self._answers[self._current_index] = Answer(selected_index=option_index)
        else:
            answer.selected_index = option_index
        logger.debug("Question %s: selected option %d", question.id, option_index)

    def check_current_answer(self) -> Evaluation:
        """Lock the current selection and record whether it is correct."""
        answer = self._answers.get(self._current_index)
        if answer is None or answer.selected_index is None:
            raise NoSelectionError("Select an option before checking the answer.")
        if answer.checked:
            raise InvalidStateError(f"Question {self._current_index + 1} is already checked.")

        evaluation = evaluate(self.current_question, answer.selected_index)
        answer.checked = True
        answer.correct = evaluation.correct
        logger.debug(
            "Question %s checked: %s",
            self.current_question.id,
            "correct" if evaluation.correct else "incorrect",
        )
        return evaluation

    def advance(self) -> None:
        """Move to the next question once the current one is checked."""
        answer = self._answers.get(self._current_index)
        if answer is None or not answer.checked:
            raise NotCheckedError("Check the current answer before moving on.")
        if self.is_last_question:
            raise EndOfQuizError("Already at the last question.")
        self._current_index += 1
        logger.debug("Advanced to question %d of %d", self._current_index + 1, len(self._questions))

    def reset(self) -> None:
        """Forget all answers and return to the first question."""
        self._answers.clear()
        self._current_index = 0
        logger.debug("Session reset")
