"""Pure answer evaluation for single-answer questions."""

from __future__ import annotations

from pattern_quiz.core.exceptions import InvalidOptionError
from pattern_quiz.core.models import Evaluation, OptionStatus, Question


def ensure_valid_option(question: Question, option_index: int) -> None:
    """Raise ``InvalidOptionError`` if ``option_index`` is not an option of ``question``."""
    if isinstance(option_index, bool) or not isinstance(option_index, int):
        raise InvalidOptionError(f"Option index must be an integer, got {option_index!r}.")
    if not 0 <= option_index < question.option_count:
        raise InvalidOptionError(
            f"Option index {option_index} out of range for question {question.id!r} "
            f"({question.option_count} options)."
        )


def evaluate(question: Question, selected_index: int) -> Evaluation:
    """Compare a selection with the correct option and classify every option.

    The correct option is always reported as ``CORRECT`` so the learner sees
    the right answer even after a wrong pick. A wrong selection is reported as
    ``INCORRECT``; every other option stays ``NEUTRAL``.
    """
    ensure_valid_option(question, selected_index)
    correct_index = question.correct_index

    statuses: list[OptionStatus] = []
    for idx in range(question.option_count):
        if idx == correct_index:
            statuses.append(OptionStatus.CORRECT)
        elif idx == selected_index:
            statuses.append(OptionStatus.INCORRECT)
        else:
            statuses.append(OptionStatus.NEUTRAL)

    return Evaluation(correct=selected_index == correct_index, option_statuses=tuple(statuses))
