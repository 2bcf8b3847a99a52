"""Tests for the pure answer evaluator."""

import pytest

from pattern_quiz.core.evaluator import evaluate
from pattern_quiz.core.exceptions import InvalidOptionError
from pattern_quiz.core.models import OptionStatus
from tests.factories import make_question


def test_correct_selection_marks_only_correct_option():
    question = make_question("q", 1)
    result = evaluate(question, 1)
    assert result.correct is True
    assert result.option_statuses == (
        OptionStatus.NEUTRAL,
        OptionStatus.CORRECT,
        OptionStatus.NEUTRAL,
    )


def test_wrong_selection_still_reveals_correct_option():
    question = make_question("q", 0)
    result = evaluate(question, 2)
    assert result.correct is False
    assert result.option_statuses == (
        OptionStatus.CORRECT,
        OptionStatus.NEUTRAL,
        OptionStatus.INCORRECT,
    )


def test_evaluating_correct_index_is_always_correct(three_questions):
    for question in three_questions:
        assert evaluate(question, question.correct_index).correct is True


def test_evaluation_is_deterministic():
    question = make_question("q", 1, option_count=4)
    assert evaluate(question, 3) == evaluate(question, 3)


@pytest.mark.parametrize("bad_index", [-1, 3, 10, True, "1"])
def test_invalid_index_is_rejected(bad_index):
    question = make_question("q", 1)
    with pytest.raises(InvalidOptionError):
        evaluate(question, bad_index)
