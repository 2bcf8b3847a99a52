"""Tests for the quiz session aggregate."""

import pytest

from pattern_quiz.core.exceptions import (
    EmptyQuizError,
    EndOfQuizError,
    InvalidOptionError,
    InvalidStateError,
    NoSelectionError,
    NotCheckedError,
)
from pattern_quiz.core.services.quiz_session import QuizSession


@pytest.fixture
def session(three_questions):
    return QuizSession(three_questions)


def test_empty_question_list_is_rejected():
    with pytest.raises(EmptyQuizError):
        QuizSession([])


def test_new_session_starts_at_first_question_without_answers(session):
    assert session.current_index == 0
    assert session.question_count == 3
    assert session.current_answer is None
    assert session.answers == {}


def test_reselection_overwrites_previous_choice(session):
    session.select_option(0)
    session.select_option(2)
    answer = session.current_answer
    assert answer.selected_index == 2
    assert answer.checked is False
    assert len(session.answers) == 1


def test_invalid_option_leaves_state_untouched(session):
    session.select_option(1)
    with pytest.raises(InvalidOptionError):
        session.select_option(3)
    assert session.current_answer.selected_index == 1


def test_check_without_selection_fails(session):
    with pytest.raises(NoSelectionError):
        session.check_current_answer()
    assert session.current_answer is None


def test_check_records_correctness(session):
    session.select_option(1)
    evaluation = session.check_current_answer()
    assert evaluation.correct is True
    answer = session.current_answer
    assert answer.checked is True
    assert answer.correct is True


def test_checked_answer_is_locked(session):
    session.select_option(1)
    session.check_current_answer()
    with pytest.raises(InvalidStateError):
        session.select_option(0)
    with pytest.raises(InvalidStateError):
        session.check_current_answer()
    assert session.current_answer.selected_index == 1


def test_answer_copies_do_not_leak_state(session):
    session.select_option(1)
    copy = session.current_answer
    copy.selected_index = 0
    copy.checked = True
    assert session.current_answer.selected_index == 1
    assert session.current_answer.checked is False


def test_advance_requires_checked_question(session):
    with pytest.raises(NotCheckedError):
        session.advance()
    session.select_option(0)
    with pytest.raises(NotCheckedError):
        session.advance()
    assert session.current_index == 0


def test_advance_moves_forward_by_one(session):
    session.select_option(1)
    session.check_current_answer()
    session.advance()
    assert session.current_index == 1
    assert session.current_answer is None


def test_advance_at_last_question_fails(session):
    for correct_index in (1, 0, 2):
        session.select_option(correct_index)
        session.check_current_answer()
        if not session.is_last_question:
            session.advance()
    assert session.is_complete
    with pytest.raises(EndOfQuizError):
        session.advance()
    assert session.current_index == 2


def test_selection_only_touches_current_question(session):
    session.select_option(1)
    session.check_current_answer()
    session.advance()
    session.select_option(2)
    assert session.answer_at(0).selected_index == 1
    assert session.answer_at(1).selected_index == 2
    assert session.answer_at(2) is None


def test_answer_at_rejects_out_of_range(session):
    with pytest.raises(IndexError):
        session.answer_at(3)


def test_reset_clears_answers_and_position(session):
    session.select_option(1)
    session.check_current_answer()
    session.advance()
    session.reset()
    assert session.current_index == 0
    assert session.answers == {}
    assert not session.is_complete
