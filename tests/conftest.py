"""Shared fixtures for the quiz engine tests."""

import pytest

from tests.factories import make_question


@pytest.fixture
def three_questions():
    """Three-question quiz whose correct indices are [1, 0, 2]."""
    return [
        make_question("q1", 1, explanation="Q1 explanation."),
        make_question("q2", 0, explanation="Q2 explanation.", tip="Q2 tip."),
        make_question("q3", 2, code_example="print('q3')"),
    ]
