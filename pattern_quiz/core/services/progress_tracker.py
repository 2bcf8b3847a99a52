"""Progress and score projections derived from a quiz session."""

from __future__ import annotations

from pattern_quiz.constants.quiz_constants import GOOD_SCORE_RATIO
from pattern_quiz.core.models import Progress, QuizRating, QuizSummary
from pattern_quiz.core.services.quiz_session import QuizSession


def compute_progress(session: QuizSession) -> Progress:
    """Count checked and correct answers and the share of the quiz completed."""
    checked = [answer for answer in session.answers.values() if answer.checked]
    answered_count = len(checked)
    correct_count = sum(1 for answer in checked if answer.correct)
    question_count = session.question_count

    return Progress(
        answered_count=answered_count,
        correct_count=correct_count,
        question_count=question_count,
        percent_complete=round(answered_count / question_count * 100, 1),
        position=session.current_index + 1,
    )


def rate_score(correct_count: int, question_count: int) -> QuizRating:
    if correct_count == question_count:
        return QuizRating.EXCELLENT
    if correct_count >= question_count * GOOD_SCORE_RATIO:
        return QuizRating.GOOD
    return QuizRating.NEEDS_REVIEW


def summarize(session: QuizSession) -> QuizSummary:
    """Build the completion summary: score percentage and feedback tier."""
    progress = compute_progress(session)
    return QuizSummary(
        correct_count=progress.correct_count,
        question_count=progress.question_count,
        score_percent=int(progress.correct_count / progress.question_count * 100 + 0.5),
        rating=rate_score(progress.correct_count, progress.question_count),
    )
