"""Domain models for the pattern self-check quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuestionState(Enum):
    """Per-question stage of the learner's interaction."""

    UNANSWERED = "unanswered"
    SELECTED = "selected"
    CHECKED = "checked"


class OptionStatus(Enum):
    """Visual status of a single option."""

    NEUTRAL = "neutral"
    SELECTED = "selected"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class QuizRating(Enum):
    """Feedback tier shown on the completion screen."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_REVIEW = "needs_review"


@dataclass(frozen=True, slots=True)
class Option:
    """Answer option; its identity is its index inside the owning question."""

    text: str
    is_correct: bool = False


@dataclass(frozen=True, slots=True)
class Question:
    """Single-answer multiple-choice question with an optional explanation."""

    id: str
    prompt: str
    options: tuple[Option, ...]
    explanation: str | None = None
    code_example: str | None = None
    tip: str | None = None

    def __post_init__(self) -> None:
        # Accept any sequence of options but store an immutable tuple.
        object.__setattr__(self, "options", tuple(self.options))
        if not self.prompt.strip():
            raise ValueError("Question prompt must not be empty.")
        if len(self.options) < 2:
            raise ValueError(f"Question {self.id!r} must have at least two options.")
        if any(not option.text.strip() for option in self.options):
            raise ValueError(f"Question {self.id!r} has an empty option.")
        correct_total = sum(1 for option in self.options if option.is_correct)
        if correct_total != 1:
            raise ValueError(
                f"Question {self.id!r} must have exactly one correct option, found {correct_total}."
            )

    @property
    def correct_index(self) -> int:
        return next(idx for idx, option in enumerate(self.options) if option.is_correct)

    @property
    def option_count(self) -> int:
        return len(self.options)


@dataclass(slots=True)
class Answer:
    """Learner's answer to one question."""

    selected_index: int | None = None
    checked: bool = False
    correct: bool | None = None


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Result of comparing a selection against the correct option."""

    correct: bool
    option_statuses: tuple[OptionStatus, ...]


@dataclass(frozen=True, slots=True)
class Progress:
    """Read-only projection of a session's answer history."""

    answered_count: int
    correct_count: int
    question_count: int
    percent_complete: float
    position: int


@dataclass(frozen=True, slots=True)
class QuizSummary:
    """Completion summary shown once the last question is finished."""

    correct_count: int
    question_count: int
    score_percent: int
    rating: QuizRating


@dataclass(frozen=True, slots=True)
class OptionView:
    """Render-ready option entry."""

    index: int
    text: str
    status: OptionStatus


@dataclass(frozen=True, slots=True)
class QuizViewState:
    """Snapshot handed to the rendering layer after every action."""

    question_id: str
    question_number: int
    question_count: int
    prompt: str
    options: tuple[OptionView, ...]
    question_state: QuestionState
    is_correct: bool | None
    explanation_visible: bool
    explanation: str | None
    can_check: bool
    can_next: bool
    can_finish: bool
    next_label: str
    progress: Progress
    finished: bool = False
    summary: QuizSummary | None = None
    selectable: bool = True
