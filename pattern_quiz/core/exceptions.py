"""Typed failures raised when a quiz action violates the session contract."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for rejected quiz actions. State is never modified."""


class InvalidStateError(QuizError):
    """Raised when an action targets a locked (checked) question or a finished quiz."""


class NoSelectionError(QuizError):
    """Raised when checking a question that has no selected option."""


class NotCheckedError(QuizError):
    """Raised when moving on from a question that has not been checked."""


class EndOfQuizError(QuizError):
    """Raised when advancing past the last question."""


class EmptyQuizError(QuizError):
    """Raised when a session is created without questions."""


class InvalidOptionError(QuizError, IndexError):
    """Raised when an option index does not exist on the question."""
