"""Qt UI components for the learner window."""

from .dialog_helpers import confirm_restart_quiz, show_error, show_warning
from .quiz_window import QuizWindow

__all__ = [
    "QuizWindow",
    "confirm_restart_quiz",
    "show_error",
    "show_warning",
]
