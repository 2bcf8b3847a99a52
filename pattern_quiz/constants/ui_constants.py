"""Labels and messages shared by the desktop window and the learner page."""

WINDOW_TITLE: str = "PatternQuiz"

CHECK_BUTTON: str = "Check"
NEXT_BUTTON: str = "Next"
FINISH_BUTTON: str = "Finish"
RESTART_BUTTON: str = "Restart Quiz"

QUESTION_HEADER_TEMPLATE: str = "Question {number} of {count}"
CORRECT_FEEDBACK: str = "Correct!"
INCORRECT_FEEDBACK: str = "Incorrect!"

QUIZ_COMPLETE_TITLE: str = "Quiz completed!"
SCORE_TEMPLATE: str = "You answered {correct} of {count} questions correctly."
SCORE_PERCENT_TEMPLATE: str = "Score: {percent}%"
RATING_MESSAGES: dict[str, str] = {
    "excellent": "Excellent! You have mastered this topic.",
    "good": "Good work! You understood most of the topic, but a few concepts deserve another look.",
    "needs_review": "We recommend reviewing this topic to strengthen the concepts.",
}

IMPORT_ERROR_TITLE: str = "Could not load question bank"
IMPORT_BUTTON_TEXT: str = "Open Question Bank"
IMPORT_DIALOG_TITLE: str = "Select question bank"
IMPORT_FILE_FILTER: str = "Question banks (*.txt);;All files (*.*)"

DARK_THEME_FLAG: str = "--dark"
