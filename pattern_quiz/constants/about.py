"""Static metadata describing PatternQuiz."""

APP_NAME = "PatternQuiz"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "PatternQuiz is a self-check quiz for a catalog of software design patterns. "
    "Pick an answer, check it against the explanation, and move on to the next question."
)
