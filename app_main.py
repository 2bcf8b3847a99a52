"""Application entry point for PatternQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from pattern_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from pattern_quiz.core.quiz_importer import QuizImportError, load_quiz_from_file
from pattern_quiz.server.api_server import start_api_server
from pattern_quiz.ui.dialog_helpers import show_error
from pattern_quiz.ui.quiz_window import QuizWindow
from pattern_quiz.utils.launch_options import parse_launch_options
from pattern_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Load the question bank, start the learner API, and launch the Qt window.

    An optional argument points at a question bank; the bundled design
    pattern bank is used otherwise. ``--dark`` selects the dark theme.
    """
    logger = configure_logging()
    options = parse_launch_options(sys.argv[1:])

    app = QApplication(sys.argv)
    try:
        imported = load_quiz_from_file(options.bank_path)
    except QuizImportError as exc:
        logger.error("Cannot start quiz: %s", exc)
        show_error(None, "PatternQuiz", str(exc))
        sys.exit(1)

    start_api_server(imported.questions, host=DEFAULT_HOST, port=DEFAULT_PORT)
    logger.info("Learner page available at http://%s:%d/", DEFAULT_HOST, DEFAULT_PORT)

    window = QuizWindow(imported.questions, title=imported.title, theme=options.theme)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
