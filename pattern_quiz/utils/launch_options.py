"""Command-line options for the desktop entry point."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pattern_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_PATH
from pattern_quiz.constants.ui_constants import DARK_THEME_FLAG
from pattern_quiz.styling.color_palette import Theme


@dataclass(slots=True)
class LaunchOptions:
    bank_path: Path
    theme: Theme


def parse_launch_options(args: list[str]) -> LaunchOptions:
    """Read an optional bank path and the dark theme flag from ``args``.

    ``args`` excludes the program name. The first argument that is not the
    theme flag is taken as the bank path.
    """
    theme = Theme.DARK if DARK_THEME_FLAG in args else Theme.LIGHT
    paths = [arg for arg in args if arg != DARK_THEME_FLAG]
    bank_path = Path(paths[0]) if paths else DEFAULT_QUESTION_BANK_PATH
    return LaunchOptions(bank_path=bank_path, theme=theme)
