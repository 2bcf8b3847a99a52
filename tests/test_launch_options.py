"""Tests for desktop launch options and theme styling."""

from pathlib import Path

from pattern_quiz.constants.quiz_constants import DEFAULT_QUESTION_BANK_PATH
from pattern_quiz.core.models import OptionStatus
from pattern_quiz.styling import ColorPalette, Theme
from pattern_quiz.styling.styles import Styles
from pattern_quiz.utils.launch_options import parse_launch_options


def test_defaults_to_bundled_bank_and_light_theme():
    options = parse_launch_options([])
    assert options.bank_path == DEFAULT_QUESTION_BANK_PATH
    assert options.theme is Theme.LIGHT


def test_dark_flag_selects_dark_theme_in_any_position():
    options = parse_launch_options(["--dark", "bank.txt"])
    assert options.theme is Theme.DARK
    assert options.bank_path == Path("bank.txt")

    options = parse_launch_options(["bank.txt", "--dark"])
    assert options.theme is Theme.DARK
    assert options.bank_path == Path("bank.txt")


def test_dark_theme_styles_use_dark_palette():
    style = Styles.get_option_style(OptionStatus.CORRECT, Theme.DARK)
    assert ColorPalette.OPTION_CORRECT_BORDER.dark in style
    assert "#6FCF6F" in style
    assert ColorPalette.TEXT_PRIMARY.dark in Styles.get_main_window_style(Theme.DARK)
    assert ColorPalette.EXPLANATION_BG.dark in Styles.get_explanation_style(Theme.DARK)


def test_light_theme_styles_use_light_palette():
    style = Styles.get_option_style(OptionStatus.INCORRECT, Theme.LIGHT)
    assert ColorPalette.OPTION_INCORRECT_BORDER.light in style
