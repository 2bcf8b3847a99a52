"""Centralized stylesheets for the quiz window."""

from pattern_quiz.core.models import OptionStatus

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: #FFFFFF;
                border: none;
                border-radius: 6px;
                padding: 8px 18px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.PROGRESS_TRACK.get(theme)};
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.PROGRESS_TRACK.get(theme)};
                border: none;
                border-radius: 5px;
                max-height: 10px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 5px;
            }}
        """

    @staticmethod
    def get_option_style(status: OptionStatus, theme: Theme = Theme.LIGHT) -> str:
        border = ColorPalette.OPTION_BORDER.get(theme)
        background = ColorPalette.BACKGROUND_PRIMARY.get(theme)
        if status is OptionStatus.SELECTED:
            border = ColorPalette.ACCENT_PRIMARY.get(theme)
            background = ColorPalette.OPTION_SELECTED_BG.get(theme)
        elif status is OptionStatus.CORRECT:
            border = ColorPalette.OPTION_CORRECT_BORDER.get(theme)
            background = ColorPalette.OPTION_CORRECT_BG.get(theme)
        elif status is OptionStatus.INCORRECT:
            border = ColorPalette.OPTION_INCORRECT_BORDER.get(theme)
            background = ColorPalette.OPTION_INCORRECT_BG.get(theme)
        return (
            f"QPushButton {{ text-align: left; padding: 10px 14px; border-radius: 6px; "
            f"border: 2px solid {border}; background-color: {background}; "
            f"color: {ColorPalette.TEXT_PRIMARY.get(theme)}; }}"
        )

    @staticmethod
    def get_explanation_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.EXPLANATION_BG.get(theme)}; "
            f"border-left: 4px solid {ColorPalette.ACCENT_PRIMARY.get(theme)}; padding: 10px;"
        )

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
