"""Color palette for PatternQuiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the quiz window."""

    TEXT_PRIMARY = ThemeColors(light="#1F2937", dark="#F5F5F5")
    TEXT_SECONDARY = ThemeColors(light="#666666", dark="#AAAAAA")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")

    ACCENT_PRIMARY = ThemeColors(light="#0078D4", dark="#4A9EFF")

    # Option feedback
    OPTION_BORDER = ThemeColors(light="#D1D5DB", dark="#555555")
    OPTION_SELECTED_BG = ThemeColors(light="#E8F4FC", dark="#1F3A52")
    OPTION_CORRECT_BORDER = ThemeColors(light="#107C10", dark="#6FCF6F")
    OPTION_CORRECT_BG = ThemeColors(light="#E6F4E6", dark="#1E3B1E")
    OPTION_INCORRECT_BORDER = ThemeColors(light="#D13438", dark="#FF6B6B")
    OPTION_INCORRECT_BG = ThemeColors(light="#FBE9E9", dark="#4A1F1F")

    # Explanation panel
    EXPLANATION_BG = ThemeColors(light="#F0F6FC", dark="#252F3A")

    PROGRESS_TRACK = ThemeColors(light="#E5E7EB", dark="#3A3A3A")
