"""Styling module for the PatternQuiz window."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
