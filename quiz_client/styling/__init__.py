"""Styling module for the QuizDesk application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
