"""Centralized styles and font definitions for the application."""

from quiz_client.core.models import Difficulty
from quiz_client.core.services.navigation_tracker import DotState

from .color_palette import ColorPalette, Theme

_DIFFICULTY_COLORS = {
    Difficulty.LOW: ColorPalette.DIFFICULTY_LOW,
    Difficulty.MEDIUM: ColorPalette.DIFFICULTY_MEDIUM,
    Difficulty.HIGH: ColorPalette.DIFFICULTY_HIGH,
}

_DOT_COLORS = {
    DotState.ANSWERED: ColorPalette.DOT_ANSWERED,
    DotState.VIEWED: ColorPalette.DOT_VIEWED,
    DotState.NOT_VIEWED: ColorPalette.DOT_NOT_VIEWED,
}


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QSpinBox, QComboBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_subtitle_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
            f" color: {ColorPalette.TEXT_ON_ACCENT.get(theme)};"
            f" border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};"
        )

    @staticmethod
    def get_error_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.ERROR.get(theme)}; font-weight: bold;"

    @staticmethod
    def get_difficulty_badge_style(difficulty: Difficulty, theme: Theme = Theme.LIGHT) -> str:
        color = _DIFFICULTY_COLORS.get(difficulty, ColorPalette.DIFFICULTY_MEDIUM)
        return (
            f"background-color: {color.get(theme)}; color: #FFFFFF;"
            " border-radius: 4px; padding: 2px 8px; font-weight: bold;"
        )

    @staticmethod
    def get_badge_style(color: str) -> str:
        return f"background-color: {color}; color: #FFFFFF; border-radius: 4px; padding: 2px 8px;"

    @staticmethod
    def get_timer_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        base = "font-size: 16pt; font-weight: bold; padding: 2px 8px; border-radius: 4px;"
        if not warning:
            return base
        return base + f" color: #FFFFFF; background-color: {ColorPalette.ERROR.get(theme)};"

    @staticmethod
    def get_tracker_dot_style(state: DotState, is_current: bool, theme: Theme = Theme.LIGHT) -> str:
        background = _DOT_COLORS[state].get(theme)
        text = ColorPalette.TEXT_ON_ACCENT.get(theme) if state != DotState.NOT_VIEWED else ColorPalette.TEXT_PRIMARY.get(theme)
        border = (
            f"3px solid {ColorPalette.DOT_CURRENT_BORDER.get(theme)}"
            if is_current
            else f"1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}"
        )
        return (
            f"background-color: {background}; color: {text}; border: {border};"
            " border-radius: 16px; min-width: 32px; max-width: 32px; min-height: 32px; max-height: 32px;"
        )
