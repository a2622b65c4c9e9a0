from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import QApplication, QGraphicsDropShadowEffect, QWidget

from backend import config
from backend.state import Theme
from UI.view_model import BLACK, WHITE, button_text_color


# Color palette
STANDARD_BLUE = "rgb(15, 118, 179)"
TRANSPARENT = "transparent"


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    input_background: str
    input_border: str
    focus_border: str


PALETTES: Dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        background=WHITE,
        text=BLACK,
        input_background=WHITE,
        input_border="rgba(0, 0, 0, 60)",
        focus_border=STANDARD_BLUE,
    ),
    Theme.DARK: Palette(
        background="rgb(32, 34, 37)",
        text="rgb(230, 230, 230)",
        input_background="rgb(47, 49, 54)",
        input_border="rgba(255, 255, 255, 40)",
        focus_border=STANDARD_BLUE,
    ),
}


class ButtonVariant(Enum):
    STANDARD = "primaryButton"
    THEME_BUTTON = "themeButton"

    @property
    def object_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShadowStyle:
    blur_radius: float
    offset: Tuple[float, float]
    color: str = "#000000"


@dataclass(frozen=True)
class ButtonStyle:
    background: str
    border_radius: int
    shadow: Optional[ShadowStyle]


BUTTON_STYLES: Dict[ButtonVariant, ButtonStyle] = {
    ButtonVariant.STANDARD: ButtonStyle(
        background=STANDARD_BLUE,
        border_radius=5,
        shadow=ShadowStyle(blur_radius=20.0, offset=(0.0, 0.4)),
    ),
    ButtonVariant.THEME_BUTTON: ButtonStyle(
        background=TRANSPARENT,
        border_radius=0,
        shadow=None,
    ),
}

# The card around the login form.
CARD_RADIUS = 5
CARD_SHADOW = ShadowStyle(blur_radius=40.0, offset=(0.0, 2.0))


def make_shadow(style: ShadowStyle, parent: QWidget) -> QGraphicsDropShadowEffect:
    effect = QGraphicsDropShadowEffect(parent)
    effect.setBlurRadius(style.blur_radius)
    effect.setOffset(*style.offset)
    effect.setColor(QColor(style.color))
    return effect


def _button_rules(variant: ButtonVariant, theme: Theme) -> str:
    style = BUTTON_STYLES[variant]
    return f"""
        QPushButton#{variant.object_name} {{
            background-color: {style.background};
            color: {button_text_color(theme)};
            border: none;
            border-radius: {style.border_radius}px;
            padding: 8px 14px;
        }}
    """


def get_app_stylesheet(theme: Theme) -> str:
    """
    Global QSS theme for the application.
    Object names used by the pages:
      - QFrame with objectName "card"
      - QLabel with objectName "title"
      - QLineEdit with objectName "input"
      - QPushButton with objectName "primaryButton" / "themeButton"
    """
    palette = PALETTES[theme]
    return f"""
        /* Base */
        QWidget {{
            background-color: {palette.background};
            color: {palette.text};
            font-family: "Segoe UI";
        }}

        QFrame#card {{
            background-color: {palette.background};
            border-radius: {CARD_RADIUS}px;
        }}

        /* Titles */
        QLabel#title {{
            color: {palette.text};
            background: transparent;
        }}

        /* Inputs */
        QLineEdit#input {{
            background-color: {palette.input_background};
            color: {palette.text};
            border: 1px solid {palette.input_border};
            border-radius: 4px;
            padding: {config.INPUT_PADDING}px;
            font-size: 14px;
        }}

        QLineEdit#input:focus {{
            border: 1px solid {palette.focus_border};
        }}

        /* Buttons */
        {_button_rules(ButtonVariant.STANDARD, theme)}
        {_button_rules(ButtonVariant.THEME_BUTTON, theme)}
    """


def apply_app_theme(app: QApplication, theme: Theme) -> None:
    """
    Apply the stylesheet for the given theme to the whole application.
    Safe to call multiple times.
    """
    if app is None:
        return

    # Avoid reapplying if already set
    current = app.styleSheet() or ""
    new_sheet = get_app_stylesheet(theme)

    if current.strip() != new_sheet.strip():
        app.setStyleSheet(new_sheet)


def apply_window_theme(window: QWidget, theme: Theme) -> None:
    """
    Convenience helper: applies theme through the QApplication instance.
    """
    app = QApplication.instance()
    if app is not None:
        apply_app_theme(app, theme)
