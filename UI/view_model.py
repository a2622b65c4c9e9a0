"""Declarative description of what the main window shows for a given state.

Kept free of Qt imports so it can be checked without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from backend import config
from backend.state import AppState, Message, NavigateTo, Page, Theme, ToggleTheme

WHITE = "rgb(255, 255, 255)"
BLACK = "rgb(0, 0, 0)"

TOGGLE_THEME_LABEL = "Toggle Theme"

# Label of the footer button that leads away from each page.
NAV_LABELS: Dict[Page, str] = {
    Page.LOGIN: "Page Two",
    Page.REGISTER: "Main Page - Login",
}

# Where that button leads.
NAV_TARGETS: Dict[Page, Page] = {
    Page.LOGIN: Page.REGISTER,
    Page.REGISTER: Page.LOGIN,
}


@dataclass(frozen=True)
class FooterButton:
    label: str
    message: Message


@dataclass(frozen=True)
class ViewModel:
    title: str
    page: Page
    theme: Theme
    email: str
    password: str
    text_color: str
    footer: Tuple[FooterButton, ...]

    @property
    def nav_button(self) -> FooterButton:
        return self.footer[-1]


def button_text_color(theme: Theme) -> str:
    # Same for every button variant.
    return WHITE if theme is Theme.LIGHT else BLACK


def render(state: AppState) -> ViewModel:
    footer = (
        FooterButton(TOGGLE_THEME_LABEL, ToggleTheme()),
        FooterButton(NAV_LABELS[state.page], NavigateTo(NAV_TARGETS[state.page])),
    )
    return ViewModel(
        title=config.APP_TITLE,
        page=state.page,
        theme=state.theme,
        email=state.login_field.email,
        password=state.login_field.password,
        text_color=button_text_color(state.theme),
        footer=footer,
    )
