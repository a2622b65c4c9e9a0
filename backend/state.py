# backend/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from backend import config
from backend.logging_utils import get_logger

logger = get_logger(__name__)


# -----------------------------
# Enums
# -----------------------------

class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class UnknownRouteError(ValueError):
    """Raised when a route name does not match any page."""


class Page(Enum):
    LOGIN = "Login"
    REGISTER = "Register"

    @property
    def route(self) -> str:
        return self.value

    @staticmethod
    def from_route(route: str) -> "Page":
        for page in Page:
            if page.value == route:
                return page
        raise UnknownRouteError(f"Unknown route: {route!r}")


# -----------------------------
# Data structures
# -----------------------------

@dataclass
class LoginField:
    email: str = ""
    password: str = ""


@dataclass
class AppState:
    theme: Theme = Theme(config.DEFAULT_THEME)
    page: Page = Page.from_route(config.DEFAULT_PAGE)
    login_field: LoginField = field(default_factory=LoginField)


def initial_state() -> AppState:
    return AppState()


# -----------------------------
# Messages
# -----------------------------

@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class LoginFieldChange:
    email: str
    password: str


@dataclass(frozen=True)
class LoginSubmit:
    """
    Sent by the Login button.
    Intentionally inert: nothing is authenticated and the state is not touched.
    """


@dataclass(frozen=True)
class NavigateTo:
    page: Page

    def __post_init__(self) -> None:
        # Accept a route name, but only one that resolves to a known page.
        if isinstance(self.page, str):
            object.__setattr__(self, "page", Page.from_route(self.page))
        elif not isinstance(self.page, Page):
            raise TypeError(f"NavigateTo expects a Page, got {type(self.page).__name__}")


Message = Union[ToggleTheme, LoginFieldChange, LoginSubmit, NavigateTo]


# -----------------------------
# Dispatcher
# -----------------------------

def update(state: AppState, message: Message) -> AppState:
    """
    Apply one message to the state in place and return the same state.
    """
    if isinstance(message, ToggleTheme):
        state.theme = state.theme.toggled()
        logger.debug("Theme switched to %s", state.theme.value)

    elif isinstance(message, LoginFieldChange):
        state.login_field.email = message.email
        state.login_field.password = message.password
        logger.debug("Login buffer updated (email=%r)", message.email)

    elif isinstance(message, LoginSubmit):
        logger.debug("Login submitted; no handler attached")

    elif isinstance(message, NavigateTo):
        state.page = message.page
        logger.debug("Navigated to %s", message.page.route)

    else:
        raise TypeError(f"Unsupported message: {message!r}")

    return state
