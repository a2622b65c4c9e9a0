from __future__ import annotations

from typing import Dict, Optional

from PyQt5.QtWidgets import (
    QWidget, QPushButton, QVBoxLayout, QHBoxLayout, QStackedWidget
)
from PyQt5.QtCore import Qt

from backend import config
from backend.logging_utils import get_logger
from backend.state import AppState, Message, Page, initial_state, update
from UI.login_window import LoginPage
from UI.register_window import RegisterPage
from UI.ui_theme import ButtonVariant, apply_window_theme
from UI.view_model import ViewModel, render

logger = get_logger(__name__)


class MainWindow(QWidget):
    """
    Single application window:
    - owns the AppState for the lifetime of the window
    - shows the Login or Register page in a stacked widget
    - footer with the theme toggle and the navigation button

    Every interaction goes through `dispatch`, which updates the state and re-renders.
    """

    def __init__(self, state: Optional[AppState] = None):
        super().__init__()
        self.state = state or initial_state()
        self.view: Optional[ViewModel] = None

        self.setGeometry(config.WINDOW_X, config.WINDOW_Y, config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        wrapper = QVBoxLayout()
        wrapper.setContentsMargins(
            config.OUTER_PADDING, config.OUTER_PADDING,
            config.OUTER_PADDING, config.OUTER_PADDING,
        )
        wrapper.setSpacing(config.WRAPPER_SPACING)

        self.login_page = LoginPage(self.dispatch)
        self.register_page = RegisterPage()

        self.stack = QStackedWidget()
        self.stack.addWidget(self.login_page)
        self.stack.addWidget(self.register_page)
        self._pages: Dict[Page, QWidget] = {
            Page.LOGIN: self.login_page,
            Page.REGISTER: self.register_page,
        }
        wrapper.addWidget(self.stack, 1)

        footer = QHBoxLayout()
        footer.setSpacing(config.FOOTER_SPACING)
        footer.addStretch(1)

        self.theme_btn = QPushButton()
        self.theme_btn.setObjectName(ButtonVariant.THEME_BUTTON.object_name)
        self.theme_btn.setCursor(Qt.PointingHandCursor)
        self.theme_btn.clicked.connect(self.handle_theme_clicked)
        footer.addWidget(self.theme_btn)

        self.nav_btn = QPushButton()
        self.nav_btn.setObjectName(ButtonVariant.THEME_BUTTON.object_name)
        self.nav_btn.setCursor(Qt.PointingHandCursor)
        self.nav_btn.clicked.connect(self.handle_nav_clicked)
        footer.addWidget(self.nav_btn)

        footer.addStretch(1)
        wrapper.addLayout(footer)

        self.setLayout(wrapper)

    def dispatch(self, message: Message) -> None:
        update(self.state, message)
        self.refresh()

    def refresh(self) -> None:
        view = render(self.state)

        self.setWindowTitle(view.title)
        self.stack.setCurrentWidget(self._pages[view.page])
        self.login_page.sync(view.email, view.password)

        toggle, nav = view.footer
        self.theme_btn.setText(toggle.label)
        self.nav_btn.setText(nav.label)

        if self.view is None or self.view.theme is not view.theme:
            apply_window_theme(self, view.theme)
            logger.info("Applied %s theme", view.theme.value)

        self.view = view

    def handle_theme_clicked(self) -> None:
        self.dispatch(self.view.footer[0].message)

    def handle_nav_clicked(self) -> None:
        self.dispatch(self.view.nav_button.message)
