from typing import Callable

from PyQt5.QtWidgets import (
    QWidget, QLabel, QLineEdit, QPushButton,
    QVBoxLayout, QFrame
)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt

from backend import config
from backend.state import LoginFieldChange, LoginSubmit, Message
from UI.ui_theme import BUTTON_STYLES, CARD_SHADOW, ButtonVariant, make_shadow


class LoginPage(QWidget):
    """
    Login form. Every edit and the Login click are sent to `dispatch`;
    the page itself holds no state beyond what the inputs display.
    """

    def __init__(self, dispatch: Callable[[Message], None]):
        super().__init__()
        self._dispatch = dispatch

        outer = QVBoxLayout()
        outer.setContentsMargins(0, 0, 0, 0)

        self.card = QFrame()
        self.card.setObjectName("card")
        self.card.setGraphicsEffect(make_shadow(CARD_SHADOW, self.card))

        layout = QVBoxLayout(self.card)
        layout.setContentsMargins(
            config.LOGIN_PADDING_HORIZONTAL + config.LOGIN_CARD_PADDING,
            config.LOGIN_PADDING_VERTICAL + config.LOGIN_CARD_PADDING,
            config.LOGIN_PADDING_HORIZONTAL + config.LOGIN_CARD_PADDING,
            config.LOGIN_PADDING_VERTICAL + config.LOGIN_CARD_PADDING,
        )
        layout.setSpacing(config.LOGIN_COLUMN_SPACING)
        layout.setAlignment(Qt.AlignCenter)

        # Title
        self.title = QLabel("Graphical User Interface")
        self.title.setObjectName("title")
        self.title.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title, alignment=Qt.AlignHCenter)

        # Email field
        self.email_input = QLineEdit()
        self.email_input.setObjectName("input")
        self.email_input.setPlaceholderText("Email Address... ")
        self.email_input.setFixedWidth(config.INPUT_WIDTH)
        self.email_input.textEdited.connect(self.handle_email_edited)
        layout.addWidget(self.email_input, alignment=Qt.AlignHCenter)

        # Password field
        self.password_input = QLineEdit()
        self.password_input.setObjectName("input")
        self.password_input.setPlaceholderText("Password... ")
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.setFixedWidth(config.INPUT_WIDTH)
        self.password_input.textEdited.connect(self.handle_password_edited)
        layout.addWidget(self.password_input, alignment=Qt.AlignHCenter)

        # Login button
        self.login_button = QPushButton("Login")
        self.login_button.setObjectName(ButtonVariant.STANDARD.object_name)
        self.login_button.setFixedSize(config.SUBMIT_WIDTH, config.SUBMIT_HEIGHT)
        self.login_button.setFont(QFont("Segoe UI", config.SUBMIT_FONT_SIZE))
        self.login_button.setCursor(Qt.PointingHandCursor)
        shadow = BUTTON_STYLES[ButtonVariant.STANDARD].shadow
        if shadow is not None:
            self.login_button.setGraphicsEffect(make_shadow(shadow, self.login_button))
        self.login_button.clicked.connect(self.handle_login)
        layout.addWidget(self.login_button, alignment=Qt.AlignHCenter)

        outer.addWidget(self.card, alignment=Qt.AlignCenter)
        self.setLayout(outer)

    def handle_email_edited(self, email: str) -> None:
        self._dispatch(LoginFieldChange(email, self.password_input.text()))

    def handle_password_edited(self, password: str) -> None:
        self._dispatch(LoginFieldChange(self.email_input.text(), password))

    def handle_login(self) -> None:
        self._dispatch(LoginSubmit())

    def sync(self, email: str, password: str) -> None:
        # setText does not emit textEdited, so this never loops back.
        if self.email_input.text() != email:
            self.email_input.setText(email)
        if self.password_input.text() != password:
            self.password_input.setText(password)
