from PyQt5.QtWidgets import QWidget, QLabel, QVBoxLayout
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt

from backend import config


class RegisterPage(QWidget):
    def __init__(self):
        super().__init__()

        layout = QVBoxLayout()

        self.title = QLabel("Page Two")
        self.title.setObjectName("title")
        self.title.setFont(QFont("Segoe UI", config.REGISTER_TITLE_FONT_SIZE))
        self.title.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title, 1)

        self.setLayout(layout)
