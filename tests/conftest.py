import os
import sys

import pytest

# Widgets are created without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    from UI.main_window import MainWindow

    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()
