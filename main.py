# main.py

import sys
from PyQt5.QtWidgets import QApplication

from backend.logging_utils import configure_logging
from UI.main_window import MainWindow


def main():
    configure_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
