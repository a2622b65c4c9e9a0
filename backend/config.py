# backend/config.py

import logging


# Window
APP_TITLE = "Login Demo"
WINDOW_X = 300
WINDOW_Y = 200
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768

# Start-up state
DEFAULT_THEME = "dark"
DEFAULT_PAGE = "Login"

# Layout metrics (px / pt)
OUTER_PADDING = 20
WRAPPER_SPACING = 50
FOOTER_SPACING = 10

LOGIN_COLUMN_SPACING = 40
LOGIN_PADDING_VERTICAL = 50
LOGIN_PADDING_HORIZONTAL = 20
LOGIN_CARD_PADDING = 20

INPUT_WIDTH = 500
INPUT_PADDING = 10
SUBMIT_WIDTH = 500
SUBMIT_HEIGHT = 45
SUBMIT_FONT_SIZE = 21
REGISTER_TITLE_FONT_SIZE = 64

# Logging
LOGGER_NAME = "login_demo"
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
