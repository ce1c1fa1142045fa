import os

# Logging level name passed to logging.basicConfig by main.py
LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING").upper()

WINDOW_TITLE = os.getenv("TICTACTOE_WINDOW_TITLE", "Tic-Tac-Toe")

# Move list starts in history order unless set to 0/false/no
START_ASCENDING = os.getenv("TICTACTOE_START_ASCENDING", "true").lower() not in ("0", "false", "no")

# Board colours
BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
HIGHLIGHT_COLOR = "#3c6e47"
