"""
Buzzsaw theme - colors and typography constants.

Game-show board look: deep blue field, white and gold text.
"""

# Board
BOARD_BLUE = "#000088"         # Board background
BOARD_PANEL = "#0000CC"        # Leader banner
BOARD_OPEN = "#00B300"         # Timer strip while the floor is open

# Countdown segments
SEGMENT_ACTIVE_OPEN = "#FFFFFF"
SEGMENT_ACTIVE_IDLE = "#AAAAAA"
SEGMENT_INACTIVE = "rgba(0, 0, 0, 0.3)"

# Text
TEXT_PRIMARY = "#FFFFFF"
TEXT_MUTED = "#888888"

# Semantic
DANGER = "#FF4444"
PENALTY = "#FF0000"
SUCCESS = "#44FF44"
INFO = "#8888FF"
WARNING = "#FFEB3B"

# Host console
CONSOLE_BG = "#F9F9F9"
OPEN_BUTTON = "#4CAF50"
RESET_BUTTON = "#F44336"
MAPPED = "#E0FFE0"
UNMAPPED = "#FFE0E0"

# Typography
FONT_BOARD = "'Oswald', 'Impact', sans-serif"

# State text colors on the board
STATE_COLORS = {
    "IDLE": INFO,
    "OPEN": SUCCESS,
    "LOCKED": DANGER,
}

MEDALS = ["🥇", "🥈", "🥉"]


def medal(index: int) -> str:
    """Medal for the first three places, '#N' after that."""
    if index < len(MEDALS):
        return MEDALS[index]
    return f"#{index + 1}"
