from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

PLAYER_SYMBOLS = ('X', 'O')      # first symbol always moves first
EMPTY = ''                       # mark of an unclaimed cell
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
DEFAULT_NAME_PREFIX = "Player "

# -----------------------------------------------------------------------------
# UI CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
BOARD_MIN_SIZE = 150
WIN_FLASH_MS = 600

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
GRID_COLOR = QColor("#555")
BOARD_BG_COLOR = QColor("#333")

# -----------------------------------------------------------------------------
# PALETTE COLORS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.GlobalColor.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TOOLTIP_BASE_COLOR = Qt.GlobalColor.white
TOOLTIP_TEXT_COLOR = Qt.GlobalColor.black
TEXT_COLOR = Qt.GlobalColor.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.GlobalColor.white
BRIGHT_TEXT_COLOR = Qt.GlobalColor.red
LINK_COLOR = QColor(42, 130, 218)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.GlobalColor.white
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
