from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRect
from PySide6.QtGui import QPainter, QPen, QFont

from ..config import (
    BOARD_SIZE, BOARD_MIN_SIZE, EMPTY,
    X_COLOR, O_COLOR, GRID_COLOR, BOARD_BG_COLOR,
)


def mark_color(symbol):
    return X_COLOR if symbol == 'X' else O_COLOR


def position_at(x, y, width, height):
    """
    map widget coords to a board position 1..9, None outside the grid
    """
    side = min(width, height)
    if side <= 0:
        return None
    ox, oy = (width - side) / 2, (height - side) / 2
    # only inside grid
    if not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / BOARD_SIZE
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp against float rounding on the far edge
    row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
    return row * BOARD_SIZE + col + 1


class BoardWidget(QWidget):
    """
    draws the game board and turns clicks into positions
    """
    cell_clicked = Signal(int)  # emits position 1..9

    def __init__(self, game, parent=None):
        super().__init__(parent)
        self.game = game  # reference to game state
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self.setMinimumSize(QSize(BOARD_MIN_SIZE, BOARD_MIN_SIZE))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winner's mark on top
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            w, h = self.width(), self.height()
            side = min(w, h)
            offset_x, offset_y = (w - side) / 2, (h - side) / 2
            painter.fillRect(self.rect(), BOARD_BG_COLOR)
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i * cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))
            # marks
            for index, sym in enumerate(self.game.board.cells):
                if sym == EMPTY:
                    continue
                r, c = divmod(index, BOARD_SIZE)
                cx = offset_x + c * cell_size + cell_size / 2
                cy = offset_y + r * cell_size + cell_size / 2
                rad = cell_size / 2 * 0.7
                painter.setPen(QPen(mark_color(sym), 4))
                if sym == 'X':
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            if self.game.winner is not None:
                win = self.game.winner.symbol
                painter.setFont(QFont("Arial", max(1, int(side * 0.6)), QFont.Weight.Bold))
                painter.setPen(QPen(mark_color(win), 10, Qt.PenStyle.SolidLine,
                                    Qt.PenCapStyle.RoundCap, Qt.PenJoinStyle.RoundJoin))
                rect = QRect(int(offset_x), int(offset_y), int(side), int(side))
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, win)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        if self.game.is_over:
            return
        pos = event.position()
        position = position_at(pos.x(), pos.y(), self.width(), self.height())
        if position is not None:
            self.cell_clicked.emit(position)  # notify main window
