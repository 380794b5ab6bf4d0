from .config import EMPTY, CELL_COUNT, PLAYER_SYMBOLS

# 0-based cell indices of every three-in-a-row
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)


class Board:
    """
    3x3 grid stored as 9 cells, positions are 1-based (1..9)
    """
    def __init__(self):
        self._cells = [EMPTY] * CELL_COUNT

    @property
    def cells(self):
        # snapshot for rendering, callers can't write through it
        return tuple(self._cells)

    def mark_at(self, position):
        if not self._on_board(position):
            raise IndexError(f"position out of range: {position!r}")
        return self._cells[position - 1]

    def _on_board(self, position):
        if not isinstance(position, int) or isinstance(position, bool):
            return False
        return 1 <= position <= CELL_COUNT

    def is_valid_move(self, position):
        """
        true if position is on the board and the cell is blank
        """
        return self._on_board(position) and self._cells[position - 1] == EMPTY

    def apply_move(self, position, symbol):
        """
        place a player symbol, returns False without touching the board if invalid
        """
        if symbol not in PLAYER_SYMBOLS or not self.is_valid_move(position):
            return False
        self._cells[position - 1] = symbol
        return True

    def has_winning_line(self, symbol):
        if symbol == EMPTY:
            return False
        return any(all(self._cells[i] == symbol for i in line)
                   for line in WIN_LINES)

    def is_full(self):
        return all(cell != EMPTY for cell in self._cells)

    def reset(self):
        self._cells = [EMPTY] * CELL_COUNT
