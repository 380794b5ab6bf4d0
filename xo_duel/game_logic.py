import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board
from .config import PLAYER_SYMBOLS
from .player import Player

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class MoveStatus(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    REJECTED = "rejected"


class RejectReason(Enum):
    INVALID_MOVE = "invalid_move"   # off the board or cell taken
    GAME_OVER = "game_over"         # round already won or drawn


@dataclass(frozen=True)
class MoveOutcome:
    """
    result of one attempt_move call
    """
    status: MoveStatus
    position: Optional[int] = None
    winner: Optional[Player] = None        # only for WIN
    reason: Optional[RejectReason] = None  # only for REJECTED

    @property
    def accepted(self):
        return self.status is not MoveStatus.REJECTED

    def __bool__(self):
        return self.accepted


class Game:
    """
    tic-tac-toe rules and turn order for two players
    """
    def __init__(self, players=None):
        """
        init board and players, first player moves first
        """
        if players is None:
            players = tuple(Player(symbol) for symbol in PLAYER_SYMBOLS)
        players = tuple(players)
        if len(players) != 2 or players[0].symbol == players[1].symbol:
            raise ValueError("a game needs two players with different symbols")
        self.board = Board()
        self.players = players
        self.current_player_index = 0
        self.is_over = False
        self.winner = None

    @property
    def state(self):
        if not self.is_over:
            return GameState.IN_PROGRESS
        return GameState.WON if self.winner is not None else GameState.DRAWN

    def get_current_player(self):
        return self.players[self.current_player_index]

    def _switch_player(self):
        self.current_player_index = 1 - self.current_player_index

    def attempt_move(self, position):
        """
        place current player's mark at position (1..9)
        returns a MoveOutcome: WIN, DRAW, CONTINUE or REJECTED
        """
        if self.is_over:
            logger.debug("move %r rejected: game over", position)
            return MoveOutcome(MoveStatus.REJECTED, position,
                               reason=RejectReason.GAME_OVER)
        if not self.board.is_valid_move(position):
            logger.debug("move %r rejected: invalid", position)
            return MoveOutcome(MoveStatus.REJECTED, position,
                               reason=RejectReason.INVALID_MOVE)

        player = self.get_current_player()
        self.board.apply_move(position, player.symbol)
        logger.debug("%s played %d", player.symbol, position)

        # a move that fills the board with a line is a win, not a draw
        if self.board.has_winning_line(player.symbol):
            self.winner = player
            self.is_over = True
            logger.debug("%s wins", player.symbol)
            return MoveOutcome(MoveStatus.WIN, position, winner=player)
        if self.board.is_full():
            self.is_over = True
            logger.debug("draw")
            return MoveOutcome(MoveStatus.DRAW, position)
        self._switch_player()
        return MoveOutcome(MoveStatus.CONTINUE, position)

    def reset(self):
        """
        clear board and flags, names stay
        """
        self.board.reset()
        self.current_player_index = 0
        self.is_over = False
        self.winner = None
        logger.debug("game reset")
