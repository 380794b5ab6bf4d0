import pytest
from hypothesis import given, strategies as st

from xo_duel.config import EMPTY
from xo_duel.game_logic import (
    Game, GameState, MoveStatus, RejectReason,
)
from xo_duel.player import Player


def play(game, *positions):
    outcome = None
    for position in positions:
        outcome = game.attempt_move(position)
    return outcome


def snapshot(game):
    return (game.board.cells, game.current_player_index, game.is_over, game.winner)


def test_initial_state():
    g = Game()
    assert g.state is GameState.IN_PROGRESS
    assert g.get_current_player().symbol == 'X'
    assert g.winner is None and not g.is_over
    assert [p.symbol for p in g.players] == ['X', 'O']


def test_players_need_distinct_symbols():
    with pytest.raises(ValueError):
        Game((Player('X'), Player('X')))


@pytest.mark.parametrize("position", [0, -3, 10, 42])
def test_out_of_range_rejected_without_change(position):
    g = Game()
    play(g, 5)
    before = snapshot(g)
    outcome = g.attempt_move(position)
    assert outcome.status is MoveStatus.REJECTED
    assert outcome.reason is RejectReason.INVALID_MOVE
    assert not outcome
    assert snapshot(g) == before


def test_same_cell_twice_rejected():
    g = Game()
    first = g.attempt_move(1)
    second = g.attempt_move(1)
    assert first.status is MoveStatus.CONTINUE and first
    assert second.status is MoveStatus.REJECTED
    assert second.reason is RejectReason.INVALID_MOVE
    assert g.board.cells.count('X') == 1
    assert g.board.cells.count('O') == 0
    # still O's turn after the rejection
    assert g.get_current_player().symbol == 'O'


def test_top_row_win():
    g = Game()
    outcome = play(g, 1, 5, 2, 9, 3)
    assert outcome.status is MoveStatus.WIN
    assert outcome.winner is g.players[0]
    assert g.winner is g.players[0]
    assert g.is_over and g.state is GameState.WON


def test_left_column_ends_sequence_early():
    g = Game()
    # X 1, O 2, X 4, O 3, X 7 completes the left column
    assert play(g, 1, 2, 4, 3, 7).status is MoveStatus.WIN
    rest = [g.attempt_move(p) for p in (5, 9, 6, 8)]
    assert all(o.reason is RejectReason.GAME_OVER for o in rest)
    assert g.board.cells.count(EMPTY) == 4


def test_draw_without_line():
    g = Game()
    # X: 1 3 4 8 9   O: 2 5 6 7
    outcome = play(g, 1, 2, 3, 5, 4, 6, 8, 7, 9)
    assert outcome.status is MoveStatus.DRAW
    assert outcome.winner is None
    assert g.is_over and g.winner is None
    assert g.state is GameState.DRAWN
    assert g.board.is_full()


def test_win_on_last_cell_beats_draw():
    g = Game()
    # X: 1 2 5 6 9 (diagonal closed by the ninth move)   O: 3 4 7 8
    outcome = play(g, 1, 3, 2, 4, 5, 7, 6, 8, 9)
    assert g.board.is_full()
    assert outcome.status is MoveStatus.WIN
    assert g.winner.symbol == 'X'


def test_moves_after_win_rejected_until_reset():
    g = Game()
    play(g, 1, 5, 2, 9, 3)
    before = snapshot(g)
    for position in (4, 6, 7, 8):
        outcome = g.attempt_move(position)
        assert outcome.status is MoveStatus.REJECTED
        assert outcome.reason is RejectReason.GAME_OVER
    assert snapshot(g) == before
    g.reset()
    assert g.attempt_move(4).status is MoveStatus.CONTINUE


def test_game_over_checked_before_validity():
    g = Game()
    play(g, 1, 5, 2, 9, 3)
    assert g.attempt_move(99).reason is RejectReason.GAME_OVER


def test_reset_keeps_names():
    g = Game()
    g.players[0].set_name("Ann")
    g.players[1].set_name("Ben")
    play(g, 1, 5, 2, 9, 3)
    g.reset()
    assert g.board.cells == (EMPTY,) * 9
    assert g.current_player_index == 0
    assert g.is_over is False and g.winner is None
    assert [p.get_name() for p in g.players] == ["Ann", "Ben"]


def test_reset_mid_game_returns_turn_to_first_player():
    g = Game()
    play(g, 1)
    g.reset()
    assert g.get_current_player() is g.players[0]


@given(st.lists(st.integers(min_value=-2, max_value=11), max_size=30))
def test_random_sequences_keep_invariants(positions):
    g = Game()
    for position in positions:
        before_cells = g.board.cells
        mover = g.get_current_player()
        outcome = g.attempt_move(position)
        filled_before = sum(c != EMPTY for c in before_cells)
        filled_after = sum(c != EMPTY for c in g.board.cells)
        if outcome.status is MoveStatus.REJECTED:
            assert g.board.cells == before_cells
            continue
        assert filled_after == filled_before + 1
        assert g.board.mark_at(position) == mover.symbol
        if outcome.status is MoveStatus.CONTINUE:
            assert g.get_current_player() is not mover
            assert not g.is_over
        elif outcome.status is MoveStatus.WIN:
            assert g.winner is mover and g.board.has_winning_line(mover.symbol)
        else:
            assert g.winner is None and g.board.is_full()
        # winner only ever set on a finished game
        if g.winner is not None:
            assert g.is_over
