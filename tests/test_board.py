import numpy as np
import pytest

from spatial_game.board import (Board, Cell, Strategy, empty_board, random_board,
                                single_defector_board)


def test_strategy_symbols():
    assert Strategy.COOPERATE.symbol == 'C'
    assert Strategy.DEFECT.symbol == 'D'
    assert Strategy.from_symbol('D') is Strategy.DEFECT
    with pytest.raises(ValueError):
        Strategy.from_symbol('X')


def test_accepts_symbols_members_and_codes():
    a = Board(['CD', 'DC'])
    b = Board([[Strategy.COOPERATE, Strategy.DEFECT], [Strategy.DEFECT, Strategy.COOPERATE]])
    c = Board(np.array([[0, 1], [1, 0]]))
    assert a == b == c
    assert a.shape == (2, 2)
    assert a[0, 1] == Cell(Strategy.DEFECT, 0.0)
    assert a.symbols() == ['CD', 'DC']


def test_scores_start_at_zero():
    board = Board(['CCC', 'CDC'])
    assert board.scores.shape == (2, 3)
    assert not board.scores.any()


@pytest.mark.parametrize('grid', [
    ['CC', 'C'],
    ['CX'],
    [[0, 2]],
    [],
    ['', ''],
    np.zeros((0, 4), dtype=int),
    np.zeros(4, dtype=int),
])
def test_malformed_boards_fail(grid):
    with pytest.raises(ValueError):
        Board(grid)


def test_score_shape_mismatch():
    with pytest.raises(ValueError):
        Board(['CC'], scores=[[1.0, 2.0, 3.0]])


def test_board_is_immutable():
    source = np.array([[0, 1], [0, 0]])
    board = Board(source)
    source[0, 0] = 1
    assert board.strategy(0, 0) is Strategy.COOPERATE
    with pytest.raises(ValueError):
        board.strategies[0, 0] = 1
    with pytest.raises(ValueError):
        board.scores[0, 0] = 5.0


def test_with_scores_builds_new_board():
    board = Board(['CD'])
    scored = board.with_scores([[1.5, 2.0]])
    assert scored is not board
    assert scored.score(0, 1) == 2.0
    assert board.score(0, 1) == 0.0
    assert np.array_equal(scored.strategies, board.strategies)


def test_out_of_range_access():
    board = Board(['CD'])
    with pytest.raises(ValueError):
        board.strategy(1, 0)


def test_constructors():
    assert empty_board(2, 3).count(Strategy.COOPERATE) == 6
    assert empty_board(2, 2, Strategy.DEFECT).count(Strategy.DEFECT) == 4
    board = single_defector_board(5, 5)
    assert board.count(Strategy.DEFECT) == 1
    assert board.strategy(2, 2) is Strategy.DEFECT
    with pytest.raises(ValueError):
        empty_board(0, 3)


def test_random_board_is_seeded():
    a = random_board(20, 20, 0.3, seed=7)
    b = random_board(20, 20, 0.3, seed=7)
    assert a == b
    assert random_board(4, 4, 0.0, seed=1).count(Strategy.DEFECT) == 0
    assert random_board(4, 4, 1.0, seed=1).count(Strategy.DEFECT) == 16
    with pytest.raises(ValueError):
        random_board(4, 4, 1.5)


def test_with_strategies_resets_scores():
    scored = Board(['CD']).with_scores([[1.0, 2.0]])
    nxt = scored.with_strategies(['DD'])
    assert nxt.symbols() == ['DD']
    assert not nxt.scores.any()
    with pytest.raises(ValueError):
        scored.with_strategies(['DDD'])
