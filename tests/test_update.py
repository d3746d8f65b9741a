import numpy as np
import pytest

from spatial_game.board import Board, Strategy, empty_board, random_board
from spatial_game.payoff import score_pass
from spatial_game.update import next_strategy, update_pass

C, D = Strategy.COOPERATE, Strategy.DEFECT


def test_center_defector_takes_over(center_defector):
    nxt = update_pass(center_defector, score_pass(center_defector, 2.0))
    assert nxt.count(D) == 9
    assert not nxt.scores.any()


def test_ties_keep_own_strategy():
    old = Board(['CD'])
    nxt = update_pass(old, old.with_scores([[1.0, 1.0]]))
    assert nxt.symbols() == ['CD']


def test_strictly_greater_neighbor_wins():
    old = Board(['CD'])
    nxt = update_pass(old, old.with_scores([[1.0, 1.5]]))
    assert nxt.symbols() == ['DD']


def test_best_self_score_keeps_strategy():
    old = Board(['CCC', 'CDC', 'CCC'])
    scores = np.ones((3, 3))
    scores[1, 1] = 0.5
    scores[0, 0] = 9.0
    nxt = update_pass(old, old.with_scores(scores))
    assert nxt.strategy(0, 0) is C
    assert nxt.strategy(1, 1) is C


def test_equal_neighbors_resolved_in_row_major_order():
    old = Board(['DCC'])
    scored = old.with_scores([[3.0, 0.0, 3.0]])
    assert next_strategy(old, scored, 0, 1) is D
    assert update_pass(old, scored).symbols() == ['DDC']


def test_reads_old_board_strategies():
    # the winner's strategy comes from the old board, not from other cells' updates
    old = Board(['DCC'])
    scored = old.with_scores([[5.0, 0.0, 1.0]])
    nxt = update_pass(old, scored)
    assert nxt.symbols() == ['DDC']


def test_inputs_not_mutated(center_defector):
    scored = score_pass(center_defector, 2.0)
    before = scored.scores.copy()
    update_pass(center_defector, scored)
    assert np.array_equal(scored.scores, before)
    assert center_defector.count(D) == 1


def test_shape_mismatch():
    with pytest.raises(ValueError):
        update_pass(empty_board(2, 2), empty_board(2, 3))


@pytest.mark.parametrize('seed', [3, 4, 5])
def test_vectorised_pass_matches_per_cell_rule(seed):
    old = random_board(6, 8, 0.3, seed=seed)
    scored = score_pass(old, 1.6)
    nxt = update_pass(old, scored)
    for r in range(old.rows):
        for c in range(old.cols):
            assert nxt.strategy(r, c) is next_strategy(old, scored, r, c)
