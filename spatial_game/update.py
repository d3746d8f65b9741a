"""
Imitation step: each cell adopts the strategy of the best-scoring cell among itself
and its neighbours.
"""
import numpy as np

from spatial_game.board import Board, Strategy
from spatial_game.neighbors import OFFSETS, aligned_slices, neighbors


def _check_pair(old_board, scored_board):
    if old_board.shape != scored_board.shape:
        raise ValueError(f"Board shapes differ: {old_board.shape} vs {scored_board.shape}")


def next_strategy(old_board, scored_board, r, c):
    """
    Strategy cell (r, c) plays next round. The cell itself is the incumbent and a
    neighbour only replaces it with a strictly greater score, so ties keep the
    current strategy.
    """
    _check_pair(old_board, scored_board)
    best_score = scored_board.score(r, c)
    strategy = old_board.strategy(r, c)
    for r2, c2 in neighbors(old_board.rows, old_board.cols, r, c):
        if scored_board.scores[r2, c2] > best_score:
            best_score = scored_board.scores[r2, c2]
            strategy = Strategy(int(old_board.strategies[r2, c2]))
    return strategy


def update_pass(old_board, scored_board):
    """
    Next round's board: strategies chosen by next_strategy for every cell, scores zero.
    Both inputs are only read; the result is a new board.
    """
    _check_pair(old_board, scored_board)
    scores = scored_board.scores
    best_score = scores.copy()
    best = old_board.strategies.copy()
    # same visiting order as neighbors(), applied to all cells at once
    for dr, dc in OFFSETS:
        here, there = aligned_slices(old_board.rows, old_board.cols, dr, dc)
        better = scores[there] > best_score[here]
        best_score[here] = np.where(better, scores[there], best_score[here])
        best[here] = np.where(better, old_board.strategies[there], best[here])
    return Board(best)
