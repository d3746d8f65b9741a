"""
Payoff pass: every unordered neighbour pair plays one game per round and both
sides are credited from that single game.
"""
import math
import numpy as np

from spatial_game.board import Strategy
from spatial_game.neighbors import FORWARD_OFFSETS, aligned_slices


def pair_payoff(s_a, s_b, b):
    """
    Gains (to A, to B) for one game between strategies s_a and s_b.
    C-C: 1 each. C-D: the defector gets b, the cooperator 0. D-D: nothing.
    """
    a_coop = Strategy(s_a) is Strategy.COOPERATE
    b_coop = Strategy(s_b) is Strategy.COOPERATE
    if a_coop and b_coop:
        return 1.0, 1.0
    if a_coop:
        return 0.0, float(b)
    if b_coop:
        return float(b), 0.0
    return 0.0, 0.0


def payoff_matrix(b):
    """2x2 array M with M[own, other] the gain of `own` against `other`."""
    m = np.zeros((2, 2), dtype=np.float64)
    for own in Strategy:
        for other in Strategy:
            m[own, other] = pair_payoff(own, other, b)[0]
    return m


def check_temptation(b):
    if isinstance(b, bool) or not isinstance(b, (int, float, np.integer, np.floating)):
        raise ValueError(f"Temptation payoff b must be a real number, got {b!r}")
    if not math.isfinite(b):
        raise ValueError(f"Temptation payoff b must be finite, got {b}")
    return float(b)


def score_pass(board, b):
    """
    Return a new board with the strategies of `board` and freshly accumulated scores.
    The input board is only read.
    """
    b = check_temptation(b)
    m = payoff_matrix(b)
    strat = board.strategies
    scores = np.zeros(board.shape, dtype=np.float64)
    for dr, dc in FORWARD_OFFSETS:
        here, there = aligned_slices(board.rows, board.cols, dr, dc)
        own, other = strat[here], strat[there]
        scores[here] += m[own, other]
        scores[there] += m[other, own]
    return board.with_scores(scores)
