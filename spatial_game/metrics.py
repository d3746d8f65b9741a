"""
Metrics over a tournament history: cooperation level, period of the final pattern, category.
"""
import numpy as np

from spatial_game.board import Strategy


def cooperation_fraction(board):
    return board.count(Strategy.COOPERATE) / (board.rows * board.cols)


def cooperation_series(history):
    return np.array([cooperation_fraction(board) for board in history], dtype=np.float64)


def detect_period(history):
    """Given a history list of boards, return period of the final strategy pattern (1 for a fixed point), or None if no repeat."""
    # detect period relative to final state
    if len(history) <= 1:
        return None
    last = history[-1].strategies
    for p in range(1, len(history)):
        if np.array_equal(history[-1-p].strategies, last):
            return p
    return None


def classify_history(history):
    final = history[-1]
    n = final.rows * final.cols
    if final.count(Strategy.COOPERATE) == n:
        return 'all_cooperate'
    if final.count(Strategy.DEFECT) == n:
        return 'all_defect'
    per = detect_period(history)
    if per == 1:
        return 'fixed_point'
    elif per and per > 1:
        return f'oscillator_period_{per}'
    return 'others'


def summarize_history(history):
    """
    Returns:
        dict with generation count, initial/final/mean cooperation fraction,
        period of the final pattern and its category.
    """
    series = cooperation_series(history)
    return {
        'num_gens': len(history) - 1,
        'initial_cooperation': float(series[0]),
        'final_cooperation': float(series[-1]),
        'mean_cooperation': float(series.mean()),
        'period': detect_period(history),
        'category': classify_history(history),
    }
