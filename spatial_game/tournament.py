"""
Tournament driver: alternates payoff and imitation passes and records every snapshot.
"""
import numbers

from spatial_game.board import Board
from spatial_game.payoff import check_temptation, score_pass
from spatial_game.update import update_pass


def _check_args(initial_board, b, num_gens):
    if not isinstance(initial_board, Board):
        initial_board = Board(initial_board)
    elif initial_board.scores.any():
        # every snapshot starts its round with zero scores, the first one included
        initial_board = initial_board.with_strategies(initial_board.strategies)
    if isinstance(num_gens, bool) or not isinstance(num_gens, numbers.Integral):
        raise ValueError(f"num_gens must be an integer, got {num_gens!r}")
    if num_gens < 0:
        raise ValueError(f"num_gens must be non-negative, got {num_gens}")
    return initial_board, check_temptation(b), int(num_gens)


def _rounds(board, b, num_gens):
    for _ in range(num_gens):
        scored = score_pass(board, b)
        board = update_pass(board, scored)
        yield scored, board


def iter_rounds(initial_board, b, num_gens):
    """
    Yield (scored, next_board) for each of num_gens rounds. `scored` carries the
    strategies played that round with their payoffs; `next_board` is the start of
    the following round.
    """
    board, b, num_gens = _check_args(initial_board, b, num_gens)
    yield from _rounds(board, b, num_gens)


def play_tournament(initial_board, b, num_gens):
    """
    Run num_gens rounds from initial_board with temptation payoff b.
    Returns num_gens + 1 boards; entry 0 is the initial board with scores at zero.
    """
    board, b, num_gens = _check_args(initial_board, b, num_gens)
    history = [board]
    for _, nxt in _rounds(board, b, num_gens):
        history.append(nxt)
    return history
