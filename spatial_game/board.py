"""
Board container for the spatial prisoner's dilemma: a fixed-size grid of cells,
each holding a strategy and a per-round score.
"""
from collections import namedtuple
from enum import IntEnum
import numpy as np


class Strategy(IntEnum):
    COOPERATE = 0
    DEFECT = 1

    @property
    def symbol(self):
        return 'C' if self is Strategy.COOPERATE else 'D'

    @classmethod
    def from_symbol(cls, symbol):
        if symbol == 'C':
            return cls.COOPERATE
        if symbol == 'D':
            return cls.DEFECT
        raise ValueError(f"Unknown strategy symbol {symbol!r}, expected 'C' or 'D'")


Cell = namedtuple('Cell', ['strategy', 'score'])


def _to_code(value):
    if isinstance(value, Strategy):
        return int(value)
    if isinstance(value, str):
        return int(Strategy.from_symbol(value))
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool) and value in (0, 1):
        return int(value)
    raise ValueError(f"Invalid strategy {value!r}")


def _coerce_strategies(strategies):
    """Return a fresh int8 (rows, cols) array of strategy codes."""
    if isinstance(strategies, np.ndarray):
        if strategies.ndim != 2:
            raise ValueError(f"Expected a 2D strategy grid, got {strategies.ndim}D")
        if strategies.dtype.kind in 'iu':
            grid = strategies.astype(np.int8)
            if not np.isin(strategies, (0, 1)).all():
                raise ValueError("Strategy grid may only contain 0 (C) and 1 (D)")
        else:
            grid = np.array([[_to_code(v) for v in row] for row in strategies.tolist()],
                            dtype=np.int8).reshape(strategies.shape)
    else:
        rows = [list(row) for row in strategies]
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"Board rows have different lengths: {sorted(widths)}")
        grid = np.array([[_to_code(v) for v in row] for row in rows], dtype=np.int8)
        if grid.ndim != 2:
            grid = grid.reshape(len(rows), 0)
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        raise ValueError(f"Board must have at least one row and one column, got {grid.shape}")
    return grid


def _frozen(arr):
    arr.flags.writeable = False
    return arr


class Board:
    """
    Immutable snapshot of the grid.

    Strategies are kept as an int8 array of Strategy codes and scores as a float64
    array of the same shape. Both are private read-only copies; use with_scores /
    with_strategies to derive a new board.
    """

    def __init__(self, strategies, scores=None):
        self._strategies = _frozen(_coerce_strategies(strategies))
        if scores is None:
            scores = np.zeros(self._strategies.shape, dtype=np.float64)
        else:
            scores = np.array(scores, dtype=np.float64)
            if scores.shape != self._strategies.shape:
                raise ValueError(f"Score grid shape {scores.shape} does not match "
                                 f"strategy grid shape {self._strategies.shape}")
        self._scores = _frozen(scores)

    @property
    def rows(self):
        return self._strategies.shape[0]

    @property
    def cols(self):
        return self._strategies.shape[1]

    @property
    def shape(self):
        return self._strategies.shape

    @property
    def strategies(self):
        """Read-only (rows, cols) array of strategy codes."""
        return self._strategies

    @property
    def scores(self):
        """Read-only (rows, cols) array of scores."""
        return self._scores

    def _check(self, r, c):
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise ValueError(f"Cell ({r}, {c}) is outside a {self.rows}x{self.cols} board")

    def strategy(self, r, c):
        self._check(r, c)
        return Strategy(int(self._strategies[r, c]))

    def score(self, r, c):
        self._check(r, c)
        return float(self._scores[r, c])

    def __getitem__(self, pos):
        r, c = pos
        return Cell(self.strategy(r, c), self.score(r, c))

    def count(self, strategy):
        return int(np.count_nonzero(self._strategies == int(strategy)))

    def symbols(self):
        """Rows of the board as 'C'/'D' strings."""
        return [''.join(Strategy(int(v)).symbol for v in row) for row in self._strategies]

    def with_scores(self, scores):
        return Board(self._strategies, scores)

    def with_strategies(self, strategies):
        """New board with the given strategies and scores reset to zero."""
        board = Board(strategies)
        if board.shape != self.shape:
            raise ValueError(f"Strategy grid shape {board.shape} does not match board shape {self.shape}")
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.shape == other.shape
                and np.array_equal(self._strategies, other._strategies)
                and np.array_equal(self._scores, other._scores))

    def __hash__(self):
        return hash((self.shape, self._strategies.tobytes(), self._scores.tobytes()))

    def __repr__(self):
        return f"Board({self.rows}x{self.cols}, C={self.count(Strategy.COOPERATE)}, D={self.count(Strategy.DEFECT)})"


def empty_board(rows, cols, strategy=Strategy.COOPERATE):
    """Board with every cell playing `strategy` and zero scores."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Board must have at least one row and one column, got ({rows}, {cols})")
    return Board(np.full((rows, cols), int(strategy), dtype=np.int8))


def single_defector_board(rows, cols):
    """All cooperators with one defector in the centre cell."""
    grid = empty_board(rows, cols).strategies.copy()
    grid[rows // 2, cols // 2] = Strategy.DEFECT
    return Board(grid)


def random_board(rows, cols, defect_prob=0.1, seed=None):
    """Each cell independently starts as a defector with probability defect_prob."""
    if not 0.0 <= defect_prob <= 1.0:
        raise ValueError(f"defect_prob must be in [0, 1], got {defect_prob}")
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Board must have at least one row and one column, got ({rows}, {cols})")
    rng = np.random.default_rng(seed)
    return Board((rng.random((rows, cols)) < defect_prob).astype(np.int8))
