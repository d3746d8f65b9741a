"""
Plain-text board files.

The first line holds "<rows> <cols>"; each of the next <rows> lines holds exactly
<cols> characters from {C, D}.
"""
import os

from spatial_game.board import Board, Strategy


def parse_board(text):
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ValueError("Board file is empty")
    header = lines[0].split()
    if len(header) != 2:
        raise ValueError(f"Line 1: expected '<rows> <cols>', got {lines[0]!r}")
    try:
        rows, cols = int(header[0]), int(header[1])
    except ValueError:
        raise ValueError(f"Line 1: rows and cols must be integers, got {lines[0]!r}") from None
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Line 1: board must be at least 1x1, got {rows}x{cols}")
    body = lines[1:]
    if len(body) != rows:
        raise ValueError(f"Expected {rows} board lines, found {len(body)}")
    grid = []
    for i, line in enumerate(body, start=2):
        if len(line) != cols:
            raise ValueError(f"Line {i}: expected {cols} cells, found {len(line)}")
        try:
            grid.append([Strategy.from_symbol(ch) for ch in line])
        except ValueError as e:
            raise ValueError(f"Line {i}: {e}") from None
    return Board(grid)


def read_board(path):
    """Load a board with all scores at zero."""
    with open(path, 'r') as f:
        return parse_board(f.read())


def format_board(board):
    return '\n'.join([f"{board.rows} {board.cols}"] + board.symbols()) + '\n'


def write_board(board, path):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, 'w', newline='') as f:
        f.write(format_board(board))
