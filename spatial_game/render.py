"""
Rendering of boards to RGB images, PNG frames and animated GIFs.
"""
import os
import numpy as np
import matplotlib.pyplot as plt
import imageio.v2 as imageio

from spatial_game.board import Strategy

C, D = int(Strategy.COOPERATE), int(Strategy.DEFECT)

COLORS = {
    C: (0, 0, 255),    # cooperator: blue
    D: (255, 0, 0),    # defector: red
}

# (previous, current) -> colour
TRANSITION_COLORS = {
    (C, C): (0, 0, 255),
    (D, D): (255, 0, 0),
    (C, D): (255, 255, 0),
    (D, C): (0, 255, 0),
}


def board_to_image(board, cell_size=1, previous=None):
    """
    (rows*cell_size, cols*cell_size, 3) uint8 image of the board. If `previous` is
    given, cells are coloured by their change of strategy since that board.
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be >= 1, got {cell_size}")
    strat = board.strategies
    img = np.zeros(board.shape + (3,), dtype=np.uint8)
    if previous is None:
        for code, rgb in COLORS.items():
            img[strat == code] = rgb
    else:
        if previous.shape != board.shape:
            raise ValueError(f"Board shapes differ: {previous.shape} vs {board.shape}")
        prev = previous.strategies
        for (before, after), rgb in TRANSITION_COLORS.items():
            img[(prev == before) & (strat == after)] = rgb
    return np.repeat(np.repeat(img, cell_size, axis=0), cell_size, axis=1)


def render_history(history, cell_size=1, transitions=False):
    images = []
    for i, board in enumerate(history):
        previous = history[i-1] if transitions and i > 0 else None
        images.append(board_to_image(board, cell_size, previous=previous))
    return images


def _ensure_dir(path):
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)


def save_png(image, path):
    _ensure_dir(path)
    plt.imsave(path, image)


def save_gif(frames, path, duration=0.1):
    """Write frames as a looping GIF; duration is the delay per frame in seconds."""
    if not frames:
        raise ValueError("Cannot write a GIF with no frames")
    _ensure_dir(path)
    imageio.mimsave(path, frames, format='GIF', duration=int(round(duration * 1000)), loop=0)
