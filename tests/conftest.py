import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from spatial_game.board import Board

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def center_defector():
    return Board(['CCC', 'CDC', 'CCC'])


@pytest.fixture
def boards_dir():
    return os.path.join(REPO_ROOT, 'data', 'boards')
