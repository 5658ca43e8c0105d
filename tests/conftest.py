import math
import os
import sys
from pathlib import Path

import matplotlib
import pytest

# Headless backends for plotting and pygame.
matplotlib.use("Agg")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# The project is a flat set of top-level modules next to this directory.
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

import logger  # noqa: E402
from barytree import BaryTree, Triangle  # noqa: E402


UNIT_CORNERS = ((0.0, math.sqrt(3) / 2), (-0.5, 0.0), (0.5, 0.0))


@pytest.fixture(autouse=True)
def detached_logger():
    """Make sure no test leaks a tree into the log prefix."""
    logger.set_tree(None)
    yield
    logger.set_tree(None)


@pytest.fixture
def unit_corners():
    """Corners of the equilateral root triangle used throughout the tests."""
    return UNIT_CORNERS


@pytest.fixture
def unit_triangle():
    return Triangle.from_corners(*UNIT_CORNERS)


@pytest.fixture
def tree():
    """An empty root node over the unit triangle."""
    return BaryTree.from_corners(*UNIT_CORNERS)
