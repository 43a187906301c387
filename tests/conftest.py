"""
Pytest configuration and fixtures.
"""

import random

import matplotlib
matplotlib.use("Agg")

import pytest

from hex_territory.core.enums import PlayerColor
from hex_territory.entities.player import Player
from hex_territory.game.board import GameBoard
from hex_territory.utils.hex_utils import hex_region


class WallingRandom(random.Random):
    """Seeded random source whose first board layout walls exactly `walls`."""

    def __init__(self, radius, walls, seed=0):
        super().__init__(seed)
        self._layout_rolls = [0.0 if coord in walls else 1.0 for coord in hex_region(radius)]

    def random(self):
        if self._layout_rolls:
            return self._layout_rolls.pop(0)
        return super().random()

    def getrandbits(self, k):
        # keeps choice() and randrange() off the layout rolls
        return super().getrandbits(k)


@pytest.fixture
def walling_rng():
    """Factory for random sources that wall exactly the given coordinates."""
    return WallingRandom


@pytest.fixture
def walled_board():
    """Factory for boards whose walls are exactly the given coordinates."""
    def build(radius, walls):
        return GameBoard(radius, wall_density=0.5, rng=WallingRandom(radius, walls))
    return build


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def red():
    return Player(PlayerColor.RED)


@pytest.fixture
def blue():
    return Player(PlayerColor.BLUE, is_ai=True)


@pytest.fixture
def small_board(rng):
    """Radius-1 board without walls."""
    return GameBoard(1, rng=rng)


@pytest.fixture
def medium_board(rng):
    """Radius-2 board without walls."""
    return GameBoard(2, rng=rng)
