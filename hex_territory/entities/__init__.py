"""Game entity definitions."""

from .player import Player, ColorRegistry
from .tile import Tile, TileState, Neutral, Owned, Wall, NEUTRAL, WALL

__all__ = ["Player", "ColorRegistry", "Tile", "TileState", "Neutral", "Owned", "Wall", "NEUTRAL", "WALL"]
