"""
Hex Territory - a turn-based territory capture game on a hexagonal grid.

This package provides the rules engine (board, capture algorithm, turn
sequencing, automated opponents) plus a matplotlib renderer and a headless
simulator.
"""

__version__ = "0.1.0"
__author__ = "Hex Territory Team"

from .game.turn_manager import Game, create_game
from .game.game_state import GameSettings
from .entities.player import Player
from .simulation.simulator import TerritorySimulator

__all__ = ["Game", "create_game", "GameSettings", "Player", "TerritorySimulator"]
