"""Board, turn sequencing and pacing."""

from .board import GameBoard
from .direction_selector import DirectionSelector, DirectionPreview
from .scheduler import Scheduler, ManualScheduler
from .game_state import GameSettings, GameSummary, build_game_summary
from .turn_manager import Game, create_game, fair_spawn_locations

__all__ = [
    "GameBoard", "DirectionSelector", "DirectionPreview", "Scheduler", "ManualScheduler",
    "GameSettings", "GameSummary", "build_game_summary", "Game", "create_game", "fair_spawn_locations"
]
