"""Core enumerations for the Hex Territory rules engine."""

from enum import Enum


class Direction(Enum):
    """Compass directions on the axial hex grid.

    Declaration order is also the order of the capture-weight buckets
    handed to the automated players.
    """
    NORTH = "North"
    NORTH_EAST = "NorthEast"
    NORTH_WEST = "NorthWest"
    SOUTH = "South"
    SOUTH_EAST = "SouthEast"
    SOUTH_WEST = "SouthWest"


class Rotation(Enum):
    """Ways to turn a direction selector."""
    CW = "CW"
    CCW = "CCW"


class PlayerColor(Enum):
    """Palette of player colors; a color is a player's identity."""
    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    CYAN = "Cyan"
    BLUE = "Blue"
    VIOLET = "Violet"


class SpawnMode(Enum):
    """Starting tile placement modes."""
    FAIR = "fair"
    RANDOM = "random"


class GameStatus(Enum):
    """Game status enumeration."""
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class PilotPhase(Enum):
    """Phases of an automated player's paced turn."""
    THINKING = "thinking"
    ALIGNING = "aligning"
    CONFIRMING = "confirming"
    DONE = "done"
