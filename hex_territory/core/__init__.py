"""Core engine components."""

from .enums import *
from .exceptions import *
from .constants import *

__all__ = [
    # Enums
    "Direction", "Rotation", "PlayerColor", "SpawnMode", "GameStatus", "PilotPhase",
    # Exceptions
    "HexTerritoryError", "ConfigurationError", "InvalidSpawnModeError", "ValidationError",
    "ColorsExhaustedError", "NoTilesAvailableError", "InvariantViolationError",
    # Constants
    "MIN_PLAYERS", "MAX_PLAYERS", "DIRECTION_OFFSETS", "CLOCKWISE_DIRECTIONS", "COLOR_CODES"
]
