"""Game constants for the Hex Territory rules engine."""

from .enums import Direction, PlayerColor


# Game Configuration Constants
MIN_PLAYERS = 1
MAX_PLAYERS = 6
DEFAULT_BOARD_RADIUS = 5
DEFAULT_WALL_DENSITY = 0.0
DEFAULT_FAVORITE_COLOR = PlayerColor.RED

# Axial unit offsets (dx, dy) for each direction
DIRECTION_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.NORTH_EAST: (1, -1),
    Direction.NORTH_WEST: (-1, 0),
    Direction.SOUTH: (0, 1),
    Direction.SOUTH_EAST: (1, 0),
    Direction.SOUTH_WEST: (-1, 1),
}

# Selector cycle, clockwise starting from North
CLOCKWISE_DIRECTIONS = [
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
]

# Capture-weight bucket order used by the automated players
AI_DIRECTION_BUCKETS = list(Direction)

# Palette hex codes
COLOR_CODES = {
    PlayerColor.RED: "#FF0000",
    PlayerColor.ORANGE: "#FF8800",
    PlayerColor.YELLOW: "#CCDD11",
    PlayerColor.GREEN: "#008800",
    PlayerColor.CYAN: "#00CCFF",
    PlayerColor.BLUE: "#0000FF",
    PlayerColor.VIOLET: "#CC00FF",
}

AI_NAME_PREFIX = "[AI] "

# Fair spawn layout: border points are the direction offset scaled by the
# board radius, picked per player count so starts are spread around the board.
FAIR_SPAWN_POINTS = [
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
]

FAIR_SPAWN_LAYOUTS = {
    1: [0],
    2: [0, 3],
    3: [0, 2, 4],
    4: [1, 2, 4, 5],
    5: [0, 1, 2, 4, 5],
    6: [0, 1, 2, 3, 4, 5],
}

# Automated player pacing
DEFAULT_AI_THINK_TICKS = 5
DEFAULT_AI_CONFIRM_TICKS = 5
DEFAULT_AI_TICK_INTERVAL_MS = 100

# Rendering
TILE_SIZE = 10
NEUTRAL_TILE_COLOR = "lightgray"
WALL_TILE_COLOR = "dimgray"
TILE_EDGE_COLOR = "black"
PREVIEW_CENTER = (0.875, 0.875)
SUMMARY_POSITION = (0.1, 0.1)
SUMMARY_FONT_SIZE = 12

# Simulation
DEFAULT_SIMULATION_MAX_TICKS = 100_000
