"""Game settings and end-of-game summary for Hex Territory."""

from dataclasses import dataclass, field
from typing import Dict, List, Union, Any

from ..core.enums import PlayerColor, SpawnMode
from ..core.exceptions import InvalidSpawnModeError
from ..core.constants import (
    MIN_PLAYERS, MAX_PLAYERS, DEFAULT_BOARD_RADIUS, DEFAULT_WALL_DENSITY, DEFAULT_FAVORITE_COLOR,
    DEFAULT_AI_THINK_TICKS, DEFAULT_AI_CONFIRM_TICKS, DEFAULT_AI_TICK_INTERVAL_MS
)
from ..utils.validation import Validator, GameValidator, clamp, coerce_enum
from ..entities.player import Player
from .board import GameBoard


@dataclass
class GameSettings:
    """Construction parameters for a game."""

    num_humans: int = 1
    num_ai: int = 1
    board_radius: int = DEFAULT_BOARD_RADIUS
    favorite_color: Union[PlayerColor, str] = DEFAULT_FAVORITE_COLOR
    spawn_mode: Union[SpawnMode, str] = SpawnMode.FAIR
    wall_density: float = DEFAULT_WALL_DENSITY

    # Automated player pacing
    ai_think_ticks: int = DEFAULT_AI_THINK_TICKS
    ai_confirm_ticks: int = DEFAULT_AI_CONFIRM_TICKS
    ai_tick_interval_ms: int = DEFAULT_AI_TICK_INTERVAL_MS

    def validate(self) -> None:
        """Validate and normalize settings in place.

        Player counts and wall density are clamped; an unknown spawn mode is
        a configuration error.
        """
        GameValidator.validate_count(self.num_humans, "num_humans")
        GameValidator.validate_count(self.num_ai, "num_ai")
        GameValidator.validate_board_radius(self.board_radius)

        self.num_humans = clamp(self.num_humans, 0, MAX_PLAYERS)
        self.num_ai = clamp(self.num_ai, 0, MAX_PLAYERS)
        self.num_ai = clamp(self.num_ai, MIN_PLAYERS - self.num_humans, MAX_PLAYERS - self.num_humans)

        self.favorite_color = coerce_enum(self.favorite_color, PlayerColor, "favorite_color")
        self.spawn_mode = coerce_enum(self.spawn_mode, SpawnMode, "spawn_mode",
                                      error_cls=InvalidSpawnModeError)

        if not isinstance(self.wall_density, (int, float)) or isinstance(self.wall_density, bool):
            GameValidator.validate_probability(self.wall_density, "wall_density")
        self.wall_density = float(clamp(self.wall_density, 0.0, 1.0))

        Validator.validate_non_negative(self.ai_think_ticks, "ai_think_ticks")
        Validator.validate_non_negative(self.ai_confirm_ticks, "ai_confirm_ticks")
        Validator.validate_positive(self.ai_tick_interval_ms, "ai_tick_interval_ms")


@dataclass
class GameSummary:
    """Final tile counts, in turn order."""

    scores: Dict[PlayerColor, int] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def score_for(self, player: Player) -> int:
        return self.scores.get(player.color, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scores": {color.value: count for color, count in self.scores.items()},
            "text": self.text,
        }


def build_game_summary(players: List[Player], board: GameBoard) -> GameSummary:
    """Tally every player's tiles."""
    summary = GameSummary()
    for player in players:
        count = board.num_tiles_owned_by(player)
        summary.scores[player.color] = count
        summary.lines.append(f"{player.display_name} captured {count} tiles")
    return summary
