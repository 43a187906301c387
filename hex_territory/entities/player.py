"""Player entity and color allocation for Hex Territory."""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Set, Union

from ..core.enums import PlayerColor
from ..core.exceptions import ColorsExhaustedError
from ..core.constants import COLOR_CODES, AI_NAME_PREFIX
from ..utils.validation import Validator, coerce_enum


@dataclass(frozen=True)
class Player:
    """Represents a participant in the game.

    A color is unique among the players of one game, so two players are the
    same player exactly when their colors match.
    """

    color: PlayerColor
    is_ai: bool = field(default=False, compare=False)

    def __post_init__(self):
        Validator.validate_enum(self.color, PlayerColor, "color")
        Validator.validate_type(self.is_ai, bool, "is_ai")

    def is_same(self, other: "Player") -> bool:
        """Determine if this player is the one represented by `other`."""
        return isinstance(other, Player) and self.color == other.color

    @property
    def color_code(self) -> str:
        """Hex code of this player's color."""
        return COLOR_CODES[self.color]

    @property
    def display_name(self) -> str:
        return (AI_NAME_PREFIX if self.is_ai else "") + self.color.value

    def to_dict(self):
        return {"color": self.color.value, "color_code": self.color_code, "is_ai": self.is_ai}

    def __str__(self) -> str:
        return self.display_name


class ColorRegistry:
    """Tracks which palette colors are taken by the players of one game session."""

    def __init__(self, rng=None):
        self.rng = rng or random
        self._in_use: Set[PlayerColor] = set()

    def reset(self) -> None:
        """Release every color. Call before creating the players of a new game."""
        self._in_use.clear()

    def is_in_use(self, color: PlayerColor) -> bool:
        return color in self._in_use

    def available_colors(self) -> List[PlayerColor]:
        """Free colors, in palette order."""
        return [color for color in PlayerColor if color not in self._in_use]

    def allocate(self, preferred_color: Union[PlayerColor, str]) -> PlayerColor:
        """Reserve `preferred_color`, or a random free color if it is taken."""
        color = coerce_enum(preferred_color, PlayerColor, "preferred_color")

        if color in self._in_use:
            unused = self.available_colors()
            if not unused:
                raise ColorsExhaustedError(
                    "All colors are in use.",
                    error_code="COLORS_EXHAUSTED",
                    context={"palette_size": len(PlayerColor)}
                )
            color = self.rng.choice(unused)
            logging.debug(f"{preferred_color} taken, assigned {color.value}")

        self._in_use.add(color)
        return color

    def create_player(self, preferred_color: Union[PlayerColor, str], is_ai: bool = False) -> Player:
        """Create a player with a unique color."""
        return Player(color=self.allocate(preferred_color), is_ai=is_ai)
