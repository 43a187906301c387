"""Tile entity and its capture state."""

from dataclasses import dataclass
from typing import Optional, Union, Dict, Any

from ..core.enums import PlayerColor
from ..utils.hex_utils import HexCoordinate


@dataclass(frozen=True)
class Neutral:
    """Unclaimed tile."""

    def __str__(self) -> str:
        return "neutral"


@dataclass(frozen=True)
class Owned:
    """Tile captured by the player identified by `color`."""
    color: PlayerColor

    def __str__(self) -> str:
        return f"owned:{self.color.value}"


@dataclass(frozen=True)
class Wall:
    """Permanently blocked tile."""

    def __str__(self) -> str:
        return "wall"


TileState = Union[Neutral, Owned, Wall]

NEUTRAL = Neutral()
WALL = Wall()


class Tile:
    """A single cell of the board.

    A tile is a wall from construction or never, and a wall can never be
    captured or cleared.
    """

    def __init__(self, coordinate: HexCoordinate, wall: bool = False):
        self.coordinate = coordinate
        self._state: TileState = WALL if wall else NEUTRAL

    @property
    def state(self) -> TileState:
        return self._state

    @property
    def owner(self) -> Optional[PlayerColor]:
        """Color of the owning player, if any."""
        if isinstance(self._state, Owned):
            return self._state.color
        return None

    def is_neutral(self) -> bool:
        """Determine if this tile has yet to be captured."""
        return isinstance(self._state, Neutral)

    def is_wall(self) -> bool:
        return isinstance(self._state, Wall)

    def is_owned_by(self, player) -> bool:
        """Return True if `player` owns this tile."""
        return isinstance(self._state, Owned) and self._state.color == player.color

    def capture(self, player) -> bool:
        """Attempt to capture this tile, return True if the tile was captured."""
        if self.is_neutral():
            self._state = Owned(player.color)
            return True
        return False

    def clear(self) -> None:
        """Drop any ownership; walls stay."""
        if isinstance(self._state, Owned):
            self._state = NEUTRAL

    def bordering_coordinate(self, direction) -> HexCoordinate:
        """Coordinate of the bordering tile in `direction`."""
        return self.coordinate.neighbor(direction)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "coordinate": str(self.coordinate),
            "state": str(self._state),
        }

    def __repr__(self) -> str:
        return f"Tile({self.coordinate}, {self._state})"
