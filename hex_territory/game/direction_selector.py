"""Per-player direction selection."""

from typing import Dict, Union

from ..core.enums import Direction, Rotation
from ..core.constants import CLOCKWISE_DIRECTIONS
from ..utils.hex_utils import HexCoordinate, ORIGIN, hex_region
from ..utils.validation import coerce_enum
from ..entities.player import Player
from ..entities.tile import TileState, Owned, NEUTRAL


class DirectionPreview:
    """Seven-cell picture of what the selected direction captures.

    Purely cosmetic: the owner sits in the center and the neighbor in the
    selected direction is highlighted.
    """

    def __init__(self, player: Player, direction: Direction = Direction.NORTH):
        self.player = player
        self.center = ORIGIN
        self.highlighted = ORIGIN.neighbor(direction)

    def refresh(self, direction: Direction) -> None:
        self.highlighted = self.center.neighbor(direction)

    def cells(self) -> Dict[HexCoordinate, TileState]:
        owned = Owned(self.player.color)
        return {
            coord: owned if coord in (self.center, self.highlighted) else NEUTRAL
            for coord in hex_region(1)
        }


class DirectionSelector:
    """Tracks the direction a player will capture in next."""

    def __init__(self, player: Player):
        self.player = player
        self._index = 0
        self.preview = DirectionPreview(player, self.direction)

    @property
    def direction(self) -> Direction:
        return CLOCKWISE_DIRECTIONS[self._index]

    def get_direction(self) -> Direction:
        """Return the direction currently selected."""
        return self.direction

    def rotate(self, way: Union[Rotation, str]) -> Direction:
        """Rotate the selection one step clockwise (CW) or counter-clockwise (CCW)."""
        way = coerce_enum(way, Rotation, "rotation")
        step = 1 if way == Rotation.CW else -1
        num_directions = len(CLOCKWISE_DIRECTIONS)
        self._index = (self._index + num_directions + step) % num_directions
        self.preview.refresh(self.direction)
        return self.direction

    def __repr__(self) -> str:
        return f"DirectionSelector({self.player.display_name}, {self.direction.value})"
