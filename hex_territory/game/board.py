"""Hex board management and territory capture for Hex Territory."""

import logging
import random
from typing import Dict, List, Optional, Tuple, Any, Iterator

from ..core.enums import Direction
from ..core.exceptions import NoTilesAvailableError
from ..core.constants import AI_DIRECTION_BUCKETS
from ..utils.hex_utils import HexCoordinate, hex_region
from ..utils.validation import GameValidator
from ..entities.player import Player
from ..entities.tile import Tile


class GameBoard:
    """Owns every tile of a hexagonal board and is the only code that changes tile ownership."""

    def __init__(self, radius: int, wall_density: float = 0.0,
                 normalized_center: Tuple[float, float] = (0.5, 0.5), rng=None):
        GameValidator.validate_board_radius(radius)
        GameValidator.validate_probability(wall_density, "wall_density")

        self.radius = radius
        self.wall_density = wall_density
        self.normalized_center = normalized_center
        self.rng = rng or random

        self._tiles: Dict[HexCoordinate, Tile] = {}
        self._initialize_board_layout()

    def _initialize_board_layout(self) -> None:
        """Create a tile per cell, rolling once per cell for a wall."""
        for coord in hex_region(self.radius):
            self._tiles[coord] = Tile(coord, wall=self.rng.random() < self.wall_density)

    # Read-only access

    @property
    def tiles(self) -> List[Tile]:
        return list(self._tiles.values())

    def tile_at(self, coord: HexCoordinate) -> Optional[Tile]:
        """Get tile at hex coordinate."""
        return self._tiles.get(coord)

    def neutral_tiles(self) -> List[Tile]:
        return [tile for tile in self._tiles.values() if tile.is_neutral()]

    def is_valid_location(self, coord: HexCoordinate) -> bool:
        return coord in self._tiles

    def __contains__(self, coord: HexCoordinate) -> bool:
        return coord in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    # Spawning

    def spawn(self, player: Player, location: HexCoordinate) -> bool:
        """Try to spawn `player` at `location`; only a neutral tile can be taken."""
        tile = self._tiles.get(location)
        if tile is None or not tile.is_neutral():
            return False
        tile.capture(player)
        return True

    def spawn_random(self, player: Player) -> HexCoordinate:
        """Spawn `player` on a uniformly random neutral tile."""
        neutral = self.neutral_tiles()
        if not neutral:
            raise NoTilesAvailableError(
                "No neutral tiles left.",
                error_code="NO_TILES",
                context={"player": player.display_name, "radius": self.radius}
            )
        tile = self.rng.choice(neutral)
        tile.capture(player)
        return tile.coordinate

    # Capturing

    def _neutral_bordering_tiles(self, player: Player, direction: Direction) -> List[Tile]:
        """Neutral tiles lying `direction` of any tile `player` owns."""
        bordering = []
        for tile in self._tiles.values():
            if not tile.is_owned_by(player):
                continue
            target = self._tiles.get(tile.bordering_coordinate(direction))
            if target is not None and target.is_neutral():
                bordering.append(target)
        return bordering

    def capture_weight(self, player: Player, direction: Direction) -> int:
        """Number of tiles `player` would capture in `direction`.

        Doubles as the legality check and as the automated players' sampling weight.
        """
        return len(self._neutral_bordering_tiles(player, direction))

    def capture_weights(self, player: Player) -> List[int]:
        """Capture weights for all six directions, in bucket order."""
        return [self.capture_weight(player, direction) for direction in AI_DIRECTION_BUCKETS]

    def capture_tiles(self, player: Player, direction: Direction) -> int:
        """Make `player` capture every neutral tile bordering its territory in `direction`."""
        targets = self._neutral_bordering_tiles(player, direction)
        captured = sum(1 for tile in targets if tile.capture(player))
        logging.debug(f"{player.display_name} captured {captured} tiles {direction.value}")
        return captured

    def has_legal_moves(self, player: Player) -> bool:
        """Determine if `player` can capture anything in some direction."""
        return any(self.capture_weight(player, direction) > 0 for direction in Direction)

    def num_tiles_owned_by(self, player: Player) -> int:
        return sum(1 for tile in self._tiles.values() if tile.is_owned_by(player))

    def clear(self) -> None:
        """Reset ownership of every tile."""
        for tile in self._tiles.values():
            tile.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "radius": self.radius,
            "wall_density": self.wall_density,
            "tiles": [tile.to_dict() for tile in self._tiles.values()],
        }

    def __str__(self) -> str:
        return f"GameBoard(radius={self.radius}, tiles={len(self)})"
