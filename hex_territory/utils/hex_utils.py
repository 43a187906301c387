"""Axial hex grid mathematics for Hex Territory."""

import re
from dataclasses import dataclass
from typing import Iterator, List

from ..core.enums import Direction
from ..core.constants import DIRECTION_OFFSETS
from ..core.exceptions import InvalidHexError


@dataclass(frozen=True)
class HexCoordinate:
    """Represents an axial hex coordinate."""
    x: int
    y: int

    def __str__(self) -> str:
        """String representation of hex coordinate."""
        return f"{self.x},{self.y}"

    def __add__(self, other: "HexCoordinate") -> "HexCoordinate":
        if not isinstance(other, HexCoordinate):
            return NotImplemented
        return HexCoordinate(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: int) -> "HexCoordinate":
        if not isinstance(factor, int):
            return NotImplemented
        return HexCoordinate(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def neighbor(self, direction: Direction) -> "HexCoordinate":
        """Get the adjacent coordinate in a direction."""
        return self + direction_offset(direction)

    def neighbors(self) -> List["HexCoordinate"]:
        """Get all six adjacent coordinates, in direction declaration order."""
        return [self.neighbor(direction) for direction in Direction]

    def is_within(self, radius: int) -> bool:
        """Check if this coordinate lies in the hexagon of `radius` around the origin."""
        return abs(self.x) <= radius and abs(self.y) <= radius and abs(self.x + self.y) <= radius

    def distance_to(self, other: "HexCoordinate") -> int:
        """Hex distance between two coordinates."""
        dx = self.x - other.x
        dy = self.y - other.y
        return max(abs(dx), abs(dy), abs(dx + dy))

    @classmethod
    def from_string(cls, hex_string: str) -> "HexCoordinate":
        """Create HexCoordinate from an "x,y" string."""
        match = re.match(r'^\s*(-?\d+)\s*,\s*(-?\d+)\s*$', hex_string)
        if not match:
            raise InvalidHexError(f"Invalid hex format: {hex_string}")

        x_str, y_str = match.groups()
        return cls(int(x_str), int(y_str))


ORIGIN = HexCoordinate(0, 0)


def direction_offset(direction: Direction) -> HexCoordinate:
    """Unit offset for a direction."""
    dx, dy = DIRECTION_OFFSETS[direction]
    return HexCoordinate(dx, dy)


def get_neighbor(coord: HexCoordinate, direction: Direction) -> HexCoordinate:
    """Get the adjacent hex coordinate in `direction`."""
    return coord.neighbor(direction)


def hex_region(radius: int) -> Iterator[HexCoordinate]:
    """Yield every coordinate of the hexagon of `radius` centered at the origin."""
    for x in range(-radius, radius + 1):
        for y in range(-radius, radius + 1):
            if abs(x + y) <= radius:
                yield HexCoordinate(x, y)


def hex_count(radius: int) -> int:
    """Number of cells in a hexagon of `radius`."""
    return 3 * radius * radius + 3 * radius + 1


def is_adjacent(hex1: HexCoordinate, hex2: HexCoordinate) -> bool:
    """Check if two hexes are adjacent."""
    return hex1.distance_to(hex2) == 1


def get_direction_to(from_hex: HexCoordinate, to_hex: HexCoordinate):
    """Get the direction from one hex to an adjacent hex, or None if not adjacent."""
    for direction in Direction:
        if from_hex.neighbor(direction) == to_hex:
            return direction
    return None
