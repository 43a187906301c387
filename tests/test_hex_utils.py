"""Tests for axial coordinates and hex regions."""

import pytest

from hex_territory.core.enums import Direction
from hex_territory.core.exceptions import InvalidHexError
from hex_territory.utils.hex_utils import (
    HexCoordinate, ORIGIN, hex_region, hex_count, get_neighbor, is_adjacent, get_direction_to
)


class TestHexCoordinate:

    def test_addition_and_scaling(self):
        assert HexCoordinate(1, -2) + HexCoordinate(2, 3) == HexCoordinate(3, 1)
        assert HexCoordinate(1, -1) * 3 == HexCoordinate(3, -3)
        assert 2 * HexCoordinate(-1, 1) == HexCoordinate(-2, 2)

    @pytest.mark.parametrize("direction, expected", [
        (Direction.NORTH, (0, -1)),
        (Direction.NORTH_EAST, (1, -1)),
        (Direction.NORTH_WEST, (-1, 0)),
        (Direction.SOUTH, (0, 1)),
        (Direction.SOUTH_EAST, (1, 0)),
        (Direction.SOUTH_WEST, (-1, 1)),
    ])
    def test_neighbor_offsets(self, direction, expected):
        assert ORIGIN.neighbor(direction) == HexCoordinate(*expected)
        assert get_neighbor(HexCoordinate(2, 2), direction) == HexCoordinate(2 + expected[0], 2 + expected[1])

    def test_neighbors_are_all_at_distance_one(self):
        center = HexCoordinate(1, -1)
        neighbors = center.neighbors()
        assert len(set(neighbors)) == 6
        assert all(center.distance_to(n) == 1 for n in neighbors)
        assert all(is_adjacent(center, n) for n in neighbors)

    def test_direction_to(self):
        assert get_direction_to(ORIGIN, HexCoordinate(1, 0)) == Direction.SOUTH_EAST
        assert get_direction_to(ORIGIN, HexCoordinate(2, 0)) is None

    def test_distance(self):
        assert HexCoordinate(0, -3).distance_to(HexCoordinate(0, 3)) == 6
        assert HexCoordinate(2, -1).distance_to(HexCoordinate(-1, 2)) == 3

    def test_is_within(self):
        assert HexCoordinate(2, -2).is_within(2)
        assert not HexCoordinate(2, 1).is_within(2)
        assert not HexCoordinate(-3, 0).is_within(2)

    def test_string_round_trip(self):
        coord = HexCoordinate(-3, 4)
        assert str(coord) == "-3,4"
        assert HexCoordinate.from_string(" -3, 4 ") == coord

    def test_from_string_rejects_garbage(self):
        with pytest.raises(InvalidHexError):
            HexCoordinate.from_string("A1")


class TestHexRegion:

    @pytest.mark.parametrize("radius", [0, 1, 2, 3])
    def test_region_size_matches_formula(self, radius):
        cells = list(hex_region(radius))
        assert len(cells) == 3 * radius * radius + 3 * radius + 1
        assert len(cells) == hex_count(radius)
        assert len(set(cells)) == len(cells)

    def test_region_cells_satisfy_bounds(self):
        for coord in hex_region(3):
            assert coord.is_within(3)

    def test_radius_zero_is_origin(self):
        assert list(hex_region(0)) == [ORIGIN]
