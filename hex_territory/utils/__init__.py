"""Hex math and validation helpers."""

from .hex_utils import HexCoordinate, ORIGIN, hex_region, hex_count, get_neighbor
from .validation import Validator, GameValidator, clamp, coerce_enum

__all__ = [
    "HexCoordinate", "ORIGIN", "hex_region", "hex_count", "get_neighbor",
    "Validator", "GameValidator", "clamp", "coerce_enum"
]
