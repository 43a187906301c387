"""Matplotlib rendering of game objects."""

from .board_renderer import (
    Drawable, BoardRenderer, DirectionPreviewRenderer, SummaryRenderer, GameRenderer,
    render_game_to_file, tile_center, get_hex_vertices
)

__all__ = [
    "Drawable", "BoardRenderer", "DirectionPreviewRenderer", "SummaryRenderer", "GameRenderer",
    "render_game_to_file", "tile_center", "get_hex_vertices"
]
