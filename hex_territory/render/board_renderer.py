"""Matplotlib drawing of boards, direction previews and game summaries.

Every renderer is a `Drawable`: it draws itself onto a matplotlib Axes and
never changes the game objects it reads.
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np

from ..core.constants import (
    COLOR_CODES, TILE_SIZE, NEUTRAL_TILE_COLOR, WALL_TILE_COLOR, TILE_EDGE_COLOR,
    PREVIEW_CENTER, SUMMARY_POSITION, SUMMARY_FONT_SIZE
)
from ..utils.hex_utils import HexCoordinate
from ..entities.tile import TileState, Owned, Wall
from ..game.board import GameBoard
from ..game.direction_selector import DirectionSelector


class Drawable(ABC):
    """Anything that can render itself on a drawing surface."""

    @abstractmethod
    def draw(self, ax) -> None:
        pass


def tile_center(coord: HexCoordinate, size: float = TILE_SIZE) -> Tuple[float, float]:
    """Pixel center of a flat-topped hex."""
    x = coord.x * 3 / 2 * size
    y = (coord.x + 2 * coord.y) * np.sqrt(3) / 2 * size
    return x, y


def get_hex_vertices(center_x, center_y, radius):
    angles = np.linspace(0, 2 * np.pi, 7)
    x_coords = center_x + radius * np.cos(angles)
    y_coords = center_y + radius * np.sin(angles)
    return list(zip(x_coords, y_coords))


def tile_face_color(state: TileState) -> str:
    if isinstance(state, Owned):
        return COLOR_CODES[state.color]
    if isinstance(state, Wall):
        return WALL_TILE_COLOR
    return NEUTRAL_TILE_COLOR


def _draw_cells(ax, cells: Dict[HexCoordinate, TileState], origin: Tuple[float, float],
                size: float) -> int:
    """Draw hex cells offset by `origin`; return how many patches were added."""
    origin_x, origin_y = origin
    for coord, state in cells.items():
        x, y = tile_center(coord, size)
        hex_polygon = plt.Polygon(
            get_hex_vertices(origin_x + x, origin_y + y, size),
            edgecolor=TILE_EDGE_COLOR, facecolor=tile_face_color(state), linewidth=2
        )
        ax.add_patch(hex_polygon)
    return len(cells)


def _board_extent(radius: int, size: float) -> float:
    return (radius + 1) * 2 * size


class BoardRenderer(Drawable):
    """Draws every tile of a board around the board's normalized center."""

    def __init__(self, board: GameBoard, size: float = TILE_SIZE):
        self.board = board
        self.size = size

    def draw(self, ax) -> None:
        cells = {tile.coordinate: tile.state for tile in self.board.tiles}
        _draw_cells(ax, cells, (0.0, 0.0), self.size)

        extent = _board_extent(self.board.radius, self.size)
        center_x, center_y = self.board.normalized_center
        # place the board center at normalized_center of the visible area
        ax.set_xlim(-extent * 2 * center_x, extent * 2 * (1 - center_x))
        ax.set_ylim(extent * 2 * (1 - center_y), -extent * 2 * center_y)
        ax.set_aspect('equal')
        ax.axis('off')


class DirectionPreviewRenderer(Drawable):
    """Draws a selector's seven-cell preview in a corner of the axes."""

    def __init__(self, selector: DirectionSelector, size: float = TILE_SIZE,
                 normalized_center: Tuple[float, float] = PREVIEW_CENTER):
        self.selector = selector
        self.size = size
        self.normalized_center = normalized_center

    def draw(self, ax) -> None:
        x_min, x_max = sorted(ax.get_xlim())
        y_min, y_max = sorted(ax.get_ylim())
        origin = (
            x_min + (x_max - x_min) * self.normalized_center[0],
            y_min + (y_max - y_min) * self.normalized_center[1],
        )
        _draw_cells(ax, self.selector.preview.cells(), origin, self.size)


class SummaryRenderer(Drawable):
    """Draws multi-line text in axes coordinates."""

    def __init__(self, text: str, font_size: int = SUMMARY_FONT_SIZE,
                 normalized_position: Tuple[float, float] = SUMMARY_POSITION):
        self.text = text
        self.font_size = font_size
        self.normalized_position = normalized_position

    def draw(self, ax) -> None:
        x, y = self.normalized_position
        ax.text(x, 1 - y, self.text, transform=ax.transAxes, ha='left', va='top',
                fontsize=self.font_size, family='monospace', weight='bold', color='black',
                bbox=dict(facecolor='white', edgecolor='none'))


class GameRenderer(Drawable):
    """Board plus either the active selector's preview or the game-over summary."""

    def __init__(self, game, size: float = TILE_SIZE):
        self.game = game
        self.size = size

    def draw(self, ax) -> None:
        BoardRenderer(self.game.board, self.size).draw(ax)
        if self.game.is_game_over:
            if self.game.game_over_text:
                SummaryRenderer(self.game.game_over_text).draw(ax)
        else:
            DirectionPreviewRenderer(self.game.current_selector, self.size).draw(ax)


def render_game_to_file(game, output_path: str, figsize: Tuple[float, float] = (8, 8),
                        title: Optional[str] = None) -> str:
    """Draw `game` and save it as an image."""
    fig, ax = plt.subplots(figsize=figsize)
    try:
        GameRenderer(game).draw(ax)
        if title:
            ax.set_title(title)
        fig.savefig(output_path, bbox_inches='tight')
    finally:
        plt.close(fig)
    return output_path
