"""Turn sequencing for Hex Territory."""

import logging
import random
from typing import Dict, List, Optional, Any, Union

from ..core.enums import Direction, GameStatus, PlayerColor, Rotation, SpawnMode
from ..core.exceptions import InvalidSpawnModeError, InvariantViolationError
from ..core.constants import FAIR_SPAWN_POINTS, FAIR_SPAWN_LAYOUTS, DEFAULT_BOARD_RADIUS
from ..utils.hex_utils import HexCoordinate, direction_offset
from ..entities.player import Player, ColorRegistry
from ..ai.base_strategy import BaseStrategy, WeightedRandomStrategy
from ..ai.auto_pilot import AutoPilot
from .board import GameBoard
from .direction_selector import DirectionSelector
from .game_state import GameSettings, GameSummary, build_game_summary
from .scheduler import Scheduler, ManualScheduler


def fair_spawn_locations(num_players: int, radius: int) -> List[HexCoordinate]:
    """Border coordinates for a fair start, one per player in turn order."""
    return [
        direction_offset(FAIR_SPAWN_POINTS[index]) * radius
        for index in FAIR_SPAWN_LAYOUTS[num_players]
    ]


class Game:
    """Owns the players and the board, and decides whose turn it is.

    Humans drive the game through `human_input` and `human_select`; automated
    players are driven by an `AutoPilot` on the scheduler.
    """

    def __init__(self, settings: Optional[GameSettings] = None, scheduler: Optional[Scheduler] = None,
                 strategy: Optional[BaseStrategy] = None, registry: Optional[ColorRegistry] = None,
                 rng=None):
        self.settings = settings or GameSettings()
        self.rng = rng or random
        self.scheduler = scheduler or ManualScheduler()
        self.strategy = strategy or WeightedRandomStrategy(self.rng)
        self.registry = registry or ColorRegistry(self.rng)

        self.registry.reset()
        self.settings.validate()

        self.players: List[Player] = []
        self.selectors: List[DirectionSelector] = []
        self.current_player_index = 0
        self.status = GameStatus.IN_PROGRESS
        self.turns_taken = 0
        self.action_log: List[Dict[str, Any]] = []
        self.summary: Optional[GameSummary] = None
        self.game_over_text: Optional[str] = None
        self.pilot: Optional[AutoPilot] = None

        for _ in range(self.settings.num_humans):
            self.players.append(self.registry.create_player(self.settings.favorite_color, is_ai=False))
        for _ in range(self.settings.num_ai):
            self.players.append(self.registry.create_player(self.settings.favorite_color, is_ai=True))
        self.selectors = [DirectionSelector(player) for player in self.players]

        self.board = GameBoard(self.settings.board_radius, self.settings.wall_density, rng=self.rng)
        self._spawn(self.settings.spawn_mode)

        logging.info(
            f"Game started: {len(self.players)} players "
            f"({', '.join(p.display_name for p in self.players)}), radius {self.board.radius}"
        )

        if not self.board.has_legal_moves(self.current_player):
            self._advance_to_next_player()
        self._check_game_over()

        if self.is_active and self.current_player.is_ai:
            self._start_ai_turn()

    # Setup

    def _spawn(self, mode: SpawnMode) -> None:
        """Place every player's starting tile."""
        if mode == SpawnMode.FAIR:
            locations = fair_spawn_locations(len(self.players), self.board.radius)
            for player, location in zip(self.players, locations):
                if self.board.spawn(player, location):
                    logging.debug(f"{player.display_name} spawned at {location}")
                else:
                    logging.warning(f"{player.display_name} could not spawn at {location}")
        elif mode == SpawnMode.RANDOM:
            for player in self.players:
                location = self.board.spawn_random(player)
                logging.debug(f"{player.display_name} spawned at {location}")
        else:
            raise InvalidSpawnModeError(
                f'Invalid spawn mode: "{mode}"',
                error_code="INVALID_SPAWN_MODE",
                context={"mode": mode}
            )

    # Read-only state

    @property
    def is_active(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def current_selector(self) -> DirectionSelector:
        return self.selectors[self.current_player_index]

    @property
    def current_direction(self) -> Direction:
        return self.current_selector.direction

    def scores(self) -> Dict[PlayerColor, int]:
        """Current tile count per player."""
        return {player.color: self.board.num_tiles_owned_by(player) for player in self.players}

    # Human input

    def human_input(self, rotation: Union[Rotation, str]) -> None:
        """Rotate the active player's selector, if that player is human."""
        if self.is_active and not self.current_player.is_ai:
            self.current_selector.rotate(rotation)

    def human_select(self) -> None:
        """Confirm the active human's direction, or dismiss the game-over summary."""
        if self.is_game_over:
            self.game_over_text = None
        elif not self.current_player.is_ai:
            self._take_turn()

    # Turn processing

    def _take_turn(self) -> bool:
        """Capture in the active player's selected direction and pass the turn on.

        Returns False, changing nothing, when the direction captures no tile.
        """
        if not self.is_active:
            return False

        player = self.current_player
        direction = self.current_direction
        if self.board.capture_weight(player, direction) == 0:
            return False

        if self.pilot is not None:
            self.pilot.cancel()
            self.pilot = None

        captured = self.board.capture_tiles(player, direction)
        self.turns_taken += 1
        self._log_action(player, direction, captured)
        logging.info(f"Turn {self.turns_taken}: {player.display_name} captured {captured} tiles {direction.value}")

        self._advance_to_next_player()
        self._check_game_over()

        if self.is_active and self.current_player.is_ai:
            self._start_ai_turn()
        return True

    def _advance_to_next_player(self) -> None:
        """Move to the next player that can still capture, checking each player at most once."""
        attempts = 0
        while True:
            attempts += 1
            self.current_player_index = (self.current_player_index + 1) % len(self.players)
            if self.board.has_legal_moves(self.current_player) or attempts >= len(self.players):
                break
            logging.debug(f"Skipping {self.current_player.display_name}: no legal moves")

    def _check_game_over(self) -> bool:
        if any(self.board.has_legal_moves(player) for player in self.players):
            return False

        if self.is_active:
            self.status = GameStatus.GAME_OVER
            self.summary = build_game_summary(self.players, self.board)
            self.game_over_text = self.summary.text
            logging.info(f"Game over after {self.turns_taken} turns: {self.summary.to_dict()['scores']}")
        return True

    def _start_ai_turn(self) -> None:
        """Choose the automated player's direction and let the pilot dial it in."""
        player = self.current_player
        target = self.strategy.choose_direction(player, self.board)
        if target is None:
            raise InvariantViolationError(
                f"{player.display_name} has no capturable direction on its turn",
                error_code="NO_LEGAL_MOVE",
                context={"player": player.display_name, "turn": self.turns_taken}
            )

        pilot = AutoPilot(
            self.current_selector, target, lambda: self._commit_pilot(pilot),
            think_ticks=self.settings.ai_think_ticks,
            confirm_ticks=self.settings.ai_confirm_ticks
        )
        self.pilot = pilot
        pilot.start(self.scheduler, self.settings.ai_tick_interval_ms)

    def _commit_pilot(self, pilot: AutoPilot) -> None:
        """Take the turn a pilot dialed in, unless the turn has already moved on."""
        if pilot is not self.pilot or not pilot.selector.player.is_same(self.current_player):
            logging.debug(f"Ignoring stale commit from {pilot.selector.player.display_name}")
            return
        self._take_turn()

    def _log_action(self, player: Player, direction: Direction, captured: int) -> None:
        self.action_log.append({
            "turn": self.turns_taken,
            "player": player.display_name,
            "color": player.color.value,
            "direction": direction.value,
            "captured": captured,
        })

    def __str__(self) -> str:
        return (f"Game - {self.status.value} - turn {self.turns_taken} - "
                f"{len(self.players)} players")


def create_game(num_humans: int = 1, num_ai: int = 1, board_radius: int = DEFAULT_BOARD_RADIUS,
                favorite_color: Union[PlayerColor, str] = PlayerColor.RED,
                spawn_mode: Union[SpawnMode, str] = SpawnMode.FAIR, wall_density: float = 0.0,
                **kwargs) -> Game:
    """Create a new game from plain parameters."""
    settings = GameSettings(
        num_humans=num_humans,
        num_ai=num_ai,
        board_radius=board_radius,
        favorite_color=favorite_color,
        spawn_mode=spawn_mode,
        wall_density=wall_density,
    )
    return Game(settings, **kwargs)
