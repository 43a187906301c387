"""Headless simulator for all-automated Hex Territory games."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Union
import random
import logging
from datetime import datetime

from ..core.enums import PlayerColor, SpawnMode
from ..core.exceptions import SimulationError, HexTerritoryError
from ..core.constants import (
    MAX_PLAYERS, DEFAULT_BOARD_RADIUS, DEFAULT_FAVORITE_COLOR, DEFAULT_SIMULATION_MAX_TICKS
)
from ..utils.validation import Validator, GameValidator, coerce_enum
from ..game.game_state import GameSettings
from ..game.scheduler import ManualScheduler
from ..game.turn_manager import Game


@dataclass
class SimulationConfig:
    """Configuration for simulation runs."""

    num_ai: int = 2
    board_radius: int = DEFAULT_BOARD_RADIUS
    spawn_mode: Union[SpawnMode, str] = SpawnMode.FAIR
    wall_density: float = 0.0
    favorite_color: Union[PlayerColor, str] = DEFAULT_FAVORITE_COLOR
    random_seed: Optional[int] = None
    detailed_logging: bool = False
    max_ticks: int = DEFAULT_SIMULATION_MAX_TICKS

    def validate(self) -> None:
        """Validate simulation configuration."""
        GameValidator.validate_count(self.num_ai, "num_ai")
        Validator.validate_range(self.num_ai, 1, MAX_PLAYERS, "num_ai")
        GameValidator.validate_board_radius(self.board_radius)
        GameValidator.validate_probability(self.wall_density, "wall_density")
        Validator.validate_positive(self.max_ticks, "max_ticks")
        self.spawn_mode = coerce_enum(self.spawn_mode, SpawnMode, "spawn_mode")
        self.favorite_color = coerce_enum(self.favorite_color, PlayerColor, "favorite_color")

    def to_settings(self) -> GameSettings:
        # pacing ticks are irrelevant headless, so the pilot commits on its first aligned tick
        return GameSettings(
            num_humans=0,
            num_ai=self.num_ai,
            board_radius=self.board_radius,
            favorite_color=self.favorite_color,
            spawn_mode=self.spawn_mode,
            wall_density=self.wall_density,
            ai_think_ticks=0,
            ai_confirm_ticks=0,
        )


@dataclass
class SimulationResult:
    """Results of a simulation run."""

    config: SimulationConfig
    final_state: Game
    scores: Dict[str, int] = field(default_factory=dict)
    leaders: List[str] = field(default_factory=list)
    total_turns: int = 0
    total_ticks: int = 0
    execution_time_seconds: float = 0.0

    def get_summary(self) -> Dict[str, Any]:
        """Get concise simulation summary."""
        return {
            "leaders": self.leaders,
            "total_turns": self.total_turns,
            "total_ticks": self.total_ticks,
            "execution_time": f"{self.execution_time_seconds:.2f}s",
            "final_scores": dict(self.scores),
        }


class TerritorySimulator:
    """Plays automated games to completion without a real timer."""

    def __init__(self, config: SimulationConfig = None):
        self.config = config or SimulationConfig()
        self.config.validate()

        self.game: Optional[Game] = None
        self.scheduler: Optional[ManualScheduler] = None
        self.start_time: Optional[datetime] = None
        self.rng = random.Random(self.config.random_seed)

        if self.config.detailed_logging:
            logging.basicConfig(level=logging.INFO)

    def create_game(self) -> Game:
        """Create a new all-automated game on a manual scheduler."""
        self.scheduler = ManualScheduler()
        self.game = Game(self.config.to_settings(), scheduler=self.scheduler, rng=self.rng)
        return self.game

    def run_simulation(self) -> SimulationResult:
        """Run one complete game."""
        self.start_time = datetime.now()

        try:
            self.create_game()
            logging.info(f"Starting simulation with {self.config.num_ai} players")

            ticks = self.scheduler.run_until_idle(self.config.max_ticks)
            if not self.game.is_game_over:
                raise SimulationError(
                    "Scheduler went idle before the game ended",
                    error_code="STALLED",
                    context={"turns": self.game.turns_taken}
                )

            result = self._generate_simulation_result(ticks)
            result.execution_time_seconds = (datetime.now() - self.start_time).total_seconds()

            logging.info(f"Simulation completed: {result.get_summary()}")
            return result

        except HexTerritoryError as e:
            logging.error(f"Simulation failed: {str(e)}")
            if isinstance(e, SimulationError):
                raise
            raise SimulationError(f"Simulation execution failed: {str(e)}") from e

    def _generate_simulation_result(self, ticks: int) -> SimulationResult:
        """Generate final simulation results."""
        summary = self.game.summary
        scores = {
            player.display_name: summary.score_for(player) for player in self.game.players
        }
        best = max(scores.values()) if scores else 0

        return SimulationResult(
            config=self.config,
            final_state=self.game,
            scores=scores,
            leaders=[name for name, count in scores.items() if count == best],
            total_turns=self.game.turns_taken,
            total_ticks=ticks,
        )

    def get_simulation_status(self) -> Dict[str, Any]:
        """Get current simulation status."""
        if not self.game:
            return {"status": "not_started"}

        return {
            "status": self.game.status.value,
            "turns_taken": self.game.turns_taken,
            "ticks_elapsed": self.scheduler.ticks_elapsed,
            "execution_time": (
                (datetime.now() - self.start_time).total_seconds()
                if self.start_time else 0
            )
        }


# Utility functions for simulation
def create_quick_simulation(num_ai: int = 2, board_radius: int = 3,
                            random_seed: Optional[int] = None) -> SimulationResult:
    """Create and run a quick simulation for testing."""
    config = SimulationConfig(num_ai=num_ai, board_radius=board_radius, random_seed=random_seed)
    return TerritorySimulator(config).run_simulation()


def run_simulation_batch(batch_size: int = 10, config: Optional[SimulationConfig] = None) -> List[SimulationResult]:
    """Run several seeded simulations with the same configuration."""
    Validator.validate_positive(batch_size, "batch_size")
    base = config or SimulationConfig()
    results = []

    for i in range(batch_size):
        logging.info(f"Running simulation {i+1}/{batch_size}")

        seed = None if base.random_seed is None else base.random_seed + i
        run_config = SimulationConfig(
            num_ai=base.num_ai,
            board_radius=base.board_radius,
            spawn_mode=base.spawn_mode,
            wall_density=base.wall_density,
            favorite_color=base.favorite_color,
            random_seed=seed,
            detailed_logging=base.detailed_logging,
            max_ticks=base.max_ticks,
        )
        results.append(TerritorySimulator(run_config).run_simulation())

    return results


def analyze_simulation_results(results: List[SimulationResult]) -> Dict[str, Any]:
    """Analyze multiple simulation results."""
    if not results:
        return {}

    total_games = len(results)

    leader_counts: Dict[str, int] = {}
    tile_totals: Dict[str, int] = {}
    for result in results:
        for name in result.leaders:
            leader_counts[name] = leader_counts.get(name, 0) + 1
        for name, count in result.scores.items():
            tile_totals[name] = tile_totals.get(name, 0) + count

    return {
        "total_games": total_games,
        "leader_distribution": leader_counts,
        "average_tiles": {name: total / total_games for name, total in tile_totals.items()},
        "average_turns": sum(r.total_turns for r in results) / total_games,
        "average_execution_time": sum(r.execution_time_seconds for r in results) / total_games
    }
