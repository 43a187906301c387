"""Tests for headless simulation runs."""

import pytest

from hex_territory.core.exceptions import RangeValidationError, InvalidInputError, TypeValidationError
from hex_territory.simulation.simulator import (
    SimulationConfig, TerritorySimulator, create_quick_simulation,
    run_simulation_batch, analyze_simulation_results
)
from hex_territory.utils.hex_utils import hex_count


class TestSimulationConfig:

    def test_player_count_bounds(self):
        with pytest.raises(RangeValidationError):
            SimulationConfig(num_ai=0).validate()
        with pytest.raises(RangeValidationError):
            SimulationConfig(num_ai=7).validate()

    def test_boolean_player_count_rejected(self):
        with pytest.raises(TypeValidationError):
            SimulationConfig(num_ai=True).validate()

    def test_unknown_spawn_mode(self):
        with pytest.raises(InvalidInputError):
            SimulationConfig(spawn_mode="corners").validate()

    def test_settings_have_no_humans_or_pacing(self):
        settings = SimulationConfig(num_ai=3, board_radius=2).to_settings()
        assert settings.num_humans == 0
        assert settings.num_ai == 3
        assert settings.ai_think_ticks == 0
        assert settings.ai_confirm_ticks == 0


class TestTerritorySimulator:

    def test_game_runs_to_completion(self):
        simulator = TerritorySimulator(SimulationConfig(num_ai=3, board_radius=3, random_seed=21))
        assert simulator.get_simulation_status() == {"status": "not_started"}

        result = simulator.run_simulation()

        assert result.final_state.is_game_over
        assert sum(result.scores.values()) == hex_count(3)
        assert result.total_turns == len(result.final_state.action_log)
        assert result.total_ticks > 0
        assert set(result.leaders) <= set(result.scores)
        assert simulator.get_simulation_status()["status"] == "game_over"

    def test_seed_makes_runs_repeatable(self):
        first = create_quick_simulation(num_ai=4, board_radius=3, random_seed=8)
        second = create_quick_simulation(num_ai=4, board_radius=3, random_seed=8)
        assert first.scores == second.scores
        assert first.final_state.action_log == second.final_state.action_log

    def test_walls_reduce_capturable_tiles(self):
        result = TerritorySimulator(
            SimulationConfig(num_ai=2, board_radius=4, wall_density=0.3, random_seed=2)
        ).run_simulation()
        walls = sum(1 for tile in result.final_state.board if tile.is_wall())
        assert sum(result.scores.values()) <= hex_count(4) - walls

    def test_single_cell_board(self):
        result = create_quick_simulation(num_ai=1, board_radius=0, random_seed=0)
        assert result.total_turns == 0
        assert result.total_ticks == 0
        assert result.leaders == ["[AI] Red"]


class TestBatches:

    def test_batch_and_analysis(self):
        results = run_simulation_batch(4, SimulationConfig(num_ai=2, board_radius=2, random_seed=100))
        assert len(results) == 4
        assert [r.config.random_seed for r in results] == [100, 101, 102, 103]

        analysis = analyze_simulation_results(results)
        assert analysis["total_games"] == 4
        assert sum(analysis["leader_distribution"].values()) >= 4
        assert sum(analysis["average_tiles"].values()) == pytest.approx(hex_count(2))

    def test_empty_analysis(self):
        assert analyze_simulation_results([]) == {}
