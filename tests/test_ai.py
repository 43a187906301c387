"""Tests for weighted direction choice and the automated pilot."""

import random

import pytest

from hex_territory.core.enums import Direction, PilotPhase, PlayerColor, Rotation
from hex_territory.core.exceptions import GameStateError
from hex_territory.entities.player import Player
from hex_territory.game.board import GameBoard
from hex_territory.game.direction_selector import DirectionSelector
from hex_territory.game.scheduler import ManualScheduler
from hex_territory.ai.base_strategy import select_random_bucket, WeightedRandomStrategy
from hex_territory.ai.auto_pilot import AutoPilot
from hex_territory.utils.hex_utils import HexCoordinate


class TestSelectRandomBucket:

    def test_proportional_sampling(self):
        rng = random.Random(7)
        counts = [0] * 6
        for _ in range(6000):
            counts[select_random_bucket([0, 2, 0, 0, 0, 1], rng)] += 1

        assert counts[0] == counts[2] == counts[3] == counts[4] == 0
        assert 1.7 < counts[1] / counts[5] < 2.3

    def test_single_positive_bucket(self):
        rng = random.Random(0)
        assert all(select_random_bucket([0, 0, 0, 5, 0, 0], rng) == 3 for _ in range(50))

    def test_no_weight_means_no_choice(self):
        assert select_random_bucket([0, 0, 0, 0, 0, 0]) is None
        assert select_random_bucket([]) is None


class TestWeightedRandomStrategy:

    def test_only_capturable_directions_are_chosen(self):
        board = GameBoard(2)
        player = Player(PlayerColor.RED, is_ai=True)
        board.spawn(player, HexCoordinate(0, -2))
        strategy = WeightedRandomStrategy(random.Random(3))

        for _ in range(30):
            direction = strategy.choose_direction(player, board)
            assert board.capture_weight(player, direction) > 0
        assert len(strategy.decision_history) == 30

    def test_no_capturable_direction(self):
        board = GameBoard(0)
        player = Player(PlayerColor.RED, is_ai=True)
        board.spawn_random(player)
        strategy = WeightedRandomStrategy(random.Random(3))

        assert strategy.choose_direction(player, board) is None
        assert strategy.decision_history == []


class TestAutoPilot:

    @pytest.fixture
    def selector(self):
        return DirectionSelector(Player(PlayerColor.BLUE, is_ai=True))

    def test_phase_sequence(self, selector):
        commits = []
        pilot = AutoPilot(selector, Direction.SOUTH, lambda: commits.append(selector.direction),
                          think_ticks=2, confirm_ticks=2)

        phases = [pilot.tick() for _ in range(8)]

        assert phases == [
            PilotPhase.THINKING, PilotPhase.THINKING,
            PilotPhase.ALIGNING, PilotPhase.ALIGNING, PilotPhase.ALIGNING,
            PilotPhase.CONFIRMING, PilotPhase.CONFIRMING,
            PilotPhase.DONE,
        ]
        assert commits == [Direction.SOUTH]

    def test_rotates_clockwise_only(self, selector):
        selector.rotate(Rotation.CW)
        pilot = AutoPilot(selector, Direction.NORTH, lambda: None, think_ticks=0, confirm_ticks=0)
        seen = []
        while not pilot.is_done:
            pilot.tick()
            seen.append(selector.direction)

        assert seen == [
            Direction.SOUTH_EAST, Direction.SOUTH, Direction.SOUTH_WEST,
            Direction.NORTH_WEST, Direction.NORTH, Direction.NORTH,
        ]

    def test_commits_once_and_cancels_timer(self, selector):
        scheduler = ManualScheduler()
        commits = []
        pilot = AutoPilot(selector, Direction.SOUTH, lambda: commits.append(1),
                          think_ticks=2, confirm_ticks=2)
        pilot.start(scheduler, 100)

        assert scheduler.run_until_idle() == 8
        assert commits == [1]
        assert scheduler.is_idle

        pilot.tick()
        assert commits == [1]

    def test_already_aligned_commits_on_first_tick(self, selector):
        commits = []
        pilot = AutoPilot(selector, Direction.NORTH, lambda: commits.append(1),
                          think_ticks=0, confirm_ticks=0)
        assert pilot.tick() == PilotPhase.DONE
        assert commits == [1]

    def test_cancel_stops_without_committing(self, selector):
        scheduler = ManualScheduler()
        commits = []
        pilot = AutoPilot(selector, Direction.SOUTH, lambda: commits.append(1))
        pilot.start(scheduler)
        scheduler.advance(3)

        pilot.cancel()
        scheduler.advance(20)

        assert commits == []
        assert pilot.is_done
        assert scheduler.is_idle

    def test_cannot_start_twice(self, selector):
        scheduler = ManualScheduler()
        pilot = AutoPilot(selector, Direction.NORTH, lambda: None)
        pilot.start(scheduler)
        with pytest.raises(GameStateError):
            pilot.start(scheduler)
