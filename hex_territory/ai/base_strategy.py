"""Direction selection strategies for automated players."""

import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..core.enums import Direction
from ..core.constants import AI_DIRECTION_BUCKETS
from ..entities.player import Player
from ..game.board import GameBoard


def select_random_bucket(weights: Sequence[float], rng=None) -> Optional[int]:
    """Pick an index with probability proportional to its weight.

    Zero-weight buckets are never picked. Returns None when no bucket has weight.
    """
    rng = rng or random
    total = sum(weight for weight in weights if weight > 0)
    if total <= 0:
        return None

    threshold = rng.random() * total
    cumulative = 0.0
    last_positive = None
    for index, weight in enumerate(weights):
        if weight <= 0:
            continue
        cumulative += weight
        last_positive = index
        if threshold < cumulative:
            return index
    # float rounding at the upper edge
    return last_positive


class BaseStrategy(ABC):
    """Base class for automated direction choice."""

    def __init__(self, strategy_name: str):
        self.strategy_name = strategy_name
        self.decision_history: List[Direction] = []

    @abstractmethod
    def choose_direction(self, player: Player, board: GameBoard) -> Optional[Direction]:
        """Pick the direction `player` should capture in, or None if nothing is capturable."""
        pass

    def _record_decision(self, direction: Optional[Direction]) -> None:
        if direction is not None:
            self.decision_history.append(direction)


class WeightedRandomStrategy(BaseStrategy):
    """Chooses a direction with probability proportional to how many tiles it captures."""

    def __init__(self, rng=None):
        super().__init__("weighted_random")
        self.rng = rng or random

    def choose_direction(self, player: Player, board: GameBoard) -> Optional[Direction]:
        weights = board.capture_weights(player)
        index = select_random_bucket(weights, self.rng)
        direction = AI_DIRECTION_BUCKETS[index] if index is not None else None
        self._record_decision(direction)
        return direction
