"""AI decision making system."""

from .base_strategy import BaseStrategy, WeightedRandomStrategy, select_random_bucket
from .auto_pilot import AutoPilot

__all__ = [
    "BaseStrategy",
    "WeightedRandomStrategy",
    "select_random_bucket",
    "AutoPilot"
]
