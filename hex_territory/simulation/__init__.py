"""
Hex Territory Simulation Package

Plays all-automated games headlessly for statistics.
"""

from .simulator import (
    SimulationConfig,
    SimulationResult,
    TerritorySimulator,
    create_quick_simulation,
    run_simulation_batch,
    analyze_simulation_results
)

__all__ = [
    'SimulationConfig',
    'SimulationResult',
    'TerritorySimulator',
    'create_quick_simulation',
    'run_simulation_batch',
    'analyze_simulation_results'
]
