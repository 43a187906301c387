#!/usr/bin/env python3
"""
Hex Territory Batch Simulator

Plays all-automated games and prints how the players fared.

Usage:
    python3 simulate_games.py [num_games] [num_ai] [radius] [--render PATH]
    python3 simulate_games.py --help

Examples:
    python3 simulate_games.py
    python3 simulate_games.py 50 3 4
    python3 simulate_games.py 1 6 6 --render final_board.png
"""

import sys
from typing import List, Optional, Tuple

from hex_territory.core.exceptions import HexTerritoryError
from hex_territory.simulation.simulator import (
    SimulationConfig, run_simulation_batch, analyze_simulation_results
)


def show_help() -> None:
    """Print usage information."""
    print(__doc__)


def parse_arguments(argv: List[str]) -> Tuple[int, int, int, Optional[str]]:
    """Split argv into (num_games, num_ai, radius, render_path)."""
    render_path = None
    positional = []

    i = 0
    while i < len(argv):
        if argv[i] == '--render':
            if i + 1 >= len(argv):
                raise ValueError("--render needs an output path")
            render_path = argv[i + 1]
            i += 2
            continue
        positional.append(argv[i])
        i += 1

    if len(positional) > 3:
        raise ValueError(f"Too many arguments: {' '.join(positional)}")

    defaults = [10, 2, 4]
    values = [int(arg) for arg in positional] + defaults[len(positional):]
    return values[0], values[1], values[2], render_path


def print_report(analysis: dict) -> None:
    print(f"Games played:    {analysis['total_games']}")
    print(f"Average turns:   {analysis['average_turns']:.1f}")
    print("Average tiles:")
    for name, tiles in sorted(analysis['average_tiles'].items(), key=lambda item: -item[1]):
        leads = analysis['leader_distribution'].get(name, 0)
        print(f"   {name:<12} {tiles:6.1f}   (top score in {leads} games)")


def main():
    """Main function."""
    if len(sys.argv) == 2 and sys.argv[1] in ['--help', '-h']:
        show_help()
        return

    try:
        num_games, num_ai, radius, render_path = parse_arguments(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print("Use --help for usage information.")
        sys.exit(1)

    try:
        config = SimulationConfig(num_ai=num_ai, board_radius=radius, random_seed=0)
        results = run_simulation_batch(num_games, config)
        print_report(analyze_simulation_results(results))

        if render_path:
            from hex_territory.render.board_renderer import render_game_to_file
            render_game_to_file(results[-1].final_state, render_path, title="Final board")
            print(f"Final board written to {render_path}")

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except HexTerritoryError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
