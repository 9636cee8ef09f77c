#!/usr/bin/env python3
"""
Monty Hall Simulation - Main Entry Point

- Play many paired rounds of the Monty Hall game
- Compare the stay and switch strategies
- Optionally save charts of the results
"""

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger

# Configure logging
logger.remove()
logger.add(
    sys.stderr,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level="INFO"
)


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file"""
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "config.yaml"

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return {}

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    logger.info(f"Loaded configuration from {config_path}")
    return config


def run_simulation(
    num_games: Optional[int] = None,
    random_seed: Optional[int] = None,
    output_dir: str = "output",
    config_path: str = None,
    charts: bool = False
) -> dict:
    """
    Run the Monty Hall simulation

    Args:
        num_games: Number of games (overrides the config file)
        random_seed: Random seed (overrides the config file)
        output_dir: Directory for chart files
        config_path: Path to configuration file
        charts: Save win-rate and convergence charts

    Returns:
        Dictionary with simulation results
    """
    from .simulation import MontyHallSimulator
    from .visualizer import Visualizer

    config = load_config(config_path)
    sim_config = config.get("simulation", {})

    if num_games is None:
        num_games = sim_config.get("num_games", 100)
    if random_seed is None:
        random_seed = sim_config.get("random_seed")

    logger.info("=" * 70)
    logger.info("  Monty Hall Simulation")
    logger.info("=" * 70)
    logger.info(f"  Run Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"  Games: {num_games:,}")
    logger.info(f"  Seed: {random_seed}")
    logger.info("=" * 70)

    simulator = MontyHallSimulator(
        num_games=num_games,
        random_seed=random_seed,
        confidence_level=sim_config.get("confidence_level", 0.95)
    )

    result = simulator.play_n_games()
    results = {"simulation": result, "summary": result.summary()}

    if charts:
        viz_config = config.get("visualization", {})
        visualizer = Visualizer(
            output_dir=os.path.join(output_dir, "charts"),
            dpi=viz_config.get("dpi", 150),
            figsize=tuple(viz_config.get("figure_size", [12, 8]))
        )
        results["charts"] = visualizer.plot_all(result)
        logger.info(f"  Charts saved to: {visualizer.output_dir}")

    return results


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Monty Hall Simulation - compare the stay and switch strategies"
    )

    parser.add_argument(
        "--games", "-n",
        type=int,
        default=None,
        help="Number of games to simulate (default: from config, else 100)"
    )

    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible runs"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default="output",
        help="Output directory for charts (default: output)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to configuration file (default: config/config.yaml)"
    )

    parser.add_argument(
        "--charts",
        action="store_true",
        help="Save win rate and convergence charts"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")

    try:
        run_simulation(
            num_games=args.games,
            random_seed=args.seed,
            output_dir=args.output,
            config_path=args.config,
            charts=args.charts
        )

        return 0

    except KeyboardInterrupt:
        logger.info("\nSimulation cancelled by user")
        return 1

    except Exception as e:
        logger.exception(f"Simulation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
