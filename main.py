"""Main entry point for the reef simulation.

This module provides command-line options to run the simulation:
- Viewer mode (default): pygame window, one frame per step
- Headless mode: Stats-only, as fast as possible
"""

import argparse
import logging
import sys

from reef.config.simulation import DEFAULT_DEPTH, DEFAULT_STATS_INTERVAL, DEFAULT_WIDTH, LONG_RUN_STEPS
from reef.config.simulation_config import DisplayConfig, GridConfig, SimulationConfig
from reef.exceptions import ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Turn parsed arguments into a validated SimulationConfig."""
    display = DisplayConfig()
    if args.delay_ms is not None:
        display.step_delay_ms = args.delay_ms
    config = SimulationConfig(
        grid=GridConfig(depth=args.depth, width=args.width),
        seed=args.seed,
        max_steps=args.steps,
        stats_interval=args.stats_interval,
        display=display,
    )
    return config.validate(strict=args.strict_config)


def run_headless(config: SimulationConfig, export_stats=None) -> int:
    """Run the simulation in headless mode (no visualization).

    Args:
        config: Validated simulation configuration
        export_stats: Optional filename to export JSON stats

    Returns:
        Number of steps run
    """
    from reef.simulation.engine import SimulationEngine

    engine = SimulationEngine(config)
    return engine.run_headless(
        max_steps=engine.config.max_steps,
        stats_interval=engine.config.stats_interval,
        export_json=export_stats,
    )


def run_viewer(config: SimulationConfig) -> int:
    """Run the simulation in a pygame window."""
    from reef.simulation.engine import SimulationEngine
    from rendering.viewer import run_viewer as _run_viewer

    engine = SimulationEngine(config)
    steps = _run_viewer(engine, engine.config.max_steps)
    engine.print_stats()
    return steps


def main(argv=None) -> int:
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Reef Ecosystem Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the viewer (default)
  python main.py

  # Headless long run with stats every 50 steps
  python main.py --headless --steps 700 --stats-interval 50

  # Small reproducible run exported to JSON
  python main.py --headless --depth 40 --width 60 --seed 42 --export-stats results.json
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no UI, stats only)"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=LONG_RUN_STEPS,
        help=f"Maximum steps to simulate (default: {LONG_RUN_STEPS})",
    )
    parser.add_argument(
        "--depth", type=int, default=DEFAULT_DEPTH, help=f"Field rows (default: {DEFAULT_DEPTH})"
    )
    parser.add_argument(
        "--width", type=int, default=DEFAULT_WIDTH, help=f"Field columns (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=DEFAULT_STATS_INTERVAL,
        help=f"Print stats every N steps in headless mode (default: {DEFAULT_STATS_INTERVAL})",
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export stats and population history to a JSON file (headless mode)",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Delay between steps in the viewer, in milliseconds",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--strict-config",
        action="store_true",
        help="Fail on invalid settings instead of falling back to defaults",
    )

    args = parser.parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.headless:
        logger.info("Starting headless simulation...")
        logger.info(
            "Configuration: %dx%d field, %d steps, stats every %d steps",
            config.grid.depth,
            config.grid.width,
            config.max_steps,
            config.stats_interval,
        )
        run_headless(config, export_stats=args.export_stats)
    else:
        run_viewer(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
