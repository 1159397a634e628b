"""Console and JSON reports of a running reef.

The JSON file is a one-way report of counts and history. It cannot be loaded
back to resume a run.
"""

import json
import logging
import time
from typing import TYPE_CHECKING

from reef.species import TRACKED_SPECIES

if TYPE_CHECKING:
    from reef.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


def format_population_line(counts: dict) -> str:
    """One-line population summary, e.g. ``Turtle: 12 Algae: 40``."""
    return " ".join(
        f"{species.label}: {counts.get(species.value, 0)}" for species in TRACKED_SPECIES
    )


def print_simulation_stats(engine: "SimulationEngine", start_time: float) -> None:
    """Print current simulation statistics to console.

    Args:
        engine: The simulation engine instance
        start_time: Wall-clock time when the run started
    """
    stats = engine.get_stats()
    elapsed_time = time.time() - start_time
    width = engine.config.display.separator_width

    print("-" * width)
    print(
        f"Step: {stats['step']} | Time: {stats['time']} "
        f"({'day' if stats['is_daytime'] else 'night'}) | Weather: {stats['weather']}"
    )
    print(f"Wall time: {elapsed_time:.1f}s")
    print("-" * width)

    print(f"Population ({stats['total_population']}): {format_population_line(stats['counts'])}")
    print(f"Births (Total):  {stats['total_births']}")

    deaths = {cause: count for cause, count in stats["deaths_by_cause"].items() if count}
    if deaths:
        causes_str = ", ".join(f"{k}: {v}" for k, v in deaths.items())
        print(f"Deaths ({stats['total_deaths']}): {causes_str}")

    if stats["extinctions"]:
        gone = ", ".join(f"{e['species']}@{e['step']}" for e in stats["extinctions"])
        print(f"Extinctions:     {gone}")

    print("-" * width)


def export_stats_json(engine: "SimulationEngine", filename: str, start_time: float) -> None:
    """Export simulation statistics, including the population history, to JSON.

    Args:
        engine: The simulation engine instance
        filename: Output filename
        start_time: Wall-clock time when the run started
    """
    stats = engine.get_stats()
    stats["elapsed_time"] = time.time() - start_time
    stats["history"] = list(engine.tracker.history)

    try:
        with open(filename, "w") as f:
            json.dump(stats, f, indent=2)
        logger.info(f"Exported stats to {filename}")
    except OSError as e:
        logger.error(f"Failed to export stats: {e}")
