"""Simulation loop: the engine, per-step context and diagnostics."""

from reef.simulation.engine import SimulationEngine, StepResult
from reef.simulation.step_context import StepContext

__all__ = [
    "SimulationEngine",
    "StepContext",
    "StepResult",
]
