"""Pytest configuration and fixtures for reef tests."""

import random

import pytest


class FixedRandom(random.Random):
    """A Random whose ``random()`` always returns the same value.

    ``randint`` returns ``randint_value`` when one is given. Everything built on
    ``random()`` (shuffle, choice, randrange) stays deterministic, and ``draws``
    counts the calls to it.
    """

    def __init__(self, value=0.0, randint_value=None):
        super().__init__(0)
        self.value = value
        self.randint_value = randint_value
        self.draws = 0

    def random(self):
        self.draws += 1
        return self.value

    def randint(self, a, b):
        if self.randint_value is None:
            return super().randint(a, b)
        return max(a, min(b, self.randint_value))


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def fixed_rng():
    """Factory for RNGs whose draws are forced to a value."""
    return FixedRandom


@pytest.fixture
def make_context():
    """Factory for a StepContext with a chosen hour and weather."""
    from reef.population_tracker import PopulationTracker
    from reef.simulation.step_context import StepContext
    from reef.time_system import ClockSystem
    from reef.weather_system import Weather, WeatherSystem

    def _make(rng, hour=12, weather=Weather.CLEAR):
        clock = ClockSystem(hour=hour)
        weather_system = WeatherSystem(rng)
        weather_system.set_weather(weather)
        return StepContext(rng=rng, clock=clock, weather=weather_system, tracker=PopulationTracker())

    return _make


@pytest.fixture
def simulation_engine():
    """Setup a small simulation engine for testing with deterministic seed."""
    from reef.config.simulation_config import SimulationConfig
    from reef.simulation.engine import SimulationEngine

    return SimulationEngine(SimulationConfig.small(), seed=42)
