"""Grid, initial population, clock and weather configuration constants."""

# Default grid dimensions, used whenever a non-positive size is requested
DEFAULT_DEPTH = 80
DEFAULT_WIDTH = 120

# Length of a "long" run in steps
LONG_RUN_STEPS = 700

# Print stats every N steps in headless mode
DEFAULT_STATS_INTERVAL = 50

# Per-cell spawn probabilities, rolled independently in this order; the first
# species whose roll succeeds occupies the cell, otherwise it stays empty
SPAWN_PROBABILITIES = {
    "swordfish": 0.01,
    "turtle": 0.14,
    "parrotfish": 0.145,
    "white_shark": 0.03,
    "killer_whale": 0.008,
    "clownfish": 0.145,
    "algae": 0.5,
}

# Clock: the simulation starts at 06:00 and each step is 20 minutes
CLOCK_START_HOUR = 6
CLOCK_START_MINUTE = 0
CLOCK_STEP_MINUTES = 20
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

# Daytime is strictly between these hours (05:00 < hour < 20:00)
NIGHT_TIME = 5
DAY_TIME = 20

# Weather duration range in steps (inclusive)
WEATHER_MIN_DURATION = 20
WEATHER_MAX_DURATION = 40

# Weather multipliers (everything not listed is neutral)
FOG_HUNTING_MODIFIER = 0.9
FOG_FEEDING_MODIFIER = 0.95
FOG_PLANT_GROWTH_MODIFIER = 0.9
COLD_PREDATOR_MOVING_MODIFIER = 0.8
COLD_PREY_MOVING_MODIFIER = 0.95
COLD_PLANT_GROWTH_MODIFIER = 0.8
