"""Per-species life-history constants.

Ages are in steps. Food values are the number of steps an animal can go
after a meal before it starves.
"""

# Probability that a newborn of an infected parent is born infected
INHERIT_PROBABILITY = 0.01

# --- Prey (diurnal herbivores) ---
TURTLE_BREEDING_AGE = 5
TURTLE_MAX_AGE = 50
TURTLE_BREEDING_PROBABILITY = 0.3
TURTLE_INFECTION_PROBABILITY = 0.01
TURTLE_TRANSMISSION_PROBABILITY = 0.02
TURTLE_MAX_LITTER_SIZE = 3
TURTLE_FOOD_VALUE = 30

PARROTFISH_BREEDING_AGE = 5
PARROTFISH_MAX_AGE = 40
PARROTFISH_BREEDING_PROBABILITY = 0.47
PARROTFISH_INFECTION_PROBABILITY = 0.01
PARROTFISH_TRANSMISSION_PROBABILITY = 0.02
PARROTFISH_MAX_LITTER_SIZE = 3
PARROTFISH_FOOD_VALUE = 30

CLOWNFISH_BREEDING_AGE = 5
CLOWNFISH_MAX_AGE = 40
CLOWNFISH_BREEDING_PROBABILITY = 0.47
CLOWNFISH_INFECTION_PROBABILITY = 0.01
CLOWNFISH_TRANSMISSION_PROBABILITY = 0.02
CLOWNFISH_MAX_LITTER_SIZE = 3
CLOWNFISH_FOOD_VALUE = 30

# Prey disease mortality per step, awake and asleep
PREY_DAY_DISEASE_MORTALITY = 0.2
PREY_NIGHT_DISEASE_MORTALITY = 0.1

# --- Predators (active around the clock) ---
SWORDFISH_BREEDING_AGE = 4
SWORDFISH_MAX_AGE = 150
SWORDFISH_BREEDING_PROBABILITY = 0.2
SWORDFISH_INFECTION_PROBABILITY = 0.008
SWORDFISH_TRANSMISSION_PROBABILITY = 0.015
SWORDFISH_MAX_LITTER_SIZE = 2
SWORDFISH_FOOD_VALUE = 60
SWORDFISH_DISEASE_MORTALITY = 0.08

WHITE_SHARK_BREEDING_AGE = 4
WHITE_SHARK_MAX_AGE = 300
WHITE_SHARK_BREEDING_PROBABILITY = 0.12
WHITE_SHARK_INFECTION_PROBABILITY = 0.005
WHITE_SHARK_TRANSMISSION_PROBABILITY = 0.01
WHITE_SHARK_MAX_LITTER_SIZE = 2
WHITE_SHARK_FOOD_VALUE = 120
WHITE_SHARK_DISEASE_MORTALITY = 0.05

KILLER_WHALE_BREEDING_AGE = 3
KILLER_WHALE_MAX_AGE = 500
KILLER_WHALE_BREEDING_PROBABILITY = 0.1
KILLER_WHALE_INFECTION_PROBABILITY = 0.005
KILLER_WHALE_TRANSMISSION_PROBABILITY = 0.01
KILLER_WHALE_MAX_LITTER_SIZE = 3
KILLER_WHALE_FOOD_VALUE = 180
KILLER_WHALE_DISEASE_MORTALITY = 0.05

# --- Plants ---
ALGAE_GROWTH_AGE = 1
ALGAE_MAX_AGE = 10
ALGAE_GROWTH_PROBABILITY = 0.9
ALGAE_MAX_LITTER_SIZE = 7
