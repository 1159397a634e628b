"""Configuration package for the reef simulation.

Constants are grouped by concern:

- simulation.py: grid size, spawn probabilities, clock and weather constants
- species.py: per-species life-history constants
- display.py: colours and window sizes for the pygame viewer
- simulation_config.py: dataclasses that bundle the above for one run
"""
