"""Pygame rendering for the reef: grid drawing and the interactive viewer."""
