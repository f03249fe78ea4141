"""Simulation systems hosted by scenes."""
