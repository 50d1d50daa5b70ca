"""Find a robot's way out of a rectangular labyrinth, with an array-backed queue."""

__version__ = "0.1.0"