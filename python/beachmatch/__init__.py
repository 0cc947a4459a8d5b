"""Board-simulation core for a beach-themed tile-matching puzzle."""

__version__ = "0.1.0"
