"""Tile-based puzzle game in a pygame window: collect every egg and lead the frog to the exit."""

__version__ = "1.0.0"