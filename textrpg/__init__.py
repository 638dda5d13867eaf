"""Building blocks for a turn-based text role-playing game."""

__version__ = "0.1.0"