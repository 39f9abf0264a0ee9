"""Glitch Bomb, a push-your-luck orb-pulling game with a pygame window."""

__version__ = "0.1.0"