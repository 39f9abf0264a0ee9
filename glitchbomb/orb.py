"""The kinds of orb a player can draw from the bag."""

from enum import Enum


class Orb(Enum):
    """An orb in the player's bag."""

    HEALTH = "health"
    POINT = "point"
    BOMB = "bomb"