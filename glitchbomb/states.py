"""Top-level game states and the statistics shown while playing."""

from enum import Enum


class GameState(Enum):
    """The screen the game is on. The game starts in MENU."""

    MENU = "menu"
    PLAYING = "playing"
    GAME_WON = "game_won"
    GAME_LOST = "game_lost"


class StatType(Enum):
    """A statistic shown on the playing screen, valued by its label.

    Members are declared in the order they are displayed.
    """

    HEALTH = "Health"
    POINTS = "Points"
    GAME_ID = "Game ID"
    MILESTONE = "Milestone"
    ORBS = "Orbs"
    LEVEL = "Level"
    MOONROCKS = "Moonrocks"
    CHEDDAH = "Cheddah"