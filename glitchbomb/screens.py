"""The content of each screen: text lines and buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from glitchbomb.player import PlayerGameState
from glitchbomb.states import GameState, StatType
from glitchbomb.systems import stat_text
from glitchbomb.widgets import (
    BLACK,
    GREEN_PALETTE,
    GREY_PALETTE,
    PULL_ORB,
    QUIT,
    RESTART,
    START,
    WHITE,
    Button,
    Color,
)


@dataclass
class TextLine:
    """A line of text; stat lines are refreshed from the player's state."""

    text: str
    font_size: float
    color: Color = WHITE
    margin_top: float = 0.0
    margin_bottom: float = 0.0
    stat: StatType | None = None
    y: float = 0.0


@dataclass
class Screen:
    """Everything shown in one game state, top to bottom."""

    state: GameState
    items: list[Union[TextLine, Button]] = field(default_factory=list)
    background: Color = BLACK


def menu_screen() -> Screen:
    return Screen(
        GameState.MENU,
        [
            TextLine("GLITCH BOMB", 64.0, margin_bottom=20.0),
            Button("START", START, GREY_PALETTE, margin_top=20.0),
        ],
    )


def playing_screen() -> Screen:
    fresh = PlayerGameState()
    stats = list(StatType)
    lines = [
        TextLine(
            stat_text(fresh, stat),
            20.0,
            margin_bottom=30.0 if stat is stats[-1] else 5.0,
            stat=stat,
        )
        for stat in stats
    ]
    return Screen(
        GameState.PLAYING,
        [
            *lines,
            Button("PULL ORB", PULL_ORB, GREEN_PALETTE, margin_bottom=20.0),
            Button("QUIT", QUIT, GREY_PALETTE),
        ],
    )


def _end_screen(state: GameState, title: str, color: Color, message: str, label: str) -> Screen:
    return Screen(
        state,
        [
            TextLine(title, 72.0, color, margin_bottom=20.0),
            TextLine(message, 24.0, margin_bottom=30.0),
            Button(label, RESTART, GREY_PALETTE),
        ],
    )


def game_won_screen() -> Screen:
    return _end_screen(
        GameState.GAME_WON,
        "YOU WIN!",
        Color(0.0, 0.8, 0.0),
        "Congratulations! You reached the milestone!",
        "PLAY AGAIN",
    )


def game_lost_screen() -> Screen:
    return _end_screen(
        GameState.GAME_LOST,
        "GAME OVER",
        Color(0.8, 0.0, 0.0),
        "Your health reached zero!",
        "TRY AGAIN",
    )


_BUILDERS: dict[GameState, Callable[[], Screen]] = {
    GameState.MENU: menu_screen,
    GameState.PLAYING: playing_screen,
    GameState.GAME_WON: game_won_screen,
    GameState.GAME_LOST: game_lost_screen,
}


def screen_for(state: GameState) -> Screen:
    """A freshly built screen for the given state."""
    return _BUILDERS[state]()