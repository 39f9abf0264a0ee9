"""Lays out the current screen and routes pointer input to the game."""

from __future__ import annotations

import random

from glitchbomb.screens import Screen, TextLine, screen_for
from glitchbomb.states import GameState
from glitchbomb.systems import Game, stat_text
from glitchbomb.widgets import PULL_ORB, QUIT, RESTART, START, Button, Interaction

_LINE_SPACING = 1.2

_TRANSITIONS = {
    START: (frozenset({GameState.MENU}), GameState.PLAYING),
    QUIT: (frozenset({GameState.PLAYING}), GameState.MENU),
    RESTART: (frozenset({GameState.GAME_WON, GameState.GAME_LOST}), GameState.MENU),
}


def _item_height(item: TextLine | Button) -> float:
    if isinstance(item, Button):
        return item.height
    return item.font_size * _LINE_SPACING


class Interface:
    """The game together with the screen shown for its current state."""

    def __init__(self, width: int = 1280, height: int = 720, rng: random.Random | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.game = Game(rng)
        self._screen = self._build(self.game.state)

    def screen(self) -> Screen:
        """The screen currently shown."""
        return self._screen

    def _build(self, state: GameState) -> Screen:
        screen = screen_for(state)
        heights = [_item_height(item) for item in screen.items]
        total = sum(
            item.margin_top + h + item.margin_bottom for item, h in zip(screen.items, heights)
        )
        y = (self.height - total) / 2
        for item, h in zip(screen.items, heights):
            y += item.margin_top
            item.y = y
            if isinstance(item, Button):
                item.x = (self.width - item.width) / 2
            y += h + item.margin_bottom
        return screen

    def pointer_at(self, x: float, y: float, pressed: bool = False) -> str | None:
        """Update buttons for the pointer; return the action of a newly pressed button."""
        triggered = None
        for item in self._screen.items:
            if not isinstance(item, Button):
                continue
            if item.contains(x, y):
                interaction = Interaction.PRESSED if pressed else Interaction.HOVERED
            else:
                interaction = Interaction.NONE
            if item.set_interaction(interaction) and interaction is Interaction.PRESSED:
                self.press(item.action)
                triggered = item.action
        return triggered

    def press(self, action: str) -> bool:
        """Carry out a button action; return False if it does nothing in this state."""
        state = self.game.state
        if action == PULL_ORB:
            if state is not GameState.PLAYING:
                return False
            self.game.pull_orb()
            return True
        try:
            allowed, target = _TRANSITIONS[action]
        except KeyError:
            raise ValueError(f"unknown action: {action!r}") from None
        if state not in allowed:
            return False
        self.game.request_state(target)
        return True

    def tick(self) -> GameState:
        """Run one frame: apply state changes, rebuild the screen, refresh stats."""
        previous = self.game.state
        current = self.game.update()
        if current is not previous:
            self._screen = self._build(current)
        player = self.game.player
        if player is not None:
            for item in self._screen.items:
                if isinstance(item, TextLine) and item.stat is not None:
                    item.text = stat_text(player, item.stat)
        return current