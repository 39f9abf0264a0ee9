"""Game rules run each frame and the state machine that drives the game."""

from __future__ import annotations

import logging
import random

from glitchbomb.orb import Orb
from glitchbomb.player import PlayerGameState
from glitchbomb.states import GameState, StatType

logger = logging.getLogger(__name__)

_STAT_FIELDS = {
    StatType.HEALTH: "health",
    StatType.POINTS: "points",
    StatType.GAME_ID: "game_id",
    StatType.MILESTONE: "milestone",
    StatType.LEVEL: "level",
    StatType.MOONROCKS: "moonrocks",
    StatType.CHEDDAH: "cheddah",
}


def stat_text(state: PlayerGameState, stat_type: StatType) -> str:
    """The text shown for one statistic."""
    if stat_type is StatType.ORBS:
        return (
            f"Orbs: H:{state.health_orb_count()} "
            f"P:{state.point_orb_count()} B:{state.bomb_orb_count()}"
        )
    return f"{stat_type.value}: {getattr(state, _STAT_FIELDS[stat_type])}"


def check_win_loss(state: PlayerGameState) -> GameState | None:
    """The state the game should move to, or None to keep playing.

    Reaching the milestone wins even if health is also zero.
    """
    if state.points >= state.milestone:
        logger.info("Player wins! Points: %d >= Milestone: %d", state.points, state.milestone)
        return GameState.GAME_WON
    if state.health == 0:
        logger.info("Player loses! Health reached zero.")
        return GameState.GAME_LOST
    return None


class Game:
    """Current game state, the queued next state and the player's state.

    A requested state takes effect at the start of the next update, as a
    frame-based state machine would apply it.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.state = GameState.MENU
        self.pending: GameState | None = None
        self.player: PlayerGameState | None = None
        self.rng = rng

    def request_state(self, state: GameState) -> None:
        """Queue a move to another state."""
        self.pending = state

    def apply_pending(self) -> bool:
        """Carry out a queued move, if any; return whether one happened."""
        if self.pending is None:
            return False
        target, self.pending = self.pending, None
        if self.state is GameState.PLAYING:
            logger.info("Cleaning up game state")
            self.player = None
        self.state = target
        if target is GameState.PLAYING:
            logger.info("Setting up game state")
            self.player = PlayerGameState()
        return True

    def update(self) -> GameState:
        """Run one frame and return the state the game is in."""
        self.apply_pending()
        if self.state is GameState.PLAYING and self.player is not None:
            outcome = check_win_loss(self.player)
            if outcome is not None:
                self.request_state(outcome)
        return self.state

    def pull_orb(self) -> Orb | None:
        """Draw an orb while playing; None if not playing or the bag is empty."""
        if self.state is not GameState.PLAYING or self.player is None:
            return None
        return self.player.pull_orb(self.rng)

    def stat_lines(self) -> list[str]:
        """Text for every statistic in display order; empty when not playing."""
        if self.player is None:
            return []
        return [stat_text(self.player, stat) for stat in StatType]