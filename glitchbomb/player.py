"""The player's state during one game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, fields

from glitchbomb.orb import Orb

logger = logging.getLogger(__name__)

MAX_HEALTH = 5


def _starting_bag() -> list[Orb]:
    return [Orb.HEALTH, Orb.POINT, Orb.BOMB] * 5


def _check_amount(amount: int) -> int:
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    return amount


@dataclass
class PlayerGameState:
    """Health, score, currencies and the bag of orbs for one game."""

    health: int = MAX_HEALTH
    points: int = 0
    game_id: int = 1
    milestone: int = 15
    orbs: list[Orb] = field(default_factory=_starting_bag)
    level: int = 1
    moonrocks: int = 0
    cheddah: int = 0

    def add_health(self, amount: int) -> None:
        """Add health, never going above the maximum."""
        self.health = min(self.health + _check_amount(amount), MAX_HEALTH)

    def add_points(self, amount: int) -> None:
        self.points += _check_amount(amount)

    def add_orb(self, orb: Orb) -> None:
        self.orbs.append(orb)

    def add_moonrocks(self, amount: int) -> None:
        self.moonrocks += _check_amount(amount)

    def add_cheddah(self, amount: int) -> None:
        self.cheddah += _check_amount(amount)

    def increase_milestone(self) -> None:
        self.milestone += 1

    def level_up(self) -> None:
        self.level += 1

    def subtract_health(self, amount: int) -> None:
        """Remove health, stopping at zero."""
        self.health = max(self.health - _check_amount(amount), 0)

    def subtract_points(self, amount: int) -> None:
        self.points = max(self.points - _check_amount(amount), 0)

    def remove_orb(self, orb: Orb) -> bool:
        """Remove the first orb of this kind; return whether one was found."""
        try:
            self.orbs.remove(orb)
        except ValueError:
            return False
        return True

    def subtract_moonrocks(self, amount: int) -> None:
        self.moonrocks = max(self.moonrocks - _check_amount(amount), 0)

    def subtract_cheddah(self, amount: int) -> None:
        self.cheddah = max(self.cheddah - _check_amount(amount), 0)

    def is_dead(self) -> bool:
        return self.health == 0

    def is_at_max_health(self) -> bool:
        return self.health == MAX_HEALTH

    def has_orb(self, orb: Orb) -> bool:
        return orb in self.orbs

    def orb_count(self, orb: Orb) -> int:
        return self.orbs.count(orb)

    def total_orb_count(self) -> int:
        return len(self.orbs)

    def health_orb_count(self) -> int:
        return self.orb_count(Orb.HEALTH)

    def point_orb_count(self) -> int:
        return self.orb_count(Orb.POINT)

    def bomb_orb_count(self) -> int:
        return self.orb_count(Orb.BOMB)

    def has_moonrocks(self, count: int) -> bool:
        return self.moonrocks >= count

    def has_cheddah(self, count: int) -> bool:
        return self.cheddah >= count

    def reset_to_defaults(self) -> None:
        """Put every field back to the value a new game starts with."""
        fresh = PlayerGameState()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))

    def pull_orb(self, rng: random.Random | None = None) -> Orb | None:
        """Draw a random orb from the bag and apply its effect.

        Returns the orb drawn, or None if the bag is empty.
        """
        if not self.orbs:
            return None
        chooser = rng if rng is not None else random
        orb = self.orbs.pop(chooser.randrange(len(self.orbs)))

        if orb is Orb.HEALTH:
            if not self.is_at_max_health():
                self.add_health(1)
                logger.info("Consumed Health orb: +1 health (now %d)", self.health)
            else:
                logger.info("Consumed Health orb: no effect (health already at max)")
        elif orb is Orb.POINT:
            self.add_points(5)
            logger.info("Consumed Point orb: +5 points")
        else:
            self.subtract_health(2)
            logger.info("Consumed Bomb orb: -2 health")
        return orb