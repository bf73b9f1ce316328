"""Enemy fire scheduling and mystery-ship spawning."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence
import random

from .entities import Enemy, MysteryShip, Projectile
from .log import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class EnemyFireTimer:
    """Lets one random enemy shoot at most once per interval."""

    interval_ms: int = 1000
    last_fire_ms: float = 0
    rng: random.Random = field(default_factory=random.Random)

    def maybe_fire(self, enemies: Sequence[Enemy], now_ms: float) -> Projectile | None:
        """Return a new enemy shot when the interval has elapsed."""
        if not enemies:
            return None
        if now_ms - self.last_fire_ms <= self.interval_ms:
            return None
        shooter = enemies[self.rng.randrange(len(enemies))]
        self.last_fire_ms = now_ms
        return shooter.fire()


@dataclass(slots=True)
class MysteryShipTimer:
    """Wall-clock cadence for spawn requests when no event timer drives them."""

    interval_ms: int = 10000
    next_due_ms: float | None = None

    def due(self, now_ms: float) -> bool:
        """Return True once per elapsed interval, starting one interval in."""
        if self.next_due_ms is None:
            self.next_due_ms = now_ms + self.interval_ms
            return False
        if now_ms < self.next_due_ms:
            return False
        self.next_due_ms += self.interval_ms
        return True


def spawn_mystery_ship(current: MysteryShip | None, canvas_width: float, speed: float = 5) -> MysteryShip:
    """Return the live ship if there is one, otherwise launch a new one."""
    if current is not None and current.active:
        return current
    logger.info("Mystery ship launched")
    return MysteryShip(canvas_width=canvas_width, speed=speed)
