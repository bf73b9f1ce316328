"""Collision tests and the scoring rules attached to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .entities import Enemy, MysteryShip, Player, Projectile
from .log import get_logger
from .utils import Box

logger = get_logger(__name__)

MYSTERY_SHIP_BONUS = 1000


@dataclass(slots=True)
class HitResult:
    """Survivors and points after player shots meet the formation."""

    projectiles: list[Projectile]
    enemies: list[Enemy]
    points: int = 0
    kills: int = 0


@dataclass(slots=True)
class MysteryHitResult:
    """Survivors and points after player shots meet the mystery ship."""

    projectiles: list[Projectile]
    points: int = 0
    hit: bool = False


def overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap; boxes that only share an edge do not collide."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def enemy_points(enemy: Enemy, total_rows: int) -> int:
    """Score for destroying an enemy; the top row is worth the most."""
    return (total_rows - enemy.row) * 10


def resolve_enemy_hits(
    projectiles: Sequence[Projectile],
    enemies: Sequence[Enemy],
    total_rows: int,
) -> HitResult:
    """Pair player shots with enemies and build the retained collections.

    Each shot destroys at most the first enemy it overlaps in formation
    order, and each enemy is destroyed at most once.
    """
    destroyed: set[int] = set()
    kept_projectiles: list[Projectile] = []
    points = 0

    for projectile in projectiles:
        box = projectile.box
        target = next(
            (idx for idx, enemy in enumerate(enemies) if idx not in destroyed and overlaps(box, enemy.box)),
            None,
        )
        if target is None:
            kept_projectiles.append(projectile)
            continue
        destroyed.add(target)
        victim = enemies[target]
        points += enemy_points(victim, total_rows)
        logger.debug("Enemy in row %d destroyed at (%.0f, %.0f)", victim.row, victim.x, victim.y)

    kept_enemies = [enemy for idx, enemy in enumerate(enemies) if idx not in destroyed]
    return HitResult(projectiles=kept_projectiles, enemies=kept_enemies, points=points, kills=len(destroyed))


def player_is_hit(enemy_projectiles: Iterable[Projectile], player: Player) -> bool:
    """Return whether any enemy shot overlaps the player ship."""
    box = player.box
    return any(overlaps(projectile.box, box) for projectile in enemy_projectiles)


def formation_breached(enemies: Iterable[Enemy], player: Player) -> bool:
    """Return whether any enemy's bottom edge has reached the player's line."""
    return any(enemy.y + enemy.height >= player.y for enemy in enemies)


def resolve_mystery_hit(
    projectiles: Sequence[Projectile],
    ship: MysteryShip | None,
    bonus: int = MYSTERY_SHIP_BONUS,
) -> MysteryHitResult:
    """Let the first overlapping shot take down an active mystery ship."""
    if ship is None or not ship.active:
        return MysteryHitResult(projectiles=list(projectiles))

    box = ship.box
    kept: list[Projectile] = []
    hit = False
    for projectile in projectiles:
        if not hit and overlaps(projectile.box, box):
            hit = True
            continue
        kept.append(projectile)

    if not hit:
        return MysteryHitResult(projectiles=kept)
    ship.active = False
    logger.info("Mystery ship destroyed (+%d)", bonus)
    return MysteryHitResult(projectiles=kept, points=bonus, hit=True)
