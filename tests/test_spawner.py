from __future__ import annotations

import random

import pytest

from stardefender.entities import Enemy
from stardefender.spawner import EnemyFireTimer, MysteryShipTimer, spawn_mystery_ship


class ForbiddenRandom(random.Random):
    def randrange(self, *args, **kwargs):  # type: ignore[override]
        raise AssertionError("random source must not be consulted")


def _row(count: int) -> list[Enemy]:
    return [Enemy(x=i * 50, y=50, row=0) for i in range(count)]


def test_empty_formation_never_picks_a_shooter() -> None:
    timer = EnemyFireTimer(rng=ForbiddenRandom())
    assert timer.maybe_fire([], now_ms=50_000) is None
    assert timer.last_fire_ms == 0


def test_fire_waits_for_interval_to_elapse() -> None:
    timer = EnemyFireTimer(interval_ms=1000, rng=random.Random(1))
    enemies = _row(3)
    assert timer.maybe_fire(enemies, now_ms=1000) is None
    shot = timer.maybe_fire(enemies, now_ms=1001)
    assert shot is not None
    assert shot.enemy_fire
    assert timer.last_fire_ms == 1001
    assert timer.maybe_fire(enemies, now_ms=2001) is None
    assert timer.maybe_fire(enemies, now_ms=2002) is not None


def test_shooter_choice_comes_from_injected_random() -> None:
    enemies = _row(10)
    expected = enemies[random.Random(42).randrange(10)]
    shot = EnemyFireTimer(rng=random.Random(42)).maybe_fire(enemies, now_ms=5000)
    assert shot is not None
    assert shot.x == expected.x + expected.width / 2 - shot.width / 2
    assert shot.y == expected.y + expected.height


@pytest.mark.parametrize("seed", range(5))
def test_shooter_is_always_a_current_enemy(seed: int) -> None:
    enemies = _row(2)
    shot = EnemyFireTimer(rng=random.Random(seed)).maybe_fire(enemies, now_ms=5000)
    assert shot is not None
    assert shot.x in {10, 60}


def test_spawn_request_keeps_active_ship() -> None:
    first = spawn_mystery_ship(None, canvas_width=800)
    second = spawn_mystery_ship(first, canvas_width=800)
    assert second is first


def test_spawn_request_replaces_inactive_ship() -> None:
    first = spawn_mystery_ship(None, canvas_width=800)
    first.active = False
    second = spawn_mystery_ship(first, canvas_width=800, speed=7)
    assert second is not first
    assert second.active
    assert second.speed == 7
    assert second.x == -50


def test_mystery_timer_cadence() -> None:
    timer = MysteryShipTimer(interval_ms=10_000)
    assert not timer.due(0)
    assert not timer.due(9_999)
    assert timer.due(10_000)
    assert not timer.due(15_000)
    assert timer.due(20_001)
