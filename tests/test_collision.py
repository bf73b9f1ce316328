from __future__ import annotations

from stardefender.collision import (
    enemy_points,
    formation_breached,
    overlaps,
    player_is_hit,
    resolve_enemy_hits,
    resolve_mystery_hit,
)
from stardefender.entities import Enemy, MysteryShip, Player, Projectile
from stardefender.utils import Box


def test_overlap_is_strict_on_every_edge() -> None:
    target = Box(0, 0, 40, 40)
    assert overlaps(Box(10, 10, 20, 40), target)
    assert not overlaps(Box(40, 0, 20, 40), target)
    assert not overlaps(Box(-20, 0, 20, 40), target)
    assert not overlaps(Box(0, 40, 20, 40), target)
    assert not overlaps(Box(0, -40, 20, 40), target)


def test_row_values() -> None:
    assert [enemy_points(Enemy(x=0, y=0, row=row), total_rows=3) for row in range(3)] == [30, 20, 10]


def test_hit_removes_projectile_and_enemy() -> None:
    enemy = Enemy(x=0, y=0, row=0)
    result = resolve_enemy_hits([Projectile(10, 10, 5)], [enemy], total_rows=3)
    assert result.enemies == []
    assert result.projectiles == []
    assert result.points == 30
    assert result.kills == 1


def test_touching_projectile_is_not_a_hit() -> None:
    enemy = Enemy(x=0, y=0, row=0)
    shot = Projectile(40, 10, 5)
    result = resolve_enemy_hits([shot], [enemy], total_rows=3)
    assert result.enemies == [enemy]
    assert result.projectiles == [shot]
    assert result.points == 0


def test_multiple_hits_in_one_pass_do_not_skip_neighbours() -> None:
    enemies = [Enemy(x=0, y=0, row=2), Enemy(x=50, y=0, row=1), Enemy(x=100, y=0, row=0)]
    shots = [Projectile(10, 10, 5), Projectile(60, 10, 5), Projectile(300, 10, 5)]
    result = resolve_enemy_hits(shots, enemies, total_rows=3)
    assert result.enemies == [enemies[2]]
    assert result.projectiles == [shots[2]]
    assert result.points == 10 + 20
    assert result.kills == 2


def test_one_shot_destroys_a_single_enemy() -> None:
    enemies = [Enemy(x=0, y=0, row=0), Enemy(x=30, y=0, row=0)]
    result = resolve_enemy_hits([Projectile(25, 10, 5)], enemies, total_rows=3)
    assert result.enemies == [enemies[1]]
    assert result.points == 30


def test_second_shot_on_a_destroyed_enemy_survives() -> None:
    enemy = Enemy(x=0, y=0, row=1)
    shots = [Projectile(5, 10, 5), Projectile(15, 10, 5)]
    result = resolve_enemy_hits(shots, [enemy], total_rows=3)
    assert result.enemies == []
    assert result.projectiles == [shots[1]]
    assert result.points == 20


def test_enemy_shot_hits_player() -> None:
    player = Player(x=100, y=480)
    assert player_is_hit([Projectile(110, 470, 3, enemy_fire=True)], player)
    assert not player_is_hit([Projectile(110, 440, 3, enemy_fire=True)], player)
    assert not player_is_hit([], player)


def test_formation_breach_is_an_arrival_check() -> None:
    player = Player(x=700, y=480)
    assert formation_breached([Enemy(x=0, y=440, row=0)], player)
    assert not formation_breached([Enemy(x=0, y=439, row=0)], player)


def test_mystery_ship_hit_awards_bonus_once() -> None:
    ship = MysteryShip(canvas_width=800, x=100)
    shots = [Projectile(110, 60, 5), Projectile(120, 60, 5), Projectile(400, 60, 5)]
    result = resolve_mystery_hit(shots, ship)
    assert result.hit
    assert result.points == 1000
    assert not ship.active
    assert result.projectiles == shots[1:]


def test_inactive_or_missing_mystery_ship_collides_with_nothing() -> None:
    shots = [Projectile(110, 60, 5)]
    ship = MysteryShip(canvas_width=800, x=100, active=False)
    assert resolve_mystery_hit(shots, ship).points == 0
    assert resolve_mystery_hit(shots, None).projectiles == shots
