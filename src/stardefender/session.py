"""Per-frame simulation, terminal-state machine, and frame rendering."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Protocol
import random

from .collision import formation_breached, player_is_hit, resolve_enemy_hits, resolve_mystery_hit
from .entities import Enemy, MysteryShip, Player, Projectile
from .formation import Formation, create_formation
from .log import get_logger
from .settings import GameRules
from .spawner import EnemyFireTimer, MysteryShipTimer, spawn_mystery_ship

logger = get_logger(__name__)

PLAYER_BOTTOM_OFFSET = 120
SCORE_POSITION = (20, 40)


class Outcome(Enum):
    """Session states; WON and LOST are terminal."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Renderer(Protocol):
    def clear(self, width: float, height: float) -> None: ...

    def draw_sprite(self, sprite: str, x: float, y: float, width: float, height: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...


class SoundPlayer(Protocol):
    def play(self, key: str) -> None: ...


OutcomeListener = Callable[[Outcome], None]


class GameSession:
    """One game from formation setup to a win or a loss.

    The session owns every piece of mutable game state. It never touches a
    display, an input device or a clock: the shell feeds it intents, fire
    requests, spawn requests and timestamps, and hands it a renderer.
    """

    def __init__(
        self,
        rules: GameRules | None = None,
        rng: random.Random | None = None,
        audio: SoundPlayer | None = None,
        enemies: list[Enemy] | None = None,
        player: Player | None = None,
    ) -> None:
        self.rules = rules or GameRules()
        self.rng = rng or random.Random()
        self.audio = audio

        width, height = self.rules.canvas_width, self.rules.canvas_height
        self.player = player or Player(x=width / 2, y=height - PLAYER_BOTTOM_OFFSET)
        self.enemies: list[Enemy] = (
            enemies if enemies is not None else create_formation(width, self.rules.rows, self.rules.cols)
        )
        self.total_rows = self.rules.rows
        self.enemy_projectiles: list[Projectile] = []
        self.mystery_ship: MysteryShip | None = None

        self.formation = Formation(canvas_width=width)
        self.fire_timer = EnemyFireTimer(interval_ms=self.rules.fire_interval_ms, rng=self.rng)

        self.score = 0
        self.game_over = False
        self.player_won = False
        self.outcome = Outcome.PLAYING
        self.ticks = 0
        self._listeners: list[OutcomeListener] = []
        self._announced = False

        logger.info("New session: %d enemies in %d rows", len(self.enemies), self.total_rows)

    @property
    def playing(self) -> bool:
        return self.outcome == Outcome.PLAYING

    def add_outcome_listener(self, listener: OutcomeListener) -> None:
        """Register a callback for the final outcome."""
        self._listeners.append(listener)

    def set_intent(self, move_left: bool, move_right: bool) -> None:
        """Record the held movement keys for the next tick."""
        if not self.playing:
            return
        self.player.move_left = move_left
        self.player.move_right = move_right

    def fire(self) -> Projectile | None:
        """Handle a discrete fire request from the player."""
        if not self.playing:
            return None
        projectile = self.player.fire()
        if self.audio is not None:
            self.audio.play("shot")
        return projectile

    def request_mystery_ship(self) -> MysteryShip | None:
        """Spawn the bonus target unless one is already crossing."""
        if not self.playing:
            return None
        self.mystery_ship = spawn_mystery_ship(self.mystery_ship, self.rules.canvas_width, self.rules.mystery_speed)
        return self.mystery_ship

    def tick(self, now_ms: float) -> Outcome:
        """Advance the simulation by one frame."""
        if not self.playing:
            return self.outcome
        self.ticks += 1

        self._check_enemy_hits()
        self._check_loss()
        self._check_mystery_hit()
        self._check_win()
        if self.game_over:
            self._finish()
            return self.outcome

        self.player.move(self.rules.canvas_width)
        self.player.projectiles = self._advance_projectiles(self.player.projectiles)
        self.enemy_projectiles = self._advance_projectiles(self.enemy_projectiles)

        self.formation.advance(self.enemies)
        shot = self.fire_timer.maybe_fire(self.enemies, now_ms)
        if shot is not None:
            self.enemy_projectiles.append(shot)

        if self.mystery_ship is not None:
            self.mystery_ship.move()
        self._check_mystery_hit()
        return self.outcome

    def render(self, renderer: Renderer) -> None:
        """Issue draw calls for the current frame."""
        renderer.clear(self.rules.canvas_width, self.rules.canvas_height)
        player = self.player
        renderer.draw_sprite(player.sprite, player.x, player.y, player.width, player.height)
        for projectile in player.projectiles:
            renderer.draw_sprite(projectile.sprite, projectile.x, projectile.y, projectile.width, projectile.height)
        for enemy in self.enemies:
            renderer.draw_sprite(enemy.sprite, enemy.x, enemy.y, enemy.width, enemy.height)
        for projectile in self.enemy_projectiles:
            renderer.draw_sprite(projectile.sprite, projectile.x, projectile.y, projectile.width, projectile.height)
        ship = self.mystery_ship
        if ship is not None and ship.active:
            renderer.draw_sprite(ship.sprite, ship.x, ship.y, ship.width, ship.height)
        renderer.draw_text(f"Score: {self.score}", *SCORE_POSITION)

    def _advance_projectiles(self, projectiles: list[Projectile]) -> list[Projectile]:
        height = self.rules.canvas_height
        for projectile in projectiles:
            projectile.update()
        return [projectile for projectile in projectiles if not projectile.off_canvas(height)]

    def _check_enemy_hits(self) -> None:
        result = resolve_enemy_hits(self.player.projectiles, self.enemies, self.total_rows)
        self.player.projectiles = result.projectiles
        self.enemies = result.enemies
        self.score += result.points

    def _check_loss(self) -> None:
        if player_is_hit(self.enemy_projectiles, self.player):
            logger.info("Player ship hit")
            self.game_over = True
        if formation_breached(self.enemies, self.player):
            logger.info("Formation reached the player line")
            self.game_over = True

    def _check_mystery_hit(self) -> None:
        result = resolve_mystery_hit(self.player.projectiles, self.mystery_ship, self.rules.mystery_bonus)
        self.player.projectiles = result.projectiles
        self.score += result.points

    def _check_win(self) -> None:
        # A loss detected in the same frame takes precedence.
        if self.game_over:
            return
        if not self.enemies:
            self.game_over = True
            self.player_won = True

    def _finish(self) -> None:
        self.outcome = Outcome.WON if self.player_won else Outcome.LOST
        if self._announced:
            return
        self._announced = True
        logger.info("Game finished: %s with score %d after %d ticks", self.outcome.name, self.score, self.ticks)
        for listener in self._listeners:
            listener(self.outcome)


def run_headless(
    session: GameSession,
    max_frames: int,
    frame_ms: float = 1000 / 60,
    start_ms: float = 0,
    renderer: Renderer | None = None,
) -> Outcome:
    """Drive a session without a display, one fixed-length frame at a time.

    Mystery-ship requests follow the session's cadence on the simulated
    clock. Returns the outcome once the session ends or the frame budget
    runs out.
    """
    cadence = MysteryShipTimer(interval_ms=session.rules.mystery_interval_ms)
    cadence.due(start_ms)
    for frame in range(max_frames):
        now_ms = start_ms + frame * frame_ms
        if cadence.due(now_ms):
            session.request_mystery_ship()
        session.tick(now_ms)
        if renderer is not None:
            session.render(renderer)
        if not session.playing:
            break
    return session.outcome
