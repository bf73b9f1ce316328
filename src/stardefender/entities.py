"""Player ship, enemies, mystery ship, and projectile entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utils import Box, clamp

PROJECTILE_WIDTH = 20
PROJECTILE_HEIGHT = 40
PLAYER_SHOT_SPEED = 5
ENEMY_SHOT_SPEED = 3

ENEMY_SIZE = 40
ENEMY_HORIZONTAL_STEP = 1
ENEMY_VERTICAL_STEP = 10

MYSTERY_SHIP_SIZE = 50
MYSTERY_SHIP_START = (-50, 50)


@dataclass(slots=True)
class Projectile:
    """Shot travelling up (player fire) or down (enemy fire)."""

    x: float
    y: float
    speed: float
    enemy_fire: bool = False
    width: float = PROJECTILE_WIDTH
    height: float = PROJECTILE_HEIGHT

    @classmethod
    def launch(cls, centre_x: float, y: float, speed: float, enemy_fire: bool = False) -> Projectile:
        """Create a shot whose box is horizontally centred on the muzzle."""
        return cls(centre_x - PROJECTILE_WIDTH / 2, y, speed, enemy_fire)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def sprite(self) -> str:
        return "enemy_shot" if self.enemy_fire else "player_shot"

    def update(self) -> None:
        """Advance one frame in the owner's firing direction."""
        if self.enemy_fire:
            self.y += self.speed
        else:
            self.y -= self.speed

    def off_canvas(self, canvas_height: float) -> bool:
        """Return whether the shot has fully left the canvas vertically."""
        return self.y + self.height < 0 or self.y > canvas_height


@dataclass(slots=True)
class Enemy:
    """One member of the invading formation."""

    x: float
    y: float
    row: int
    width: float = ENEMY_SIZE
    height: float = ENEMY_SIZE
    horizontal_step: float = ENEMY_HORIZONTAL_STEP
    vertical_step: float = ENEMY_VERTICAL_STEP

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    @property
    def sprite(self) -> str:
        return f"enemy_row_{self.row + 1}"

    def move(self, move_right: bool, move_down: bool) -> None:
        """Step using the formation's shared direction and descent flags."""
        self.x += self.horizontal_step if move_right else -self.horizontal_step
        if move_down:
            self.y += self.vertical_step

    def fire(self) -> Projectile:
        """Emit a downward shot from the bottom centre."""
        return Projectile.launch(self.x + self.width / 2, self.y + self.height, ENEMY_SHOT_SPEED, enemy_fire=True)


@dataclass(slots=True)
class MysteryShip:
    """Bonus target crossing the top of the canvas from left to right."""

    canvas_width: float
    speed: float = 5
    x: float = MYSTERY_SHIP_START[0]
    y: float = MYSTERY_SHIP_START[1]
    width: float = MYSTERY_SHIP_SIZE
    height: float = MYSTERY_SHIP_SIZE
    active: bool = True
    sprite: str = field(default="mystery_ship", init=False)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    def move(self) -> None:
        """Advance while active; leave play once past the right edge."""
        if not self.active:
            return
        self.x += self.speed
        if self.x > self.canvas_width:
            self.active = False


@dataclass(slots=True)
class Player:
    """The defending ship and the shots it has in flight."""

    x: float
    y: float
    width: float = 57
    height: float = 90
    speed: float = 5
    move_left: bool = False
    move_right: bool = False
    projectiles: list[Projectile] = field(default_factory=list)
    sprite: str = field(default="player", init=False)

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)

    def move(self, canvas_width: float) -> None:
        """Apply held intents and keep the ship inside the canvas."""
        if self.move_left:
            self.x -= self.speed
        if self.move_right:
            self.x += self.speed
        self.x = clamp(self.x, 0, canvas_width - self.width)

    def fire(self) -> Projectile:
        """Launch an upward shot from the top centre."""
        projectile = Projectile.launch(self.x + self.width / 2, self.y, PLAYER_SHOT_SPEED)
        self.projectiles.append(projectile)
        return projectile
