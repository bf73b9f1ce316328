"""Enemy grid construction and lockstep formation movement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .entities import ENEMY_SIZE, Enemy

ENEMY_SPACING = 10
FORMATION_TOP = 30


@dataclass(frozen=True, slots=True)
class FormationStep:
    """Flags the formation carries into the next frame."""

    move_right: bool
    move_down: bool
    edge_reached: bool


def create_formation(canvas_width: float, rows: int = 3, cols: int = 10) -> list[Enemy]:
    """Lay out a horizontally centred grid; row 0 is the top row."""
    pitch = ENEMY_SIZE + ENEMY_SPACING
    start_x = (canvas_width - cols * pitch) / 2
    return [
        Enemy(x=start_x + col * pitch, y=FORMATION_TOP + row * pitch, row=row)
        for row in range(rows)
        for col in range(cols)
    ]


def edge_contact(enemies: Iterable[Enemy], canvas_width: float) -> bool:
    """Return whether any enemy pokes past either horizontal canvas edge."""
    return any(enemy.x < 0 or enemy.x + enemy.width > canvas_width for enemy in enemies)


def advance_formation(
    enemies: Iterable[Enemy],
    move_right: bool,
    move_down: bool,
    canvas_width: float,
) -> FormationStep:
    """Move every enemy with the shared flags and compute next frame's flags.

    Edge contact flips the direction once no matter how many enemies touch,
    and requests a single descent step on the next frame. A frame without
    contact clears descent.
    """
    enemies = list(enemies)
    for enemy in enemies:
        enemy.move(move_right, move_down)

    if edge_contact(enemies, canvas_width):
        return FormationStep(move_right=not move_right, move_down=True, edge_reached=True)
    return FormationStep(move_right=move_right, move_down=False, edge_reached=False)


@dataclass(slots=True)
class Formation:
    """Shared direction and descent state for one session's enemy grid."""

    canvas_width: float
    move_right: bool = True
    move_down: bool = False

    def advance(self, enemies: Iterable[Enemy]) -> FormationStep:
        """Advance the grid one frame and remember the resulting flags."""
        step = advance_formation(enemies, self.move_right, self.move_down, self.canvas_width)
        self.move_right = step.move_right
        self.move_down = step.move_down
        return step
