"""Pygame drawing backend and sprite loading."""

from __future__ import annotations

from pathlib import Path
import pygame

from .log import get_logger
from .utils import BG_COLOR, CYAN, GREEN, MAGENTA, ORANGE, RED, TEXT_COLOR, YELLOW

logger = get_logger(__name__)

SPRITE_FILES = {
    "player": "player.png",
    "player_shot": "player_shot.png",
    "enemy_shot": "enemy_shot.png",
    "enemy_row_1": "enemy_row_1.png",
    "enemy_row_2": "enemy_row_2.png",
    "enemy_row_3": "enemy_row_3.png",
    "mystery_ship": "mystery_ship.png",
}

FALLBACK_COLORS = {
    "player": CYAN,
    "player_shot": YELLOW,
    "enemy_shot": RED,
    "enemy_row_1": MAGENTA,
    "enemy_row_2": ORANGE,
    "enemy_row_3": GREEN,
    "mystery_ship": RED,
}


class SpriteBank:
    """Loads sprite images, substituting flat placeholders when absent."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.images: dict[str, pygame.Surface] = {}
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}

    def load_assets(self) -> None:
        """Load available sprite files from the assets folder."""
        folder = self.root / "assets" / "sprites"
        for key, filename in SPRITE_FILES.items():
            path = folder / filename
            if not path.exists():
                continue
            try:
                self.images[key] = pygame.image.load(str(path))
            except pygame.error as exc:
                logger.warning("Could not load sprite %s: %s", path, exc)
        missing = sorted(set(SPRITE_FILES) - set(self.images))
        if missing:
            logger.info("Using placeholder sprites for: %s", ", ".join(missing))

    def get(self, key: str, width: int, height: int) -> pygame.Surface:
        """Return the sprite for key scaled to the requested size."""
        cache_key = (key, width, height)
        surface = self._scaled.get(cache_key)
        if surface is not None:
            return surface
        image = self.images.get(key)
        if image is not None:
            surface = pygame.transform.scale(image, (width, height))
        else:
            surface = pygame.Surface((max(1, width), max(1, height)), pygame.SRCALPHA)
            pygame.draw.rect(surface, FALLBACK_COLORS.get(key, TEXT_COLOR), surface.get_rect(), border_radius=4)
        self._scaled[cache_key] = surface
        return surface


class PygameRenderer:
    """Draws sprites and text onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, sprites: SpriteBank, font: pygame.font.Font) -> None:
        self.surface = surface
        self.sprites = sprites
        self.font = font

    def clear(self, width: float, height: float) -> None:
        self.surface.fill(BG_COLOR, pygame.Rect(0, 0, int(width), int(height)))

    def draw_sprite(self, sprite: str, x: float, y: float, width: float, height: float) -> None:
        image = self.sprites.get(sprite, int(width), int(height))
        self.surface.blit(image, (int(x), int(y)))

    def draw_text(self, text: str, x: float, y: float, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        rendered = self.font.render(text, True, color)
        # Text is anchored at its baseline like a canvas fillText call.
        self.surface.blit(rendered, (int(x), int(y) - self.font.get_ascent()))
