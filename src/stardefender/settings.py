"""Settings persistence and runtime configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
import pygame

from .log import get_logger
from .utils import SCREEN_HEIGHT, SCREEN_WIDTH, SETTINGS_FILE, load_json, save_json

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GameRules:
    """Fixed gameplay parameters for one session."""

    canvas_width: int = SCREEN_WIDTH
    canvas_height: int = SCREEN_HEIGHT
    rows: int = 3
    cols: int = 10
    fire_interval_ms: int = 1000
    mystery_interval_ms: int = 10000
    mystery_speed: float = 5
    mystery_bonus: int = 1000

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("formation needs at least one row and one column")
        if self.fire_interval_ms <= 0 or self.mystery_interval_ms <= 0:
            raise ValueError("timer intervals must be positive")


@dataclass(slots=True)
class DisplaySettings:
    """Display-related options."""

    fullscreen: bool = False
    show_fps: bool = False


@dataclass(slots=True)
class ControlScheme:
    """Key bindings for the player ship."""

    left: int = pygame.K_LEFT
    right: int = pygame.K_RIGHT
    fire: int = pygame.K_UP


@dataclass(slots=True)
class GameSettings:
    """Persistent settings for the game."""

    master_volume: float = 0.8
    sfx_volume: float = 0.8
    display: DisplaySettings = field(default_factory=DisplaySettings)
    controls: ControlScheme = field(default_factory=ControlScheme)


class SettingsManager:
    """Load, save, and mutate game settings."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or SETTINGS_FILE
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load game settings from disk with safe defaults."""
        raw = load_json(self.path, {})
        settings = GameSettings()
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            return settings

        for name in ("master_volume", "sfx_volume"):
            try:
                value = float(raw.get(name, getattr(settings, name)))
            except (TypeError, ValueError):
                logger.warning("Invalid %s in %s, using default", name, self.path)
                continue
            setattr(settings, name, max(0.0, min(1.0, value)))

        display = raw.get("display", {})
        if isinstance(display, dict):
            settings.display.fullscreen = bool(display.get("fullscreen", settings.display.fullscreen))
            settings.display.show_fps = bool(display.get("show_fps", settings.display.show_fps))

        controls = raw.get("controls", {})
        if isinstance(controls, dict):
            settings.controls = self._load_controls(controls, settings.controls)
        return settings

    def _load_controls(self, payload: dict[str, int], defaults: ControlScheme) -> ControlScheme:
        try:
            return ControlScheme(
                left=int(payload.get("left", defaults.left)),
                right=int(payload.get("right", defaults.right)),
                fire=int(payload.get("fire", defaults.fire)),
            )
        except (TypeError, ValueError):
            logger.warning("Invalid key bindings in %s, using defaults", self.path)
            return defaults

    def save(self) -> None:
        """Persist settings to disk."""
        save_json(self.path, asdict(self.settings))

    def adjust_volume(self, field_name: str, delta: float) -> None:
        """Adjust a volume setting and save."""
        value = float(getattr(self.settings, field_name))
        setattr(self.settings, field_name, max(0.0, min(1.0, value + delta)))
        self.save()

    def toggle_fps(self) -> bool:
        """Flip the FPS counter and save."""
        self.settings.display.show_fps = not self.settings.display.show_fps
        self.save()
        return self.settings.display.show_fps
