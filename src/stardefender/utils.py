"""Shared constants and utility helpers for Star Defender."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import json

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60

BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
SHADOW_COLOR = (15, 24, 45)

CYAN = (30, 242, 255)
MAGENTA = (255, 48, 210)
YELLOW = (255, 233, 68)
ORANGE = (255, 130, 40)
GREEN = (98, 246, 128)
RED = (255, 85, 85)

DATA_DIR = Path(".stardefender")
SETTINGS_FILE = DATA_DIR / "settings.json"


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned bounding box in canvas coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
