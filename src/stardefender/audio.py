"""Audio loading and playback wrappers."""

from __future__ import annotations

from pathlib import Path
import pygame

from .log import get_logger

logger = get_logger(__name__)

SOUND_FILES = {
    "shot": "shot.wav",
}


class AudioManager:
    """Loads and plays sound effects with graceful fallback when assets are absent."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Load available audio files from assets folders."""
        if not self.sound_enabled:
            return
        for key, filename in SOUND_FILES.items():
            path = self.root / "assets" / "sounds" / filename
            if not path.exists():
                continue
            try:
                self.sounds[key] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning("Could not load sound %s: %s", path, exc)

    def set_volumes(self, master: float, sfx: float) -> None:
        """Apply current volume settings."""
        if not self.sound_enabled:
            return
        for sound in self.sounds.values():
            sound.set_volume(master * sfx)

    def play(self, key: str) -> None:
        """Play a named sound effect without waiting for it to finish."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()
