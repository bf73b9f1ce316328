"""Pygame application shell: window, frame clock, input, and presentation."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path
import random
import pygame

from .audio import AudioManager
from .log import get_logger
from .render import PygameRenderer, SpriteBank
from .session import GameSession, Outcome
from .settings import GameRules, GameSettings, SettingsManager
from .utils import FPS, SHADOW_COLOR, TEXT_COLOR, YELLOW

logger = get_logger(__name__)

MYSTERY_SHIP_EVENT = pygame.USEREVENT + 1


class AppState(Enum):
    """Screens of the application shell."""

    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class StarDefenderGame:
    """Runs game sessions in a pygame window."""

    def __init__(
        self,
        root: Path,
        settings_manager: SettingsManager | None = None,
        rules: GameRules | None = None,
        seed: int | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        self.rules = rules or GameRules()
        self.settings_manager = settings_manager or SettingsManager()
        self.settings: GameSettings = self.settings_manager.settings
        self.rng = random.Random(seed)

        flags = pygame.FULLSCREEN if self.settings.display.fullscreen else 0
        self.screen = pygame.display.set_mode((self.rules.canvas_width, self.rules.canvas_height), flags)
        pygame.display.set_caption("Star Defender")
        self.clock = pygame.time.Clock()

        self.hud_font = pygame.font.Font(None, 22)
        self.banner_font = pygame.font.Font(None, 64)

        self.sprites = SpriteBank(root)
        self.sprites.load_assets()
        self.renderer = PygameRenderer(self.screen, self.sprites, self.hud_font)

        self.audio = AudioManager(root)
        self.audio.load_assets()
        self.audio.set_volumes(self.settings.master_volume, self.settings.sfx_volume)

        self.state = AppState.PLAYING
        self.hold_left = False
        self.hold_right = False
        self.banner = ""
        self.session = self.new_session()

    def new_session(self) -> GameSession:
        """Start a fresh game and re-arm the mystery-ship cadence."""
        session = GameSession(rules=self.rules, rng=self.rng, audio=self.audio)
        session.add_outcome_listener(self._on_outcome)
        self.session = session
        self.banner = ""
        self.state = AppState.PLAYING
        pygame.time.set_timer(MYSTERY_SHIP_EVENT, self.rules.mystery_interval_ms)
        return session

    def run(self) -> None:
        """Main event/render/update loop."""
        running = True
        while running:
            self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break

            if self.state == AppState.PLAYING:
                self._update_playing(pygame.time.get_ticks())

            self._render()

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == MYSTERY_SHIP_EVENT:
                if self.state == AppState.PLAYING:
                    self.session.request_mystery_ship()
                continue
            if event.type == pygame.KEYUP:
                self._handle_key_up(event.key)
                continue
            if event.type != pygame.KEYDOWN:
                continue

            if event.key == pygame.K_ESCAPE:
                if self.state == AppState.PAUSED:
                    return False
                if self.state == AppState.PLAYING:
                    self.state = AppState.PAUSED
                    continue
                return False

            if self.state == AppState.PLAYING:
                self._handle_gameplay_input(event.key)
            elif self.state == AppState.PAUSED:
                if event.key in (pygame.K_p, pygame.K_SPACE, pygame.K_RETURN):
                    self.state = AppState.PLAYING
            elif self.state == AppState.GAME_OVER:
                if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    self.new_session()
        return True

    def _handle_key_up(self, key: int) -> None:
        controls = self.settings.controls
        if key == controls.left:
            self.hold_left = False
        elif key == controls.right:
            self.hold_right = False

    def _handle_gameplay_input(self, key: int) -> None:
        controls = self.settings.controls
        if key == controls.left:
            self.hold_left = True
        elif key == controls.right:
            self.hold_right = True
        elif key == controls.fire:
            self.session.fire()
        elif key == pygame.K_p:
            self.state = AppState.PAUSED
        elif key == pygame.K_F3:
            self.settings_manager.toggle_fps()
        elif key == pygame.K_MINUS:
            self._adjust_volume(-0.1)
        elif key == pygame.K_EQUALS:
            self._adjust_volume(0.1)

    def _adjust_volume(self, delta: float) -> None:
        self.settings_manager.adjust_volume("sfx_volume", delta)
        self.audio.set_volumes(self.settings.master_volume, self.settings.sfx_volume)

    def _update_playing(self, now_ms: float) -> None:
        self.session.set_intent(self.hold_left, self.hold_right)
        self.session.tick(now_ms)

    def _on_outcome(self, outcome: Outcome) -> None:
        pygame.time.set_timer(MYSTERY_SHIP_EVENT, 0)
        self.banner = "YOU WON!" if outcome == Outcome.WON else "GAME OVER"
        self.state = AppState.GAME_OVER

    def _render(self) -> None:
        self.session.render(self.renderer)

        if self.settings.display.show_fps:
            self.renderer.draw_text(f"{self.clock.get_fps():.0f} FPS", self.rules.canvas_width - 80, 40)

        if self.state == AppState.PAUSED:
            self._render_banner("PAUSED", "Press P to resume")
        elif self.state == AppState.GAME_OVER:
            self._render_banner(self.banner, f"Score: {self.session.score}  -  Space/Enter to play again")

        pygame.display.flip()

    def _render_banner(self, headline: str, prompt: str) -> None:
        width, height = self.rules.canvas_width, self.rules.canvas_height
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((4, 8, 16, 165))
        self.screen.blit(overlay, (0, 0))

        shadow = self.banner_font.render(headline, True, SHADOW_COLOR)
        title = self.banner_font.render(headline, True, YELLOW)
        line = self.hud_font.render(prompt, True, TEXT_COLOR)
        self.screen.blit(shadow, (width // 2 - title.get_width() // 2 + 3, height // 2 - 57))
        self.screen.blit(title, (width // 2 - title.get_width() // 2, height // 2 - 60))
        self.screen.blit(line, (width // 2 - line.get_width() // 2, height // 2 + 10))
