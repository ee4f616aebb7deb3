"""
Game window using pygame.

Hosts a GameSession on the desktop: translates keyboard and window
focus into bus events, ticks the session once per frame and blits the
rendered canvas.
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from ..core.events import Event, EventBus, EventType, key_event, tick_event, visibility_event
from ..game.session import GameSession
from ..game.world import Action
from ..graphics.hud import HudText, hud_lines
from ..graphics.renderer import GameRenderer
from ..graphics.sprites import SpriteSheet

logger = logging.getLogger(__name__)


KEY_ACTIONS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_SPACE: Action.JUMP,
}

HIDE_EVENTS = (pygame.WINDOWFOCUSLOST, pygame.WINDOWMINIMIZED)
SHOW_EVENTS = (pygame.WINDOWFOCUSGAINED, pygame.WINDOWRESTORED)


@dataclass
class WindowConfig:
    """Game window configuration."""
    width: int = 400
    height: int = 600
    scale: int = 1
    title: str = "Blackhole Jumper"
    fullscreen: bool = False
    fps: int = 60

    # Game over notification
    reset_delay_ms: int = 30
    overlay_color: tuple[int, int, int, int] = (0, 0, 0, 190)
    notice_color: tuple[int, int, int] = (255, 255, 255)


class GameWindow:
    """
    Desktop window driving one game session.

    Keyboard Mapping:
        LEFT / RIGHT: Move (first press on the splash screen starts play)
        SPACE: Jump
        S: Capture screenshot
        Q / ESC: Quit
        Any key: Dismiss the game over notice
    """

    def __init__(
        self,
        session: GameSession,
        config: WindowConfig | None = None,
        sprites: SpriteSheet | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.session = session
        self.config = config or WindowConfig()
        self.sprites = sprites
        self.event_bus = event_bus or session.event_bus
        self.renderer = GameRenderer(session.config, sprites)

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._buffer = self.renderer.new_buffer(session.world)

        # Game over notice
        self._pending_notice: str | None = None
        self._pending_ms = 0.0
        self.notice: str | None = None

        self.event_bus.subscribe(EventType.GAME_OVER, self._on_game_over)

        logger.info("GameWindow created")

    @property
    def running(self) -> bool:
        return self._running

    def init_pygame(self) -> None:
        """Initialize pygame and create the window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.width * self.config.scale, self.config.height * self.config.scale),
            flags
        )
        self._clock = pygame.time.Clock()
        pygame.font.init()

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height} x{self.config.scale}")

    def load_assets(self) -> None:
        """Load sprites, then tell the session it can lay out the splash screen."""
        if self.sprites is not None and not self.sprites.done:
            self.sprites.load()
        self.event_bus.emit(Event(EventType.ASSETS_LOADED, source="window"))

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(None, int(size * 1.35), bold=bold)
        return self._fonts[key]

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event.key)

        elif event.type == pygame.KEYUP:
            self._handle_keyup(event.key)

        elif event.type in HIDE_EVENTS:
            self.event_bus.emit(visibility_event(False))

        elif event.type in SHOW_EVENTS:
            self.event_bus.emit(visibility_event(True))

    def _handle_keydown(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
            return

        if self.notice is not None:
            self.dismiss_notice()
            return

        if key == pygame.K_s:
            self._capture_screenshot()
        elif key in KEY_ACTIONS:
            self.event_bus.emit(key_event(KEY_ACTIONS[key].value, pressed=True))

    def _handle_keyup(self, key: int) -> None:
        if key in KEY_ACTIONS:
            self.event_bus.emit(key_event(KEY_ACTIONS[key].value, pressed=False))

    # ------------------------------------------------------------------
    # Game over notice
    # ------------------------------------------------------------------

    def _on_game_over(self, event: Event) -> None:
        self._pending_notice = event.data.get("message", "Game Over!")
        self._pending_ms = 0.0

    def update_notice(self, delta_ms: float) -> None:
        """Show the pending game over notice once the reset delay has passed."""
        if self._pending_notice is None:
            return
        self._pending_ms += delta_ms
        if self._pending_ms >= self.config.reset_delay_ms:
            self.notice = self._pending_notice
            self._pending_notice = None

    def dismiss_notice(self) -> None:
        """Close the notice and start over from the splash screen."""
        self.notice = None
        self.session.reset()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Render the session, HUD and any notice."""
        if not self._screen:
            return

        self.renderer.render(self.session, self._buffer)
        canvas = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))

        for line in hud_lines(self.session):
            self._draw_text(canvas, line)

        if self.notice is not None:
            self._draw_notice(canvas, self.notice)

        if self.config.scale != 1:
            canvas = pygame.transform.scale(canvas, self._screen.get_size())
        self._screen.blit(canvas, (0, 0))
        pygame.display.flip()

    def _draw_text(self, surface: pygame.Surface, line: HudText) -> None:
        font = self._font(line.size, line.bold)
        text_surface = font.render(line.text, True, line.color)
        rect = text_surface.get_rect()

        top = line.y - font.get_ascent()
        if line.align == "right":
            rect.topright = (int(line.x), int(top))
        elif line.align == "center":
            rect.midtop = (int(line.x), int(top))
        else:
            rect.topleft = (int(line.x), int(top))

        if line.outline:
            shadow = font.render(line.text, True, (0, 0, 0))
            for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
                surface.blit(shadow, rect.move(dx, dy))
        surface.blit(text_surface, rect)

    def _draw_notice(self, surface: pygame.Surface, message: str) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(self.config.overlay_color)
        surface.blit(overlay, (0, 0))

        font = self._font(18)
        lines = message.split("\n") + ["", "Press any key"]
        line_height = font.get_linesize()
        y = (surface.get_height() - line_height * len(lines)) // 2
        for text in lines:
            if text:
                text_surface = font.render(text, True, self.config.notice_color)
                surface.blit(text_surface, text_surface.get_rect(midtop=(surface.get_width() // 2, y)))
            y += line_height

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def step(self, delta_ms: float) -> None:
        """One frame: input, tick, notice timing."""
        self.handle_events()
        self.event_bus.emit(tick_event(delta_ms, self._frame_count))
        self.update_notice(delta_ms)
        self._frame_count += 1

    async def run(self) -> None:
        """Main game loop."""
        self.init_pygame()
        self.load_assets()
        self._running = True

        logger.info("Game window started")

        while self._running:
            delta_ms = float(self._clock.get_time()) if self._clock else 0.0
            self.step(delta_ms)

            # Process event queue
            await self.event_bus.process_queue()

            self.render()

            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Game window stopped")

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False
