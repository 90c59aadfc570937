"""
Desktop window for playing the side scroller with pygame.

Keyboard Mapping:
    LEFT / A: Move left
    RIGHT / D: Move right
    SPACE: Jump
    RETURN: Start / restart
    F1: Toggle debug overlay
    ESC / Q: Exit
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from ..core.clock import Clock
from ..core.events import Event, EventBus, EventType, action_event, command_event
from ..core.state import Phase
from ..game.engine import GameEngine
from ..graphics.draw import build_draw_list, render_draw_list
from ..graphics.surface import BufferSurface
from ..settings import SimulatorSettings
from .display import to_pygame_surface

logger = logging.getLogger(__name__)

KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_SPACE: "space",
}


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "Side Scroller"
    scale: int = 1
    fps: int = 60
    fullscreen: bool = False

    # Colors
    text_color: tuple[int, int, int] = (236, 239, 244)
    accent_color: tuple[int, int, int] = (235, 203, 139)
    overlay_color: tuple[int, int, int, int] = (20, 20, 30, 180)

    @classmethod
    def from_settings(cls, settings: SimulatorSettings) -> "WindowConfig":
        return cls(
            title=settings.title,
            scale=settings.scale,
            fps=settings.fps,
            fullscreen=settings.fullscreen,
        )


class SimulatorWindow:
    """
    Hosts a GameEngine in a pygame window.

    Each frame: translate pygame events to bus events, pump the tick
    scheduler once (the display-refresh callback), then draw.
    """

    def __init__(
        self,
        engine: GameEngine,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.engine = engine
        self.config = config or WindowConfig()
        self.event_bus = event_bus or engine.event_bus
        self.clock = clock or engine.clock

        self._screen: pygame.Surface | None = None
        self._pg_clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

        s = engine.settings
        self.surface = BufferSurface(s.play_area_width, s.play_area_height)

        self._unsubscribe_game_over = self.event_bus.subscribe(
            EventType.GAME_OVER, self._on_game_over
        )

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF | pygame.RESIZABLE
        if self.config.fullscreen:
            flags = pygame.FULLSCREEN

        s = self.engine.settings
        self._screen = pygame.display.set_mode(
            (s.play_area_width * self.config.scale, s.play_area_height * self.config.scale),
            flags
        )
        self._pg_clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 24)
        self._big_font = pygame.font.SysFont(None, 48)

        logger.info(f"Pygame initialized: {self._screen.get_width()}x{self._screen.get_height()}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                self._handle_keyup(event)

            elif event.type == pygame.VIDEORESIZE:
                self._handle_resize(event.w, event.h)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_F1:
            self._show_debug = not self._show_debug
        elif key == pygame.K_RETURN:
            restart = self.engine.phase == Phase.GAME_OVER
            self.event_bus.emit(command_event(restart=restart, source="keyboard"))
        elif key in KEY_NAMES:
            action = self.engine.input.action_for(KEY_NAMES[key])
            if action is not None:
                self.event_bus.emit(action_event(action.name, pressed=True, key=KEY_NAMES[key]))

    def _handle_keyup(self, event: pygame.event.Event) -> None:
        if event.key in KEY_NAMES:
            action = self.engine.input.action_for(KEY_NAMES[event.key])
            if action is not None:
                self.event_bus.emit(action_event(action.name, pressed=False, key=KEY_NAMES[event.key]))

    def _handle_resize(self, width: int, height: int) -> None:
        scale = self.config.scale
        width, height = max(1, width // scale), max(1, height // scale)
        self.engine.resize(width, height)
        self.surface.resize(width, height)

    def _on_game_over(self, event: Event) -> None:
        logger.info(f"Game Over! Your Score: {event.data.get('score', 0)}")

    def _render(self) -> None:
        if not self._screen:
            return

        render_draw_list(build_draw_list(self.engine.state, self.engine.settings), self.surface)
        self._screen.blit(to_pygame_surface(self.surface, self.config.scale), (0, 0))

        self._render_hud()
        if self.engine.phase != Phase.RUNNING:
            self._render_overlay()
        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_hud(self) -> None:
        if not self._font:
            return
        text = f"Score: {self.engine.score}   High score: {self.engine.high_score}"
        self._screen.blit(self._font.render(text, True, self.config.text_color), (10, 10))
        if self.engine.player.is_boosted:
            boost = self._font.render("BOOST", True, self.config.accent_color)
            self._screen.blit(boost, (10, 34))

    def _render_overlay(self) -> None:
        if not self._big_font or not self._font:
            return
        w, h = self._screen.get_size()
        shade = pygame.Surface((w, h), pygame.SRCALPHA)
        shade.fill(self.config.overlay_color)
        self._screen.blit(shade, (0, 0))

        if self.engine.phase == Phase.GAME_OVER:
            title = f"Game Over! Your Score: {self.engine.score}"
            hint = "Press ENTER to restart"
        else:
            title = "Side Scroller"
            hint = "Press ENTER to start"

        for surface, dy in (
            (self._big_font.render(title, True, self.config.text_color), -20),
            (self._font.render(hint, True, self.config.accent_color), 24),
        ):
            rect = surface.get_rect(center=(w // 2, h // 2 + dy))
            self._screen.blit(surface, rect)

    def _render_debug(self) -> None:
        run = self.engine.run
        lines = [
            f"FPS: {self._pg_clock.get_fps():.1f}" if self._pg_clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"Phase: {self.engine.phase.name}",
            f"Speed: {run.obstacle_speed:g}",
            f"Entities: {len(self.engine.entities)}",
            f"Ticks: {run.ticks}",
        ]
        for i, line in enumerate(lines):
            surface = self._font.render(line, True, self.config.text_color)
            self._screen.blit(surface, (self._screen.get_width() - 200, 10 + i * 22))

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True
        self.engine.bind(self.event_bus)

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # Display refresh: run whatever tick the engine requested
            self.engine.scheduler.pump(self.clock.now())

            self._render()

            if self._pg_clock:
                self._pg_clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.engine.unbind()
        self._unsubscribe_game_over()
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
