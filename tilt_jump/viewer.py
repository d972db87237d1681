"""Desktop stand-in for the LED matrix: pygame window, keyboard tilt and long press."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np
import pygame

from .config import (
    CELL_PIXELS,
    COL_BG,
    COL_CELL_OFF,
    COL_CELL_ON,
    COL_TEXT,
    MAX_TILT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TICK_RATE,
    VIEWER_FPS,
)
from .game import Game
from .render import Frame, GameState, render_frame, tilt_from_accelerometer
from .utils import grid_to_rgb

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tilt Jump on a simulated LED matrix.")
    p.add_argument("--seed", type=int, default=None, help="Platform layout seed. Omit for a random one.")
    p.add_argument("--tick-rate", type=float, default=TICK_RATE, help="Simulation ticks per second.")
    p.add_argument("--cell-size", type=int, default=CELL_PIXELS, help="Pixels per matrix cell.")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    return p.parse_args(argv)


class MatrixViewer:
    """Hosts a Game: feeds it input events and shows the latest rendered grid."""

    def __init__(self, seed: int | None = None, tick_rate: float = TICK_RATE, cell_size: int = CELL_PIXELS) -> None:
        self.cell_size = cell_size
        self.grid: np.ndarray | None = None
        self.score = 0
        self.high_score = 0
        self._held: set[int] = set()

        pygame.init()
        size = (SCREEN_WIDTH * cell_size, SCREEN_HEIGHT * cell_size + 40)
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Tilt Jump")
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.SysFont(None, 24)

        self.game = Game(seed=seed, tick_rate=tick_rate, on_render=self.on_frame)
        self.game.score.subscribe(self.on_score)
        # Show the home screen before the first tick.
        self.on_frame(self.game.frame())

    def on_frame(self, frame: Frame) -> None:
        grid = render_frame(frame)
        # PAUSED renders nothing; keep the last image.
        if grid is not None:
            self.grid = grid

    def on_score(self, current: int, high: int) -> None:
        self.score = current
        self.high_score = high

    def _update_tilt(self) -> None:
        left = pygame.K_LEFT in self._held or pygame.K_a in self._held
        right = pygame.K_RIGHT in self._held or pygame.K_d in self._held
        raw = (MAX_TILT if right else 0.0) - (MAX_TILT if left else 0.0)
        self.game.set_horizontal_intent(tilt_from_accelerometer(raw))

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_a, pygame.K_d):
                self._held.add(event.key)
                self._update_tilt()
            elif event.key == pygame.K_SPACE:
                self.game.toggle()
            elif event.key == pygame.K_p:
                if self.game.state is GameState.PLAYING:
                    self.game.pause()
                else:
                    self.game.resume()
            elif event.key == pygame.K_r:
                self.game.restart()
            elif event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.type == pygame.KEYUP:
            if event.key in self._held:
                self._held.discard(event.key)
                self._update_tilt()

    def draw(self) -> None:
        self.screen.fill(COL_BG)
        if self.grid is not None:
            rgb = grid_to_rgb(self.grid, COL_CELL_ON)
            rgb[~rgb.any(axis=2)] = COL_CELL_OFF
            cells = pygame.surfarray.make_surface(rgb)
            size = (SCREEN_WIDTH * self.cell_size, SCREEN_HEIGHT * self.cell_size)
            self.screen.blit(pygame.transform.scale(cells, size), (0, 0))
        self._draw_ui(self.screen)
        pygame.display.flip()

    def _draw_ui(self, surf: pygame.Surface) -> None:
        text = f"{self.game.state.value.upper()}   Score: {self.score}   Best: {self.high_score}"
        label = self.font_small.render(text, True, COL_TEXT)
        surf.blit(label, label.get_rect(midbottom=(surf.get_width() // 2, surf.get_height() - 12)))

    def run(self) -> None:
        try:
            while True:
                self.clock.tick(VIEWER_FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    self.handle_input(event)
                self.draw()
        finally:
            self.game.close()
            pygame.quit()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    viewer = MatrixViewer(seed=args.seed, tick_rate=args.tick_rate, cell_size=args.cell_size)
    logger.info("starting viewer (seed=%s, tick rate=%s)", viewer.game.seed, args.tick_rate)
    viewer.run()
    sys.exit(0)
