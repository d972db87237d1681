"""Adapters between the simulation and the matrix device.

Frames are immutable camera-relative snapshots handed to the host once per
tick; ``render_frame`` turns them into an intensity grid. The accelerometer
helper bounds raw sensor samples before they reach the game.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .config import (
    GAME_OVER_INTENSITY,
    HOME_PLATFORM_INTENSITY,
    MAX_TILT,
    PLATFORM_HEIGHT,
    PLATFORM_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    PLAYER_INTENSITY,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .utils import clamp


class GameState(Enum):
    HOME = "home"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Sprite:
    x: float
    y: float
    width: float
    height: float
    intensity: int


@dataclass(frozen=True)
class Frame:
    state: GameState
    player: Sprite | None = None
    platforms: tuple[Sprite, ...] = field(default_factory=tuple)
    score: int | None = None
    high_score: int | None = None


HOME_PLATFORMS = ((5.0, 15.0), (15.0, 10.0), (8.0, 5.0))


def new_grid() -> np.ndarray:
    return np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), dtype=np.uint8)


def draw_rect(grid: np.ndarray, sprite: Sprite) -> None:
    """Fill the cells covered by sprite, truncating to whole cells and clipping to the grid."""
    rows, cols = grid.shape
    x0, y0 = int(sprite.x), int(sprite.y)
    x1, y1 = x0 + int(sprite.width), y0 + int(sprite.height)
    x0, x1 = max(0, x0), min(cols, x1)
    y0, y1 = max(0, y0), min(rows, y1)
    if x0 < x1 and y0 < y1:
        grid[y0:y1, x0:x1] = sprite.intensity


def _home_grid() -> np.ndarray:
    grid = new_grid()
    cx = SCREEN_WIDTH // 2 - 1
    cy = SCREEN_HEIGHT // 2 - 1
    draw_rect(grid, Sprite(cx, cy, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_INTENSITY))
    for x, y in HOME_PLATFORMS:
        draw_rect(grid, Sprite(x, y, PLATFORM_WIDTH, PLATFORM_HEIGHT, HOME_PLATFORM_INTENSITY))
    return grid


def _game_over_grid() -> np.ndarray:
    # Hollow 4x4 "restart" box in the middle of the screen
    grid = new_grid()
    cx = SCREEN_WIDTH // 2 - 2
    cy = SCREEN_HEIGHT // 2 - 2
    grid[cy:cy + 4, cx:cx + 4] = GAME_OVER_INTENSITY
    grid[cy + 1:cy + 3, cx + 1:cx + 3] = 0
    return grid


def render_frame(frame: Frame) -> np.ndarray | None:
    """Rasterize a frame. PAUSED yields None: the host keeps its last image."""
    if frame.state is GameState.PAUSED:
        return None
    if frame.state is GameState.HOME:
        return _home_grid()
    if frame.state is GameState.GAME_OVER:
        return _game_over_grid()

    grid = new_grid()
    for sprite in frame.platforms:
        draw_rect(grid, sprite)
    if frame.player is not None:
        draw_rect(grid, frame.player)
    return grid


def tilt_from_accelerometer(raw_x: float) -> float:
    """Bound a raw accelerometer x sample to the tilt range the game expects."""
    return clamp(raw_x, -MAX_TILT, MAX_TILT)
