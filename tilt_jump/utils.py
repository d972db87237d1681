"""Geometry and pixel utility functions used across the game."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Vector2D:
    x: float
    y: float

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def with_x(self, x: float) -> Vector2D:
        return Vector2D(x, self.y)

    def with_y(self, y: float) -> Vector2D:
        return Vector2D(self.x, y)


@dataclass(frozen=True)
class AxisAlignedBox:
    """Box spanning origin .. origin + extent, y growing downward."""

    origin: Vector2D
    extent: Vector2D

    def intersects(self, other: AxisAlignedBox) -> bool:
        return intersects(self, other)


def intersects(a: AxisAlignedBox, b: AxisAlignedBox) -> bool:
    """True if the boxes overlap on both axes. Touching edges do not count."""
    return (
        a.origin.x < b.origin.x + b.extent.x
        and a.origin.x + a.extent.x > b.origin.x
        and a.origin.y < b.origin.y + b.extent.y
        and a.origin.y + a.extent.y > b.origin.y
    )


def grid_to_rgb(grid: np.ndarray, on_color: tuple[int, int, int] = (255, 255, 255)) -> np.ndarray:
    """Expand a (rows, cols) intensity grid into a (cols, rows, 3) array for surfarray.

    Args:
        grid: uint8 intensities, row-major (y, x).
        on_color: color drawn at full intensity.

    Returns:
        RGB array indexed (x, y) as pygame.surfarray expects.
    """
    t = grid.astype(np.float32).T / 255.0
    color = np.asarray(on_color, dtype=np.float32)
    rgb = np.clip(t[..., None] * color, 0, 255).astype(np.uint8)
    return rgb
