"""Procedural platform layout: initial stack plus spawn-above / despawn-below."""

from __future__ import annotations

import logging
import random

from .behaviors import PlatformKind, choose_kind
from .config import (
    DESPAWN_MARGIN,
    INITIAL_FIRST_GAP_Y,
    INITIAL_GAP_MAX,
    INITIAL_GAP_MIN,
    PLATFORM_COUNT,
    PLATFORM_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPAWN_GAP_MAX,
    SPAWN_GAP_MIN,
    SPAWN_LOOKAHEAD,
    START_PLATFORM,
    VISIBLE_MARGIN,
)
from .entities import Platform
from .utils import Vector2D

logger = logging.getLogger(__name__)


class World:
    """Owns the ordered platform collection and decides what to add or drop.

    Platforms live in world space; the camera offset is passed in by the
    caller on every query.
    """

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng
        self.platforms: list[Platform] = []
        self.reset()

    def reset(self) -> None:
        self.platforms.clear()
        start_x, start_y = START_PLATFORM
        self.platforms.append(Platform(Vector2D(start_x, start_y), PlatformKind.NORMAL))

        y = INITIAL_FIRST_GAP_Y
        for _ in range(PLATFORM_COUNT - 1):
            self.platforms.append(self._make_platform(y))
            y -= self.rng.uniform(INITIAL_GAP_MIN, INITIAL_GAP_MAX)

    def _make_platform(self, y: float) -> Platform:
        x = self.rng.uniform(0.0, SCREEN_WIDTH - PLATFORM_WIDTH)
        return Platform(Vector2D(x, y), choose_kind(self.rng))

    def highest(self) -> Platform | None:
        if not self.platforms:
            return None
        return min(self.platforms, key=lambda p: p.position.y)

    def recycle(self, camera_offset: float) -> int:
        """Drop platforms that fell below the visible window. Returns how many."""
        limit = camera_offset + SCREEN_HEIGHT + DESPAWN_MARGIN
        kept = [p for p in self.platforms if p.position.y <= limit]
        removed = len(self.platforms) - len(kept)
        self.platforms[:] = kept
        if removed:
            logger.debug("recycled %d platform(s) below y=%.2f", removed, limit)
        return removed

    def spawn(self, camera_offset: float) -> Platform | None:
        """Add at most one platform above the current top one."""
        top = self.highest()
        if top is None:
            return None
        if top.position.y <= camera_offset - SPAWN_LOOKAHEAD:
            return None
        y = top.position.y - self.rng.uniform(SPAWN_GAP_MIN, SPAWN_GAP_MAX)
        platform = self._make_platform(y)
        self.platforms.append(platform)
        logger.debug("spawned %s platform at (%.2f, %.2f)", platform.kind.value, platform.position.x, y)
        return platform

    def visible(self, camera_offset: float) -> list[Platform]:
        return [
            p
            for p in self.platforms
            if -VISIBLE_MARGIN <= p.position.y - camera_offset <= SCREEN_HEIGHT + VISIBLE_MARGIN
        ]
