"""Game entities: the tilt-controlled player and the platforms it bounces on."""

from __future__ import annotations

import logging

from .behaviors import BEHAVIORS, PlatformKind
from .config import (
    GRAVITY,
    JUMP_FORCE,
    MAX_HORIZONTAL_SPEED,
    PLATFORM_HEIGHT,
    PLATFORM_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    SCREEN_WIDTH,
    SUPER_JUMP_FORCE,
)
from .utils import AxisAlignedBox, Vector2D, clamp

logger = logging.getLogger(__name__)


class Entity:
    """Base body with position, size and velocity, wrapping horizontally."""

    def __init__(self, position: Vector2D, size: Vector2D, velocity: Vector2D | None = None) -> None:
        self.position = position
        self.size = size
        self.velocity = velocity if velocity is not None else Vector2D(0.0, 0.0)

    @property
    def box(self) -> AxisAlignedBox:
        return AxisAlignedBox(self.position, self.size)

    def update(self) -> None:
        self.position = self.position + self.velocity
        self._wrap()

    def _wrap(self) -> None:
        x = self.position.x
        if x < 0:
            self.position = self.position.with_x(SCREEN_WIDTH - self.size.x)
        elif x + self.size.x > SCREEN_WIDTH:
            self.position = self.position.with_x(0.0)


class Player(Entity):
    def __init__(self, position: Vector2D) -> None:
        super().__init__(position, Vector2D(PLAYER_WIDTH, PLAYER_HEIGHT))
        # Lowest y ever attained (y decreases upward)
        self.max_height_reached = position.y

    def reset(self, position: Vector2D) -> None:
        self.position = position
        self.velocity = Vector2D(0.0, 0.0)
        self.max_height_reached = position.y

    def jump(self) -> None:
        # Only while falling or at rest; a stronger jump already in progress wins.
        if self.velocity.y >= 0:
            self.velocity = self.velocity.with_y(JUMP_FORCE)

    def super_jump(self) -> None:
        self.velocity = self.velocity.with_y(SUPER_JUMP_FORCE)

    def set_horizontal_velocity(self, vx: float) -> None:
        self.velocity = self.velocity.with_x(clamp(vx, -MAX_HORIZONTAL_SPEED, MAX_HORIZONTAL_SPEED))

    def update(self) -> None:
        self.velocity = self.velocity.with_y(self.velocity.y + GRAVITY)
        if self.position.y < self.max_height_reached:
            self.max_height_reached = self.position.y
        super().update()


class Platform(Entity):
    def __init__(self, position: Vector2D, kind: PlatformKind = PlatformKind.NORMAL) -> None:
        super().__init__(position, Vector2D(PLATFORM_WIDTH, PLATFORM_HEIGHT))
        self._kind = kind
        self._behavior = BEHAVIORS[kind]
        # Horizontal heading for moving platforms
        self.direction = 1.0

    @property
    def kind(self) -> PlatformKind:
        return self._kind

    @property
    def intensity(self) -> int:
        return self._behavior.intensity

    def on_landing(self, player: Player) -> None:
        logger.debug("landing on %s platform at (%.2f, %.2f)", self._kind.value, self.position.x, self.position.y)
        self._behavior.on_landing(player)

    def update(self) -> None:
        self._behavior.on_tick(self)
        super().update()
