"""Platform kinds and their landing/tick behavior table."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .config import (
    BOUNCY_INTENSITY,
    KIND_WEIGHTS,
    MOVING_INTENSITY,
    MOVING_PLATFORM_SPEED,
    NORMAL_INTENSITY,
    SCREEN_WIDTH,
)
from .utils import clamp

if TYPE_CHECKING:
    from .entities import Platform, Player


class PlatformKind(Enum):
    NORMAL = "normal"
    BOUNCY = "bouncy"
    MOVING = "moving"


@dataclass(frozen=True)
class PlatformBehavior:
    on_landing: Callable[[Player], None]
    on_tick: Callable[[Platform], None]
    intensity: int


def _land_jump(player: Player) -> None:
    player.jump()


def _land_super_jump(player: Player) -> None:
    player.super_jump()


def _tick_still(platform: Platform) -> None:
    pass


def _tick_moving(platform: Platform) -> None:
    # Moves the position directly; velocity stays zero. Held inside the
    # screen so the generic wrap never teleports it to the other edge.
    right = SCREEN_WIDTH - platform.size.x
    x = clamp(platform.position.x + platform.direction * MOVING_PLATFORM_SPEED, 0.0, right)
    platform.position = platform.position.with_x(x)
    if x <= 0 or x >= right:
        platform.direction *= -1


BEHAVIORS: dict[PlatformKind, PlatformBehavior] = {
    PlatformKind.NORMAL: PlatformBehavior(_land_jump, _tick_still, NORMAL_INTENSITY),
    PlatformKind.BOUNCY: PlatformBehavior(_land_super_jump, _tick_still, BOUNCY_INTENSITY),
    PlatformKind.MOVING: PlatformBehavior(_land_jump, _tick_moving, MOVING_INTENSITY),
}


def choose_kind(rng: random.Random) -> PlatformKind:
    """Weighted pick over a uniform draw in [0, 100)."""
    roll = rng.randrange(100)
    normal, bouncy, _ = KIND_WEIGHTS
    if roll < normal:
        return PlatformKind.NORMAL
    if roll < normal + bouncy:
        return PlatformKind.BOUNCY
    return PlatformKind.MOVING
