import random

from tilt_jump.behaviors import PlatformKind
from tilt_jump.config import (
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
)
from tilt_jump.entities import Platform
from tilt_jump.utils import Vector2D
from tilt_jump.world import World


def test_initial_layout() -> None:
    world = World(random.Random(1))
    assert len(world.platforms) == PLATFORM_COUNT
    start = world.platforms[0]
    assert start.position == Vector2D(*START_PLATFORM)
    assert start.kind is PlatformKind.NORMAL
    assert world.platforms[1].position.y == INITIAL_FIRST_GAP_Y
    ys = [p.position.y for p in world.platforms[1:]]
    for lower, upper in zip(ys, ys[1:]):
        assert INITIAL_GAP_MIN <= lower - upper <= INITIAL_GAP_MAX
    for p in world.platforms:
        assert 0.0 <= p.position.x <= SCREEN_WIDTH - PLATFORM_WIDTH


def test_same_seed_same_layout() -> None:
    a = World(random.Random(42))
    b = World(random.Random(42))
    assert [(p.position, p.kind) for p in a.platforms] == [(p.position, p.kind) for p in b.platforms]


def test_reset_rebuilds_layout() -> None:
    world = World(random.Random(3))
    world.platforms.clear()
    world.reset()
    assert len(world.platforms) == PLATFORM_COUNT


def test_recycle_drops_platforms_below_window() -> None:
    world = World(random.Random(5))
    world.platforms[:] = [
        Platform(Vector2D(1.0, SCREEN_HEIGHT + DESPAWN_MARGIN)),
        Platform(Vector2D(1.0, SCREEN_HEIGHT + DESPAWN_MARGIN + 0.1)),
        Platform(Vector2D(1.0, 3.0)),
    ]
    assert world.recycle(0.0) == 1
    assert [p.position.y for p in world.platforms] == [SCREEN_HEIGHT + DESPAWN_MARGIN, 3.0]
    # camera moved up 10 cells
    assert world.recycle(-10.0) == 1
    assert [p.position.y for p in world.platforms] == [3.0]


def test_spawn_skips_when_empty() -> None:
    world = World(random.Random(5))
    world.platforms.clear()
    assert world.highest() is None
    assert world.spawn(0.0) is None
    assert world.platforms == []


def test_spawn_adds_one_above_highest() -> None:
    world = World(random.Random(9))
    world.platforms[:] = [Platform(Vector2D(2.0, 4.0)), Platform(Vector2D(2.0, 1.0))]
    new = world.spawn(0.0)
    assert new is not None
    assert len(world.platforms) == 3
    assert SPAWN_GAP_MIN <= 1.0 - new.position.y <= SPAWN_GAP_MAX
    assert world.highest() is new


def test_spawn_waits_when_top_is_far_enough_above() -> None:
    world = World(random.Random(9))
    world.platforms[:] = [Platform(Vector2D(2.0, -SPAWN_LOOKAHEAD))]
    assert world.spawn(0.0) is None
    assert len(world.platforms) == 1


def test_visible_filters_by_camera() -> None:
    world = World(random.Random(9))
    world.platforms[:] = [
        Platform(Vector2D(0.0, -13.0)),
        Platform(Vector2D(0.0, -9.0)),
        Platform(Vector2D(0.0, 16.0)),
    ]
    visible = world.visible(-10.0)
    assert [p.position.y for p in visible] == [-9.0, 16.0]
