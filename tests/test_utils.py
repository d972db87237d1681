import numpy as np

from tilt_jump.utils import AxisAlignedBox, Vector2D, clamp, grid_to_rgb, intersects


def box(x: float, y: float, w: float, h: float) -> AxisAlignedBox:
    return AxisAlignedBox(Vector2D(x, y), Vector2D(w, h))


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_vector_arithmetic() -> None:
    a = Vector2D(1.0, 2.0)
    b = Vector2D(0.5, -1.0)
    assert a + b == Vector2D(1.5, 1.0)
    assert a - b == Vector2D(0.5, 3.0)
    assert a * 2 == Vector2D(2.0, 4.0)
    assert 2 * a == Vector2D(2.0, 4.0)
    # values, not references
    assert a == Vector2D(1.0, 2.0)


def test_boxes_overlapping() -> None:
    assert intersects(box(0, 0, 4, 4), box(2, 2, 4, 4)) is True
    assert box(2, 2, 4, 4).intersects(box(0, 0, 4, 4)) is True


def test_touching_edges_do_not_intersect() -> None:
    assert intersects(box(0, 0, 2, 2), box(2, 0, 2, 2)) is False
    assert intersects(box(0, 0, 2, 2), box(0, 2, 2, 2)) is False
    # overlap on one axis only
    assert intersects(box(0, 0, 2, 2), box(1, 5, 2, 2)) is False


def test_grid_to_rgb_layout() -> None:
    grid = np.zeros((3, 5), dtype=np.uint8)
    grid[1, 4] = 255
    rgb = grid_to_rgb(grid, (200, 100, 0))
    assert rgb.shape == (5, 3, 3)
    assert tuple(rgb[4, 1]) == (200, 100, 0)
    assert tuple(rgb[0, 0]) == (0, 0, 0)
