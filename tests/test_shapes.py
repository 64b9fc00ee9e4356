import math

import pytest

from mujinplatformer.shapes import circle_vertices


def test_default_segment_count():
    assert len(circle_vertices(0, 0, 10)) == 100


def test_points_lie_on_circle():
    cx, cy, radius = 30, -12, 7
    for x, y in circle_vertices(cx, cy, radius, 16):
        assert math.hypot(x - cx, y - cy) == pytest.approx(radius)


def test_first_point_is_rightmost():
    x, y = circle_vertices(5, 8, 3, 12)[0]
    assert x == pytest.approx(8)
    assert y == pytest.approx(8)


def test_points_are_distinct():
    points = circle_vertices(0, 0, 5, 20)
    assert len({(round(x, 6), round(y, 6)) for x, y in points}) == 20


@pytest.mark.parametrize("segments", [0, -3])
def test_rejects_non_positive_segments(segments):
    with pytest.raises(ValueError):
        circle_vertices(0, 0, 1, segments)