import math

import pytest

from hexwarz.geometry import (
    hexagon_points,
    point_in_polygon,
    ray_end,
    segment_intersects_polygon,
    segments_intersect,
)


def test_unit_hexagon_matches_source_corners():
    assert hexagon_points(1) == [(1, 0), (2, 0), (3, 1), (2, 2), (1, 2), (0, 1)]


@pytest.mark.parametrize("scale", [2, 40, 0.5])
def test_hexagon_scales_every_corner(scale):
    unit = hexagon_points(1)
    scaled = hexagon_points(scale)
    assert len(scaled) == 6
    for (ux, uy), (sx, sy) in zip(unit, scaled):
        assert sx == pytest.approx(ux * scale)
        assert sy == pytest.approx(uy * scale)


@pytest.mark.parametrize("angle", [0, 30, 90, 150, 210, 270, 330])
def test_ray_end_keeps_length(angle):
    end = ray_end((5, 7), 65, angle)
    assert math.dist((5, 7), end) == pytest.approx(65)


def test_ray_at_ninety_degrees_points_up():
    end = ray_end((0, 0), 10, 90)
    assert end == pytest.approx((0, -10))


def test_ray_at_zero_degrees_points_right():
    end = ray_end((3, 4), 10, 0)
    assert end[0] > 3
    assert end[1] == pytest.approx(4)


def test_ray_at_two_seventy_points_down():
    end = ray_end((0, 0), 10, 270)
    assert end[0] == pytest.approx(0, abs=1e-9)
    assert end[1] > 0


def test_crossing_segments_intersect():
    assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0)) is True


def test_parallel_segments_do_not_intersect():
    assert segments_intersect((0, 0), (2, 0), (0, 1), (2, 1)) is False


def test_segments_touching_at_endpoint_intersect():
    assert segments_intersect((0, 0), (1, 1), (1, 1), (2, 0)) is True


def test_collinear_overlapping_segments_intersect():
    assert segments_intersect((0, 0), (2, 0), (1, 0), (3, 0)) is True


def test_collinear_disjoint_segments_do_not_intersect():
    assert segments_intersect((0, 0), (1, 0), (2, 0), (3, 0)) is False


def test_intersection_is_symmetric():
    a1, a2, b1, b2 = (0, 0), (4, 1), (1, -2), (2, 3)
    assert segments_intersect(a1, a2, b1, b2) == segments_intersect(b1, b2, a1, a2)


def test_point_in_polygon_center_and_outside():
    hexagon = hexagon_points(40)
    assert point_in_polygon((60, 40), hexagon) is True
    assert point_in_polygon((500, 500), hexagon) is False
    assert point_in_polygon((-1, 40), hexagon) is False


def test_segment_inside_polygon_counts():
    hexagon = hexagon_points(40)
    assert segment_intersects_polygon((50, 30), (70, 50), hexagon) is True


def test_segment_crossing_polygon_counts():
    hexagon = hexagon_points(40)
    assert segment_intersects_polygon((60, 40), (60, -100), hexagon) is True


def test_segment_outside_polygon_does_not_count():
    hexagon = hexagon_points(40)
    assert segment_intersects_polygon((200, 0), (300, 100), hexagon) is False


def test_empty_polygon_never_intersects():
    assert segment_intersects_polygon((0, 0), (1, 1), []) is False