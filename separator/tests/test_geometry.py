"""Unit tests for the tolerance-aware geometric predicates."""
import numpy as np
import pytest

from separator.core.geometry import (
    as_polygon, is_clockwise, is_convex, orientation, point_on_segment, points_match,
    polygon_area, polygon_signed_area, ray_hit, reflex_vertices, segment_intersection,
)


class TestOrientation:

    def test_clockwise_turn_is_positive(self):
        assert orientation((0, 0), (0, 10), (10, 10)) == pytest.approx(100.0)

    def test_counter_clockwise_turn_is_negative(self):
        assert orientation((0, 0), (10, 10), (0, 10)) == pytest.approx(-100.0)

    def test_collinear_is_zero(self):
        assert orientation((0, 0), (1, 1), (2, 2)) == 0.0

    def test_accepts_numpy_points(self):
        a, b, c = np.array([[0.0, 0.0], [0.0, 10.0], [10.0, 10.0]])
        assert orientation(a, b, c) > 0


class TestPointPredicates:

    def test_points_match_within_tolerance(self):
        assert points_match((0, 0), (0.05, -0.05))

    def test_points_match_outside_tolerance(self):
        assert not points_match((0, 0), (0.2, 0))
        assert not points_match((0, 0), (0, 0.2))

    def test_points_match_custom_eps(self):
        assert points_match((0, 0), (0.9, 0.9), eps=1.0)

    def test_point_on_horizontal_segment(self):
        assert point_on_segment((5, 0), (0, 0), (10, 0))
        assert point_on_segment((5, 0.05), (0, 0), (10, 0))

    def test_point_off_segment(self):
        assert not point_on_segment((5, 1), (0, 0), (10, 0))
        assert not point_on_segment((11, 0), (0, 0), (10, 0))

    def test_point_on_vertical_segment(self):
        assert point_on_segment((0, 5), (0, 0), (0, 10))
        assert not point_on_segment((0.5, 5), (0, 0), (0, 10))
        assert not point_on_segment((0, 12), (0, 0), (0, 10))

    def test_segment_endpoint_order_irrelevant(self):
        assert point_on_segment((5, 5), (10, 10), (0, 0))


class TestSegmentIntersection:

    def test_crossing_segments(self):
        hit = segment_intersection((0, 0), (10, 10), (0, 10), (10, 0))
        assert hit is not None
        assert np.allclose(hit, (5, 5))

    def test_parallel_segments(self):
        assert segment_intersection((0, 0), (10, 0), (0, 5), (10, 5)) is None

    def test_lines_cross_outside_segments(self):
        assert segment_intersection((0, 0), (2, 0), (5, -1), (5, 1)) is None


class TestRayHit:

    def test_hit_beyond_second_point(self):
        hit = ray_hit((0, 0), (0, 5), (-5, 10), (5, 10))
        assert hit is not None
        assert np.allclose(hit, (0, 10))

    def test_no_hit_behind_origin(self):
        assert ray_hit((0, 0), (0, 5), (-5, -10), (5, -10)) is None

    def test_no_hit_between_origin_and_second_point(self):
        assert ray_hit((0, 0), (0, 10), (-5, 5), (5, 5)) is None

    def test_parallel_edge(self):
        assert ray_hit((0, 0), (0, 5), (1, 0), (1, 10)) is None

    def test_hit_must_lie_on_segment(self):
        assert ray_hit((0, 0), (0, 5), (1, 10), (5, 10)) is None


class TestPolygonHelpers:

    def test_square_is_clockwise(self, square):
        assert polygon_signed_area(square) == pytest.approx(-100.0)
        assert polygon_area(square) == pytest.approx(100.0)
        assert is_clockwise(square)
        assert not is_clockwise(square[::-1])

    def test_reflex_vertex_of_l_hexagon(self, l_hexagon):
        assert reflex_vertices(l_hexagon) == [3]
        assert not is_convex(l_hexagon)

    def test_square_is_convex(self, square):
        assert reflex_vertices(square) == []
        assert is_convex(square)

    def test_as_polygon_copies(self, square):
        src = np.array(square)
        pts = as_polygon(src)
        pts[0, 0] = 42.0
        assert src[0, 0] == 0.0

    @pytest.mark.parametrize('bad', [
        [(0, 0), (1, 1)],
        [(0, 0, 0), (1, 1, 1), (2, 0, 0)],
        [(0, 0), (1, float('nan')), (2, 0)],
        [(0, 0), (1,), (2, 0)],
        'abc',
    ])
    def test_as_polygon_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            as_polygon(bad)
