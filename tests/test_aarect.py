"""Unit tests for axis-aligned rectangles and boxes."""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box


class TestRectIntersection:
    def test_xy_hit_and_uv(self):
        rect = XYRect(0, 2, 0, 4, -1, None)
        rec = rect.hit(Ray(Vector3(0.5, 3, 0), Vector3(0, 0, -1)), 0.0, math.inf)
        assert math.isclose(rec.t, 1.0)
        assert math.isclose(rec.u, 0.25)
        assert math.isclose(rec.v, 0.75)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face

    def test_xz_back_face(self):
        rect = XZRect(0, 1, 0, 1, 1, None)
        rec = rect.hit(Ray(Vector3(0.5, 0, 0.5), Vector3(0, 1, 0)), 0.0, math.inf)
        assert not rec.front_face
        assert rec.normal == Vector3(0, -1, 0)

    def test_yz_outside_extent(self):
        rect = YZRect(0, 1, 0, 1, 3, None)
        assert rect.hit(Ray(Vector3(0, 2, 0.5), Vector3(1, 0, 0)), 0.0, math.inf) is None

    def test_parallel_ray_misses(self):
        rect = XYRect(0, 1, 0, 1, 0, None)
        assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(1, 0, 0)), 0.0, math.inf) is None

    def test_interval(self):
        rect = XYRect(0, 1, 0, 1, -5, None)
        assert rect.hit(Ray(Vector3(0.5, 0.5, 0), Vector3(0, 0, -1)), 0.0, 4.0) is None

    @pytest.mark.parametrize("rect, axis", [
        (XYRect(0, 1, 2, 3, 4, None), 2),
        (XZRect(0, 1, 2, 3, 4, None), 1),
        (YZRect(0, 1, 2, 3, 4, None), 0),
    ])
    def test_bounding_box_is_padded_on_flat_axis(self, rect, axis):
        box = rect.bounding_box(0, 1)
        assert box.minimum[axis] < 4 < box.maximum[axis]
        for a in range(3):
            assert box.minimum[a] <= box.maximum[a]


class TestRectLightSampling:
    def test_pdf_value_matches_area_formula(self):
        rect = XZRect(-1, 1, -1, 1, 5, None)
        origin = Vector3(0, 0, 0)
        # Straight up: distance 5, cos 1, area 4.
        assert math.isclose(rect.pdf_value(origin, Vector3(0, 1, 0)), 25 / 4)
        assert rect.pdf_value(origin, Vector3(0, -1, 0)) == 0.0

    def test_random_points_on_rect(self, rng):
        rect = XZRect(-1, 1, -2, 2, 5, None)
        origin = Vector3(0, 1, 0)
        for _ in range(100):
            d = rect.random(origin, rng)
            p = origin + d
            assert math.isclose(p.y, 5)
            assert -1 <= p.x <= 1 and -2 <= p.z <= 2

    def test_pdf_integrates_to_one(self, rng):
        """Monte Carlo estimate of the solid-angle integral of pdf_value."""
        rect = XZRect(-1, 1, -1, 1, 2, None)
        origin = Vector3(0, 0, 0)
        n = 40000
        total = 0.0
        for _ in range(n):
            # Uniform directions over the sphere, density 1/(4 pi).
            z = rng.uniform(-1, 1)
            phi = rng.uniform(0, 2 * math.pi)
            r = math.sqrt(1 - z * z)
            d = Vector3(r * math.cos(phi), z, r * math.sin(phi))
            total += rect.pdf_value(origin, d) * 4 * math.pi
        assert abs(total / n - 1.0) < 0.1


class TestBox:
    def test_box_hit_front(self):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), None)
        rec = box.hit(Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert math.isclose(rec.t, 4.0)
        assert rec.normal == Vector3(0, 0, 1)

    def test_box_bounding_box_is_corners(self):
        box = Box(Vector3(0, 1, 2), Vector3(3, 4, 5), None)
        bbox = box.bounding_box(0, 1)
        assert bbox.minimum == Vector3(0, 1, 2)
        assert bbox.maximum == Vector3(3, 4, 5)
