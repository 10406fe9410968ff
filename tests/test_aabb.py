"""Unit tests for the AABB slab test."""

import math

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

UNIT_BOX = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))


class TestAABBHit:
    def test_ray_through_box(self):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_ray_missing_box(self):
        ray = Ray(Vector3(2, 2, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_ray_pointing_away(self):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, -1))
        assert not UNIT_BOX.hit(ray, 0.001, math.inf)

    def test_negative_direction_components(self):
        ray = Ray(Vector3(3, 3, 3), Vector3(-1, -1, -1))
        assert UNIT_BOX.hit(ray, 0.0, math.inf)

    def test_ray_inside_box_hits_in_every_direction(self, rng):
        origin = Vector3(0.3, 0.6, 0.5)
        for _ in range(100):
            d = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
            assert UNIT_BOX.hit(Ray(origin, d), 0.0, math.inf)

    def test_zero_direction_component_parallel_outside(self):
        # Parallel to the x slabs and outside them.
        ray = Ray(Vector3(5, 0.5, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.0, math.inf)

    def test_zero_direction_component_parallel_inside(self):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert UNIT_BOX.hit(ray, 0.0, math.inf)

    def test_interval_limits(self):
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert not UNIT_BOX.hit(ray, 0.0, 4.0)
        assert not UNIT_BOX.hit(ray, 7.0, math.inf)

    def test_disjoint_slab_intervals(self):
        # Enters the x slab only after leaving the y slab.
        ray = Ray(Vector3(-2, 0.5, 0.5), Vector3(1, 1, 0))
        assert not UNIT_BOX.hit(ray, 0.0, math.inf)


class TestSurroundingBox:
    def test_union(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 0.5, 2), Vector3(0.5, 3, 4))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, 0, 0)
        assert box.maximum == Vector3(1, 3, 4)
