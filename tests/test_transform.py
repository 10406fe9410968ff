"""Unit tests for Translate, RotateY and FlipFace."""

import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.errors import BoundingBoxError
from pathtracer.geometry.box import Box
from pathtracer.geometry.aarect import XZRect
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.transform import FlipFace, RotateY, Translate


def close(a, b, tol=1e-9):
    return (a - b).length() < tol


class Unbounded(Hittable):
    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


class TestTranslate:
    def test_hit_point_is_moved(self):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, None), Vector3(10, 0, 0))
        rec = moved.hit(Ray(Vector3(10, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert math.isclose(rec.t, 4.0)
        assert close(rec.p, Vector3(10, 0, 1))
        assert close(rec.normal, Vector3(0, 0, 1))
        assert rec.front_face

    def test_untranslated_position_misses(self):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, None), Vector3(10, 0, 0))
        assert moved.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_bounding_box(self):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, None), Vector3(1, 2, 3))
        box = moved.bounding_box(0, 1)
        assert box.minimum == Vector3(0, 1, 2)
        assert box.maximum == Vector3(2, 3, 4)


class TestRotateY:
    def test_rotated_box_bounds(self):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), None)
        rotated = RotateY(box, 90)
        bbox = rotated.bounding_box(0, 1)
        assert close(bbox.minimum, Vector3(0, 0, -1), 1e-9)
        assert close(bbox.maximum, Vector3(1, 1, 0), 1e-9)

    def test_rotated_hit(self):
        # A box spanning x in [0, 2] rotated 90 degrees spans z in [-2, 0].
        box = Box(Vector3(0, 0, 0), Vector3(2, 1, 0.5), None)
        rotated = RotateY(box, 90)
        rec = rotated.hit(Ray(Vector3(0.25, 0.5, 5), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 5.0, abs_tol=1e-9)
        assert close(rec.normal, Vector3(0, 0, 1), 1e-9)

    def test_requires_bounded_child(self):
        with pytest.raises(BoundingBoxError):
            RotateY(Unbounded(), 30)


class TestFlipFace:
    def test_inverts_front_face(self):
        rect = XZRect(0, 1, 0, 1, 1, None)
        ray = Ray(Vector3(0.5, 0, 0.5), Vector3(0, 1, 0))
        assert not rect.hit(ray, 0.0, math.inf).front_face
        assert FlipFace(rect).hit(ray, 0.0, math.inf).front_face

    def test_delegates_box_and_pdf(self):
        rect = XZRect(-1, 1, -1, 1, 5, None)
        flipped = FlipFace(rect)
        assert flipped.bounding_box(0, 1).maximum == rect.bounding_box(0, 1).maximum
        d = Vector3(0, 1, 0)
        assert flipped.pdf_value(Vector3(0, 0, 0), d) == rect.pdf_value(Vector3(0, 0, 0), d)
