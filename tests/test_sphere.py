"""Unit tests for sphere intersection and sphere light sampling."""

import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import MovingSphere, Sphere, sphere_uv


class TestSphereIntersection:
    def test_reference_hit(self):
        """Unit ray toward a sphere at (0,0,-1) of radius 0.5 hits at t=0.5."""
        sphere = Sphere(Vector3(0, 0, -1), 0.5, None)
        rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.0, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 0.5)
        assert (rec.normal - Vector3(0, 0, 1)).length() < 1e-12
        assert rec.front_face

    def test_miss(self):
        sphere = Sphere(Vector3(0, 0, -1), 0.5, None)
        assert sphere.hit(Ray(Vector3(0, 2, 0), Vector3(0, 0, -1)), 0.0, math.inf) is None

    def test_inside_hits_far_side_with_back_face(self):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, None)
        rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 0.001, math.inf)
        assert math.isclose(rec.t, 1.0)
        assert not rec.front_face
        assert (rec.normal - Vector3(0, 0, -1)).length() < 1e-12

    def test_falls_back_to_far_root(self):
        sphere = Sphere(Vector3(0, 0, -2), 0.5, None)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere.hit(ray, 2.0, math.inf)
        assert math.isclose(rec.t, 2.5)

    def test_outside_interval(self):
        sphere = Sphere(Vector3(0, 0, -2), 0.5, None)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.0, 1.0) is None

    def test_zero_direction_is_a_miss(self):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, None)
        assert sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, 0)), 0.0, math.inf) is None

    def test_material_and_uv_recorded(self):
        marker = object()
        sphere = Sphere(Vector3(0, 0, 0), 1.0, marker)
        rec = sphere.hit(Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0)), 0.0, math.inf)
        assert rec.material is marker
        assert 0.0 <= rec.u <= 1.0 and 0.0 <= rec.v <= 1.0

    def test_bounding_box(self):
        box = Sphere(Vector3(1, 2, 3), 0.5, None).bounding_box(0, 1)
        assert box.minimum == Vector3(0.5, 1.5, 2.5)
        assert box.maximum == Vector3(1.5, 2.5, 3.5)


class TestSphereUV:
    def test_poles_and_equator(self):
        assert math.isclose(sphere_uv(Vector3(0, 1, 0))[1], 1.0)
        assert math.isclose(sphere_uv(Vector3(0, -1, 0))[1], 0.0)
        u, v = sphere_uv(Vector3(-1, 0, 0))
        assert math.isclose(u, 0.0, abs_tol=1e-12) or math.isclose(u, 1.0)
        assert math.isclose(v, 0.5)
        u, _ = sphere_uv(Vector3(1, 0, 0))
        assert math.isclose(u, 0.5)


class TestMovingSphere:
    def test_center_interpolates(self):
        s = MovingSphere(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, None)
        assert s.center(0.0) == Vector3(0, 0, 0)
        assert s.center(0.5) == Vector3(1, 0, 0)
        assert s.center(1.0) == Vector3(2, 0, 0)

    def test_hit_depends_on_ray_time(self):
        s = MovingSphere(Vector3(0, 0, -5), Vector3(10, 0, -5), 0.0, 1.0, 0.5, None)
        early = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), time=0.0)
        late = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), time=1.0)
        assert s.hit(early, 0.0, math.inf) is not None
        assert s.hit(late, 0.0, math.inf) is None

    def test_bounding_box_covers_motion(self):
        s = MovingSphere(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.0, 1.0, 0.5, None)
        box = s.bounding_box(0.0, 1.0)
        assert box.minimum == Vector3(-0.5, -0.5, -0.5)
        assert box.maximum == Vector3(2.5, 0.5, 0.5)


class TestSphereLightSampling:
    def test_pdf_value_is_inverse_solid_angle(self):
        sphere = Sphere(Vector3(0, 0, -4), 1.0, None)
        origin = Vector3(0, 0, 0)
        cos_max = math.sqrt(1 - 1 / 16)
        expected = 1 / (2 * math.pi * (1 - cos_max))
        assert math.isclose(sphere.pdf_value(origin, Vector3(0, 0, -1)), expected)
        assert sphere.pdf_value(origin, Vector3(0, 0, 1)) == 0.0

    def test_random_directions_hit_sphere(self, rng):
        sphere = Sphere(Vector3(3, 1, -4), 1.0, None)
        origin = Vector3(0, 0, 0)
        for _ in range(200):
            d = sphere.random(origin, rng)
            assert sphere.hit(Ray(origin, d), 0.001, math.inf) is not None
