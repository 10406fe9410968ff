# geometry/aarect.py
import math
import random
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis of a rectangle's bounding box.
PADDING = 0.0001

class AARect(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``k_axis == k`` and spanning
    [a0, a1] x [b0, b1] over the other two axes. Use the XYRect, XZRect and
    YZRect subclasses rather than this class directly.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.k_axis] = 1.0
        return Vector3(*n)

    def _point(self, a: float, b: float, k: float) -> Vector3:
        p = [0.0, 0.0, 0.0]
        p[self.a_axis] = a
        p[self.b_axis] = b
        p[self.k_axis] = k
        return Vector3(*p)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        dk = ray.direction[self.k_axis]
        if dk == 0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.k_axis]) / dk
        if t < t_min or t > t_max:
            return None
        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None
        rec = HitRecord(p=ray.at(t), t=t,
                        u=(a - self.a0) / (self.a1 - self.a0),
                        v=(b - self.b0) / (self.b1 - self.b0),
                        material=self.material)
        rec.set_face_normal(ray, self._outward_normal())
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k - PADDING),
                    self._point(self.a1, self.b1, self.k + PADDING))

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        rec = self.hit(Ray(origin, direction), 0.001, math.inf)
        if rec is None:
            return 0.0
        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(direction.dot(rec.normal)) / direction.length()
        return distance_squared / (cosine * self.area())

    def random(self, origin: Vector3, rng) -> Vector3:
        random_point = self._point(rng.uniform(self.a0, self.a1),
                                   rng.uniform(self.b0, self.b1),
                                   self.k)
        return random_point - origin

class XYRect(AARect):
    """Rectangle in the plane z = k, spanning [x0, x1] x [y0, y1]."""
    a_axis, b_axis, k_axis = 0, 1, 2

class XZRect(AARect):
    """Rectangle in the plane y = k, spanning [x0, x1] x [z0, z1]."""
    a_axis, b_axis, k_axis = 0, 2, 1

class YZRect(AARect):
    """Rectangle in the plane x = k, spanning [y0, y1] x [z0, z1]."""
    a_axis, b_axis, k_axis = 1, 2, 0
