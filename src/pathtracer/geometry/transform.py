# geometry/transform.py
import math
import random
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians
from pathtracer.core.vector import Vector3
from pathtracer.errors import BoundingBoxError
from pathtracer.geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves a child surface by a fixed offset.
    """
    def __init__(self, child: Hittable, offset: Vector3):
        self.child = child
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.child.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None
        # Directions are unchanged by a translation, so the normal and
        # front_face computed in child space still hold.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.child.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.child.pdf_value(origin - self.offset, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.child.random(origin - self.offset, rng)

class RotateY(Hittable):
    """
    Rotates a child surface about the Y axis by ``angle`` degrees.
    """
    def __init__(self, child: Hittable, angle: float):
        self.child = child
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = child.bounding_box(0.0, 1.0)
        if box is None:
            raise BoundingBoxError(f"RotateY needs a bounded child, got {child!r}")

        minimum = [math.inf, math.inf, math.inf]
        maximum = [-math.inf, -math.inf, -math.inf]
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    x = i * box.maximum.x + (1 - i) * box.minimum.x
                    y = j * box.maximum.y + (1 - j) * box.minimum.y
                    z = k * box.maximum.z + (1 - k) * box.minimum.z
                    corner = self._to_world(Vector3(x, y, z))
                    for c in range(3):
                        minimum[c] = min(minimum[c], corner[c])
                        maximum[c] = max(maximum[c], corner[c])
        self.bbox = AABB(Vector3(*minimum), Vector3(*maximum))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.child.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None
        # Rotation preserves dot products, so front_face carries over.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.bbox

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.child.pdf_value(self._to_object(origin), self._to_object(direction))

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._to_world(self.child.random(self._to_object(origin), rng))

class FlipFace(Hittable):
    """
    Reports the child's hits with front_face inverted, so a one-sided
    emitter faces the other way.
    """
    def __init__(self, child: Hittable):
        self.child = child

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        rec = self.child.hit(ray, t_min, t_max, rng)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.child.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return self.child.pdf_value(origin, direction)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.child.random(origin, rng)
