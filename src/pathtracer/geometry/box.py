# geometry/box.py
import random
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned box made of six rectangles between corners p0 and p1.
    """
    def __init__(self, p0: Vector3, p1: Vector3, material):
        self.box_min = p0
        self.box_max = p1
        self.sides = HittableList([
            XYRect(p0.x, p1.x, p0.y, p1.y, p1.z, material),
            XYRect(p0.x, p1.x, p0.y, p1.y, p0.z, material),
            XZRect(p0.x, p1.x, p0.z, p1.z, p1.y, material),
            XZRect(p0.x, p1.x, p0.z, p1.z, p0.y, material),
            YZRect(p0.y, p1.y, p0.z, p1.z, p1.x, material),
            YZRect(p0.y, p1.y, p0.z, p1.z, p0.x, material),
        ])

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max, rng)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self.box_min, self.box_max)
