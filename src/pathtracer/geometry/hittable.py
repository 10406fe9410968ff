# geometry/hittable.py
import random
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, u: float = 0, v: float = 0,
                 front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection, facing the ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Texture coordinates
        self.v = v
        self.front_face = front_face  # Whether the hit was on the front side
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Surfaces usable as importance-sampling targets (lights) also override
    pdf_value() and random().
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        return 0.0

    def random(self, origin: Vector3, rng) -> Vector3:
        return Vector3(1, 0, 0)
