# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.textures import Texture

class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (smoke, fog) filling a convex boundary.

    A ray entering the boundary travels a random free-flight distance with
    mean 1/density before scattering; if that distance exceeds the chord
    through the boundary, the ray passes through untouched.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + 0.0001, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], keeping the log finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(p=ray.at(t), normal=Vector3(1, 0, 0), t=t,
                         front_face=True, material=self.phase_function)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
