# geometry/world.py
import random
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    A list of Hittable objects tested by linear scan. Also serves as a
    uniform mixture of light sources for importance sampling.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far, rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box

    def pdf_value(self, origin: Vector3, direction: Vector3) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        if not self.objects:
            return super().random(origin, rng)
        return self.objects[rng.randint(0, len(self.objects) - 1)].random(origin, rng)
