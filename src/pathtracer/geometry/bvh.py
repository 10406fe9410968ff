# geometry/bvh.py
import logging
import random
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.errors import BoundingBoxError
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

def _require_box(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise BoundingBoxError(f"No bounding box for {obj!r} in BVH construction")
    return box

class BVHNode(Hittable):
    """
    Median-split bounding volume hierarchy node.

    Each node picks a random axis, sorts its span of objects by the minimum
    corner of their boxes along that axis and splits at the median index.
    A node over a single object references it from both children.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float, time1: float, rng=random):
        objects = list(objects[start:end])
        axis = rng.randint(0, 2)
        object_span = len(objects)

        def key(obj):
            return _require_box(obj, time0, time1).minimum[axis]

        if object_span == 0:
            raise ValueError("Cannot build a BVH over an empty object list")
        if object_span == 1:
            self.left = self.right = objects[0]
        elif object_span == 2:
            if key(objects[0]) <= key(objects[1]):
                self.left, self.right = objects[0], objects[1]
            else:
                self.left, self.right = objects[1], objects[0]
        else:
            objects.sort(key=key)
            mid = object_span // 2
            self.left = BVHNode(objects, 0, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, object_span, time0, time1, rng)

        self.box = AABB.surrounding_box(
            _require_box(self.left, time0, time1),
            _require_box(self.right, time0, time1),
        )

    @classmethod
    def from_list(cls, hittable_list, time0: float, time1: float, rng=random) -> "BVHNode":
        objects = hittable_list.objects
        logger.debug("Building BVH over %d objects", len(objects))
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=random) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        # Anything on the right must beat the left hit to matter.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left is not None else t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box
