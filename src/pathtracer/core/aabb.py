# core/aabb.py
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import safe_inverse

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # A zero direction component gives infinite slab bounds; a NaN bound
        # (origin on the slab plane) fails both comparisons and leaves the
        # running interval unchanged.
        for a in range(3):
            invD = safe_inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        """Smallest box enclosing both boxes."""
        small = Vector3(*(min(a, b) for a, b in zip(box0.minimum, box1.minimum)))
        big = Vector3(*(max(a, b) for a, b in zip(box0.maximum, box1.maximum)))
        return AABB(small, big)
