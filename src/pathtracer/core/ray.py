# core/ray.py
from pathtracer.core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the
    shutter time at which it was cast (used for motion blur).
    """
    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
