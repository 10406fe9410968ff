# materials/pdf.py
import math
from pathtracer.core.onb import ONB
from pathtracer.core.utils import random_cosine_direction
from pathtracer.core.vector import Vector3

class PDF:
    """
    A direction distribution: value() evaluates its density for a direction,
    generate() draws a direction from it.
    """
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")

class CosinePDF(PDF):
    """Cosine-weighted hemisphere around w."""
    def __init__(self, w: Vector3):
        self.uvw = ONB.build_from_w(w)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return 0.0 if cosine <= 0 else cosine / math.pi

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))

class HittablePDF(PDF):
    """Directions from origin toward a surface, usually a light."""
    def __init__(self, hittable, origin: Vector3):
        self.hittable = hittable
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.hittable.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.hittable.random(self.origin, rng)

class MixturePDF(PDF):
    """Equal-weight mixture of two PDFs."""
    def __init__(self, p0: PDF, p1: PDF):
        self.p = (p0, p1)

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self, rng) -> Vector3:
        if rng.random() < 0.5:
            return self.p[0].generate(rng)
        return self.p[1].generate(rng)
