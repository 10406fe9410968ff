# materials/material.py
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

class ScatterRecord:
    """
    Outcome of a scatter: the outgoing ray, its color attenuation and,
    for diffuse materials, the PDF the direction was drawn from. A record
    without a PDF is specular and needs no importance-sampling weight.
    """
    def __init__(self, ray: Ray, attenuation: Vector3, pdf=None):
        self.ray = ray
        self.attenuation = attenuation
        self.pdf = pdf

    @property
    def is_specular(self) -> bool:
        return self.pdf is None

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec, rng) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterRecord or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def scattering_pdf(self, ray_in: Ray, rec, scattered: Ray) -> float:
        return 0.0

    def emitted(self, rec, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(0, 0, 0)
