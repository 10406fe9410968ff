# materials/metal.py
from typing import Optional, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterRecord(scattered, self.texture.value(rec.u, rec.v, rec.p))

        return None  # Absorb the ray if it does not scatter forward
