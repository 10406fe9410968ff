# materials/isotropic.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.textures import Texture, as_texture

class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly over the
    whole sphere of directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> ScatterRecord:
        return ScatterRecord(
            Ray(rec.p, random_unit_vector(rng), ray_in.time),
            self.texture.value(rec.u, rec.v, rec.p),
        )
