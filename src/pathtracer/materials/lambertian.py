# materials/lambertian.py

import math
from typing import Union
from pathtracer.core.onb import ONB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_cosine_direction
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.pdf import CosinePDF
from pathtracer.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> ScatterRecord:
        """
        Draw a cosine-weighted direction around the normal.
        """
        uvw = ONB.build_from_w(rec.normal)
        direction = uvw.local(random_cosine_direction(rng))
        return ScatterRecord(
            Ray(rec.p, direction.normalize(), ray_in.time),
            self.texture.value(rec.u, rec.v, rec.p),
            CosinePDF(rec.normal),
        )

    def scattering_pdf(self, ray_in: Ray, rec, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return 0.0 if cosine < 0 else cosine / math.pi
