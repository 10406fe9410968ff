# materials/diffuse_light.py
from typing import Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that radiates from its front face only.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, rec, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance.

        Args:
            rec (HitRecord): The hit being shaded; back-face hits emit nothing.
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture.
        """
        if not rec.front_face:
            return Vector3(0, 0, 0)
        return self.texture.value(u, v, p)
