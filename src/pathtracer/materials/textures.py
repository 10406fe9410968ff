# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin

class Texture:
    """Base class for all textures. Textures are read-only once built."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at texture coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidColor; pass textures through."""
    if isinstance(albedo, Vector3):
        return SolidColor(albedo)
    return albedo

class CheckerTexture(Texture):
    """A 3D checker pattern, chosen by the sign of a product of sines."""
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture], scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like texture: a sine along z phase-shifted by turbulence."""
    def __init__(self, scale: float, rng):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(1, 1, 1) * 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p, 7)))

class ImageTexture(Texture):
    """
    Nearest-pixel lookup into an RGB raster. UVs are clamped to [0, 1] and
    v is flipped so that v = 1 is the top row of the image.
    """
    def __init__(self, data: Optional[np.ndarray]):
        # data: (height, width, 3) floats in [0, 1]
        self.data = data
        if data is None:
            self.width = self.height = 0
        else:
            self.height, self.width = data.shape[0], data.shape[1]

    @classmethod
    def from_image(cls, img: Image.Image) -> "ImageTexture":
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return cls(np.asarray(img, dtype=np.float64) / 255.0)

    @classmethod
    def from_file(cls, image_path) -> "ImageTexture":
        from pathtracer.materials.texture_loader import load_texture
        return load_texture(image_path)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        # Solid cyan marks a missing texture.
        if self.data is None:
            return Vector3(0, 1, 1)

        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        color = self.data[j, i]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
