"""Demo scenes.

Each builder returns a :class:`Scene` with a fully bounded world, a camera,
a background color and, where the scene has a small bright light, a
``lights`` surface used for importance sampling.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.errors import SceneError
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import FlipFace, RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import CheckerTexture, ImageTexture, NoiseTexture
from pathtracer.core.utils import random_vector

logger = logging.getLogger(__name__)

SKY = Color(0.70, 0.80, 1.00)
BLACK = Color(0, 0, 0)


@dataclass
class Scene:
    world: Hittable
    camera: Camera
    background: Color
    lights: Optional[Hittable] = None


def _earth_texture(texture_path) -> ImageTexture:
    if texture_path is None:
        logger.warning("No texture image given; the earth will render cyan")
        return ImageTexture(None)
    return load_texture(texture_path)


def random_spheres(aspect_ratio: float, rng, texture_path=None) -> Scene:
    """Ground of checkers, a field of small random spheres and three large ones."""
    world = HittableList()

    checker = CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    world.add(Sphere(Point3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1)
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20.0,
                    aspect_ratio, aperture=0.1, focus_dist=10.0, time0=0.0, time1=1.0)
    return Scene(BVHNode.from_list(world, 0.0, 1.0, rng), camera, SKY)


def two_spheres(aspect_ratio: float, rng, texture_path=None) -> Scene:
    checker = Lambertian(CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9)))
    world = HittableList([
        Sphere(Point3(0, -10, 0), 10, checker),
        Sphere(Point3(0, 10, 0), 10, checker),
    ])
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20.0, aspect_ratio)
    return Scene(world, camera, SKY)


def two_perlin_spheres(aspect_ratio: float, rng, texture_path=None) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, rng))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
    ])
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20.0, aspect_ratio)
    return Scene(world, camera, SKY)


def earth(aspect_ratio: float, rng, texture_path=None) -> Scene:
    globe = Sphere(Point3(0, 0, 0), 2, Lambertian(_earth_texture(texture_path)))
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0), 20.0, aspect_ratio)
    return Scene(HittableList([globe]), camera, SKY)


def simple_light(aspect_ratio: float, rng, texture_path=None) -> Scene:
    marble = Lambertian(NoiseTexture(4.0, rng))
    light = XYRect(3, 5, 1, 3, -2, DiffuseLight(Color(4, 4, 4)))
    world = HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
        light,
    ])
    camera = Camera(Point3(26, 3, 6), Point3(0, 2, 0), Vector3(0, 1, 0), 20.0, aspect_ratio)
    return Scene(world, camera, BLACK, lights=light)


def _cornell_walls(light_rect: XZRect) -> HittableList:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    return HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        FlipFace(light_rect),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ])


def _cornell_camera(aspect_ratio: float) -> Camera:
    return Camera(Point3(278, 278, -800), Point3(278, 278, 0), Vector3(0, 1, 0), 40.0, aspect_ratio)


def cornell_box(aspect_ratio: float, rng, texture_path=None) -> Scene:
    """Cornell box with a metal block and a glass sphere; light and sphere are sampled."""
    light = DiffuseLight(Color(15, 15, 15))
    world = _cornell_walls(XZRect(213, 343, 227, 332, 554, light))

    aluminum = Metal(Color(0.8, 0.85, 0.88), 0.0)
    tall = Box(Point3(0, 0, 0), Point3(165, 330, 165), aluminum)
    world.add(Translate(RotateY(tall, 15), Vector3(265, 0, 295)))

    glass_sphere = Sphere(Point3(190, 90, 190), 90, Dielectric(1.5))
    world.add(glass_sphere)

    lights = HittableList([
        XZRect(213, 343, 227, 332, 554, None),
        Sphere(Point3(190, 90, 190), 90, None),
    ])
    return Scene(world, _cornell_camera(aspect_ratio), BLACK, lights=lights)


def cornell_smoke(aspect_ratio: float, rng, texture_path=None) -> Scene:
    """Cornell box whose two blocks are replaced by black and white smoke."""
    light = DiffuseLight(Color(7, 7, 7))
    world = _cornell_walls(XZRect(113, 443, 127, 432, 554, light))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    box1 = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    box2 = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 165, 165), white), -18),
                     Vector3(130, 0, 65))
    world.add(ConstantMedium(box1, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(box2, 0.01, Color(1, 1, 1)))

    lights = XZRect(113, 443, 127, 432, 554, None)
    return Scene(world, _cornell_camera(aspect_ratio), BLACK, lights=lights)


def final_scene(aspect_ratio: float, rng, texture_path=None) -> Scene:
    """Every feature at once: box field, motion blur, glass, fog, textures, instancing."""
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes.add(Box(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode.from_list(boxes, 0.0, 1.0, rng))

    light = XZRect(123, 423, 147, 412, 554, DiffuseLight(Color(7, 7, 7)))
    world.add(FlipFace(light))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Point3(400, 200, 400), 100, Lambertian(_earth_texture(texture_path))))
    world.add(Sphere(Point3(220, 280, 300), 80, Lambertian(NoiseTexture(0.1, rng))))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    cluster = HittableList([
        Sphere(random_vector(rng, 0, 165), 10, white) for _ in range(1000)
    ])
    world.add(Translate(RotateY(BVHNode.from_list(cluster, 0.0, 1.0, rng), 15),
                        Vector3(-100, 270, 395)))

    camera = Camera(Point3(478, 278, -600), Point3(278, 278, 0), Vector3(0, 1, 0), 40.0,
                    aspect_ratio, time0=0.0, time1=1.0)
    lights = XZRect(123, 423, 147, 412, 554, None)
    return Scene(world, camera, BLACK, lights=lights)


@dataclass(frozen=True)
class SceneInfo:
    builder: Callable[..., Scene]
    aspect_ratio: float
    description: str


SCENES: Dict[str, SceneInfo] = {
    "random_spheres": SceneInfo(random_spheres, 16.0 / 9.0, "Random spheres with motion blur"),
    "two_spheres": SceneInfo(two_spheres, 16.0 / 9.0, "Two checkered spheres"),
    "two_perlin_spheres": SceneInfo(two_perlin_spheres, 16.0 / 9.0, "Two marble (Perlin) spheres"),
    "earth": SceneInfo(earth, 16.0 / 9.0, "Image-textured globe (needs --texture)"),
    "simple_light": SceneInfo(simple_light, 16.0 / 9.0, "Marble spheres lit by a rectangle"),
    "cornell_box": SceneInfo(cornell_box, 1.0, "Cornell box, importance-sampled light"),
    "cornell_smoke": SceneInfo(cornell_smoke, 1.0, "Cornell box with smoke blocks"),
    "final_scene": SceneInfo(final_scene, 1.0, "Everything together"),
}


def build_scene(name: str, rng, aspect_ratio: Optional[float] = None, texture_path=None) -> Scene:
    """Build a registered scene, using its preferred aspect ratio unless one is given."""
    try:
        info = SCENES[name]
    except KeyError:
        raise SceneError(f"Unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    if aspect_ratio is None:
        aspect_ratio = info.aspect_ratio
    logger.info("Building scene %s", name)
    return info.builder(aspect_ratio, rng, texture_path)
