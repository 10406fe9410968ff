# core/utils.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the z=0 unit disk, used for lens sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def random_cosine_direction(rng) -> Vector3:
    """
    Cosine-weighted direction on the +z hemisphere.
    """
    r1 = rng.random()
    r2 = rng.random()
    z = math.sqrt(1.0 - r2)

    phi = 2.0 * math.pi * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    return Vector3(x, y, z)

def random_to_sphere(rng, radius: float, distance_squared: float) -> Vector3:
    """
    Uniform direction inside the cone (around +z) subtended by a sphere of
    the given radius whose center lies sqrt(distance_squared) away.
    """
    r1 = rng.random()
    r2 = rng.random()
    z = 1.0 + r2 * (math.sqrt(max(0.0, 1.0 - radius * radius / distance_squared)) - 1.0)

    phi = 2.0 * math.pi * r1
    x = math.cos(phi) * math.sqrt(1.0 - z * z)
    y = math.sin(phi) * math.sqrt(1.0 - z * z)
    return Vector3(x, y, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def safe_inverse(d: float) -> float:
    """1/d, with a signed infinity where IEEE division would produce one."""
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d
