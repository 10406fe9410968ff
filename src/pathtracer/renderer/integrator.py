# renderer/integrator.py
import math
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.world import HittableList
from pathtracer.materials.pdf import HittablePDF, MixturePDF

# Minimum hit distance; keeps a scattered ray from re-hitting its own origin.
EPSILON = 0.001

def ray_color(ray: Ray, background: Vector3, world, depth: int, rng,
              lights=None) -> Vector3:
    """
    Estimate the radiance arriving along ``ray``.

    Paths are truncated after ``depth`` bounces (a small bias, not Russian
    roulette). Specular scatters carry no PDF and are followed directly;
    diffuse scatters are weighted by scattering_pdf / pdf, sampling toward
    ``lights`` half of the time when lights are given.
    """
    # An empty light list has nothing to sample.
    if isinstance(lights, HittableList) and not lights.objects:
        lights = None
    radiance = Vector3(0, 0, 0)
    throughput = Vector3(1, 1, 1)

    for _ in range(depth):
        rec = world.hit(ray, EPSILON, math.inf, rng)
        if rec is None:
            return radiance + throughput * background

        emitted = rec.material.emitted(rec, rec.u, rec.v, rec.p)
        radiance = radiance + throughput * emitted

        srec = rec.material.scatter(ray, rec, rng)
        if srec is None:
            return radiance

        if srec.is_specular:
            throughput = throughput * srec.attenuation
            ray = srec.ray
            continue

        if lights is not None:
            pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
            scattered = Ray(rec.p, pdf.generate(rng), ray.time)
        else:
            pdf = srec.pdf
            scattered = srec.ray
        pdf_value = pdf.value(scattered.direction)
        if not (pdf_value > 0 and math.isfinite(pdf_value)):
            return radiance

        weight = rec.material.scattering_pdf(ray, rec, scattered) / pdf_value
        throughput = throughput * srec.attenuation * weight
        ray = scattered

    return radiance
