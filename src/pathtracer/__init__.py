"""Offline Monte Carlo path tracer.

Subpackages:
    core: vectors, rays, bounding boxes, orthonormal bases, sampling helpers
    geometry: intersectable surfaces, transforms, media and the BVH
    materials: materials, textures, Perlin noise and direction PDFs
    camera: thin-lens camera with motion blur
    renderer: radiance integrator, threaded scanline scheduler, image output
"""

__version__ = "0.1.0"
