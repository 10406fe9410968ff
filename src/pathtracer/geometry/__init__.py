"""Intersectable surfaces and the bounding volume hierarchy.

Modules:
    hittable: HitRecord and the Hittable base class
    sphere: static and moving spheres
    aarect: axis-aligned rectangles (XY, XZ, YZ)
    box: six-rectangle boxes
    transform: Translate, RotateY and FlipFace wrappers
    constant_medium: homogeneous participating media
    world: HittableList
    bvh: median-split BVHNode
"""
