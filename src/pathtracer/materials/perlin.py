# materials/perlin.py
import math
import numpy as np
from numba import njit
from pathtracer.core.vector import Vector3

POINT_COUNT = 256

@njit(cache=True)
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Plain trilinear weights on the raw fractions, no smoothstep.
    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & 255]
                       ^ perm_y[(j + dj) & 255]
                       ^ perm_z[(k + dk) & 255])
                dot = (ranvec[idx, 0] * (u - di)
                       + ranvec[idx, 1] * (v - dj)
                       + ranvec[idx, 2] * (w - dk))
                accum += ((di * u + (1 - di) * (1.0 - u))
                          * (dj * v + (1 - dj) * (1.0 - v))
                          * (dk * w + (1 - dk) * (1.0 - w))
                          * dot)
    return accum

class Perlin:
    """
    Gradient (Perlin) noise over a 256-entry lattice of random unit vectors
    and three independently shuffled permutation tables.

    Tables are built once and never modified, so a single instance can be
    sampled from any number of threads.
    """
    def __init__(self, rng):
        ranvec = np.empty((POINT_COUNT, 3), dtype=np.float64)
        for i in range(POINT_COUNT):
            while True:
                x, y, z = rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)
                length = math.sqrt(x * x + y * y + z * z)
                if length > 1e-8:
                    break
            ranvec[i] = (x / length, y / length, z / length)
        self.ranvec = ranvec
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @staticmethod
    def _generate_perm(rng) -> np.ndarray:
        # Fisher-Yates, in place.
        p = list(range(POINT_COUNT))
        for i in range(POINT_COUNT - 1, 0, -1):
            target = rng.randint(0, i)
            p[i], p[target] = p[target], p[i]
        return np.array(p, dtype=np.int64)

    def noise(self, p: Vector3) -> float:
        return float(_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                            float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves at doubling frequency and halving weight."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
