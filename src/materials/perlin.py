# materials/perlin.py
import math
import random
from typing import Optional
from core.vector import Vector3
from core.utils import random_vector

PERLIN_POINT_COUNT = 256

def _hermite(t: float) -> float:
    return t * t * (3 - 2 * t)

class Perlin:
    """
    Gradient noise over a 256-entry table of random vectors indexed through
    three independent permutation tables. Built once, read-only afterwards.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        if rng is None:
            rng = random.Random()
        self.ranvec = [random_vector(rng, -1.0, 1.0) for _ in range(PERLIN_POINT_COUNT)]
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @staticmethod
    def _generate_perm(rng: random.Random) -> list:
        p = list(range(PERLIN_POINT_COUNT))
        rng.shuffle(p)
        return p

    def noise(self, p: Vector3) -> float:
        fi = math.floor(p.x)
        fj = math.floor(p.y)
        fk = math.floor(p.z)
        # Hermite smoothing of the cell fraction.
        u = _hermite(p.x - fi)
        v = _hermite(p.y - fj)
        w = _hermite(p.z - fk)
        i, j, k = int(fi), int(fj), int(fk)

        c = [[[self.ranvec[self.perm_x[(i + di) & 255] ^
                           self.perm_y[(j + dj) & 255] ^
                           self.perm_z[(k + dk) & 255]]
               for dk in range(2)]
              for dj in range(2)]
             for di in range(2)]

        return self._perlin_interp(c, u, v, w)

    @staticmethod
    def _perlin_interp(c, u: float, v: float, w: float) -> float:
        # The weights smooth the already smoothed fraction once more.
        uu = _hermite(u)
        vv = _hermite(v)
        ww = _hermite(w)
        accum = 0.0
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    weight_v = Vector3(u - i, v - j, w - k)
                    accum += ((i * uu + (1 - i) * (1 - uu)) *
                              (j * vv + (1 - j) * (1 - vv)) *
                              (k * ww + (1 - k) * (1 - ww)) *
                              c[i][j][k].dot(weight_v))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of noise octaves with halving weight, absolute-valued."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
