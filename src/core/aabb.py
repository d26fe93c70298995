# src/core/aabb.py
import math
from core.vector import Vector3

def _inverse(d: float) -> float:
    # IEEE semantics: a zero component becomes a signed infinity.
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def zero() -> "AABB":
        """Degenerate box at the origin, used when an object has no bounds."""
        return AABB(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0))

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            invD = _inverse(ray.direction[a])
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def contains(self, p: Vector3) -> bool:
        return all(self.minimum[a] <= p[a] <= self.maximum[a] for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
