# geometry/aarect.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis of a rectangle's bounding box.
RECT_THICKNESS = 0.0001

class AARect(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``axis == k``.

    ``a0..a1`` and ``b0..b1`` span the two remaining axes in increasing axis
    order (x then y, x then z, or y then z). Use the ``xy``, ``xz`` and ``yz``
    constructors rather than calling this directly.
    """
    def __init__(self, axis: int, a0: float, a1: float, b0: float, b1: float,
                 k: float, material: int):
        if axis not in (0, 1, 2):
            raise IndexError(f"Rectangle axis out of range: {axis}")
        self.axis = axis
        self.a_axis, self.b_axis = [i for i in range(3) if i != axis]
        self.a0, self.a1 = a0, a1
        self.b0, self.b1 = b0, b1
        self.k = k
        self.material = material

    @classmethod
    def xy(cls, x0: float, x1: float, y0: float, y1: float, k: float, material: int) -> "AARect":
        return cls(2, x0, x1, y0, y1, k, material)

    @classmethod
    def xz(cls, x0: float, x1: float, z0: float, z1: float, k: float, material: int) -> "AARect":
        return cls(1, x0, x1, z0, z1, k, material)

    @classmethod
    def yz(cls, y0: float, y1: float, z0: float, z1: float, k: float, material: int) -> "AARect":
        return cls(0, y0, y1, z0, z1, k, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        p = ray.at(t)
        a = p[self.a_axis]
        b = p[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = p
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        outward = [0.0, 0.0, 0.0]
        outward[self.axis] = 1.0
        rec.set_face_normal(ray, Vector3(*outward))
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        # Padded on the flat axis.
        lo[self.axis] = self.k - RECT_THICKNESS
        hi[self.axis] = self.k + RECT_THICKNESS
        return AABB(Vector3(*lo), Vector3(*hi))
