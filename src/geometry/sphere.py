# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point p on the unit sphere centered at the origin.

    u is the angle around the Y axis with the seam at X=+1, v the angle from
    Y=-1 to Y=+1, both scaled to [0, 1]:
        <1 0 0> -> <0.00 0.50>      <-1  0  0> -> <0.50 0.50>
        <0 1 0> -> <  -  1.00>      < 0 -1  0> -> <  -  0.00>
        <0 0 1> -> <0.25 0.50>      < 0  0 -1> -> <0.75 0.50>
    """
    # Clamp guards acos against rounding just outside [-1, 1].
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, -p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to
    center1 at time1.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material: int):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float, time1: float) -> AABB:
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))

class Sphere(MovingSphere):
    """
    Represents a sphere defined by its center, radius, and material.
    A stationary sphere is a moving sphere whose two centers coincide.
    """
    def __init__(self, center: Vector3, radius: float, material: int):
        super().__init__(center, center, 0.0, 1.0, radius, material)

    def center(self, time: float) -> Vector3:
        return self.center0

    def bounding_box(self, time0: float, time1: float) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(abs(self.radius), abs(self.radius), abs(self.radius))
        return AABB(self.center0 - offset, self.center0 + offset)
