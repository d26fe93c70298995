# geometry/box.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from geometry.aarect import AARect
from geometry.world import HittableList

class Box(Hittable):
    """
    Axis-aligned box made of six rectangles spanning p0 (min corner) to
    p1 (max corner).
    """
    def __init__(self, p0: Vector3, p1: Vector3, material: int):
        self.box_min = p0
        self.box_max = p1

        self.sides = HittableList()
        self.sides.add(AARect.xy(p0.x, p1.x, p0.y, p1.y, p1.z, material))
        self.sides.add(AARect.xy(p0.x, p1.x, p0.y, p1.y, p0.z, material))
        self.sides.add(AARect.xz(p0.x, p1.x, p0.z, p1.z, p1.y, material))
        self.sides.add(AARect.xz(p0.x, p1.x, p0.z, p1.z, p0.y, material))
        self.sides.add(AARect.yz(p0.y, p1.y, p0.z, p1.z, p1.x, material))
        self.sides.add(AARect.yz(p0.y, p1.y, p0.z, p1.z, p0.x, material))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.sides.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return AABB(self.box_min, self.box_max)
