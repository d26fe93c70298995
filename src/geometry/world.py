# src/geometry/world.py
import logging
import random
from typing import Optional, List
from core.aabb import AABB
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import BVHNode

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects searched with a linear closest-hit scan.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

class Scene(Hittable):
    """
    The top-level objects of a render together with the material arena they
    index into and the color returned for rays that escape.

    Build the scene completely, then call build_bvh() once; the scene is
    read-only while rendering.
    """
    def __init__(self, background: Color = None):
        self.objects = HittableList()
        self.materials: list = []
        self.background = background if background is not None else Color(0.0, 0.0, 0.0)
        self.bvh_root: Optional[BVHNode] = None

    def add_material(self, material) -> int:
        """Store a material in the arena and return the index shapes refer to it by."""
        self.materials.append(material)
        return len(self.materials) - 1

    def add(self, obj: Hittable):
        self.objects.add(obj)
        self.bvh_root = None

    def material(self, index: int):
        return self.materials[index]

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng: random.Random = None):
        if len(self.objects) == 0:
            self.bvh_root = None
            return
        logger.debug("Building BVH for %d objects", len(self.objects))
        self.bvh_root = BVHNode(self.objects.objects, time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        return self.objects.hit(ray, t_min, t_max)

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.objects.bounding_box(time0, time1)
