# src/geometry/bvh.py
import logging
import random
from typing import Optional, Sequence
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

def _box_or_zero(obj: Hittable, time0: float, time1: float, where: str) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        logger.warning("No bounding box in %s for %r, using a zero box", where, obj)
        return AABB.zero()
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a set of hittables.

    Each level sorts its objects by bounding box minimum on an axis chosen
    uniformly at random and splits them at the middle index. A single object
    becomes both children of its node.
    """
    def __init__(self, objects: Sequence[Hittable], time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None):
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH from an empty object list")
        if rng is None:
            rng = random.Random()

        axis = rng.randrange(3)
        object_span = len(objects)

        if object_span == 1:
            self.left = self.right = objects[0]
        elif object_span == 2:
            first, second = sorted(objects, key=lambda obj: self._box_key(obj, axis, time0, time1))
            self.left, self.right = first, second
        else:
            ordered = sorted(objects, key=lambda obj: self._box_key(obj, axis, time0, time1))
            mid = object_span // 2
            self.left = BVHNode(ordered[:mid], time0, time1, rng)
            self.right = BVHNode(ordered[mid:], time0, time1, rng)

        box_left = _box_or_zero(self.left, time0, time1, "BVHNode construction")
        box_right = _box_or_zero(self.right, time0, time1, "BVHNode construction")
        self.box = AABB.surrounding_box(box_left, box_right)

    @staticmethod
    def _box_key(obj: Hittable, axis: int, time0: float, time1: float) -> float:
        return _box_or_zero(obj, time0, time1, "BVHNode comparator").minimum[axis]

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is self.left:
            return hit_left

        # Anything the right child returns is closer than the left hit.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)
        return hit_right or hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box
