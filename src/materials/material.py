# materials/material.py
import random
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built and are shared read-only between
    render workers; every random draw goes through the ``rng`` argument.
    The material set is closed: Lambertian, Metal, Dielectric, DiffuseLight.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """Light emitted at the hit point; black for non-emissive materials."""
        return Color(0.0, 0.0, 0.0)

def as_texture(value: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture so materials can take either."""
    if isinstance(value, Vector3):
        return SolidTexture(value)
    return value
