# renderer/integrator.py
import math
import random
from core.ray import Ray
from core.vector import Color

# Minimum hit distance; keeps scattered rays from re-hitting their own surface.
T_MIN = 0.001

def ray_color(ray: Ray, scene, depth: int, rng: random.Random) -> Color:
    """
    Radiance carried back along ``ray``.

    Each bounce adds the surface emission to the attenuated radiance of the
    scattered ray. A path stops after ``depth`` bounces (contributing black),
    when the ray escapes (scene background) or when the material absorbs the
    ray (emission only).

    Bounces are followed in a loop with a running attenuation product, so
    very large depths do not grow the Python stack.
    """
    color = Color(0.0, 0.0, 0.0)
    throughput = Color(1.0, 1.0, 1.0)

    for _ in range(depth):
        rec = scene.hit(ray, T_MIN, math.inf)
        if rec is None:
            return color + throughput * scene.background

        material = scene.materials[rec.material]
        color = color + throughput * material.emitted(rec.u, rec.v, rec.p)

        scattered = material.scatter(ray, rec, rng)
        if scattered is None:
            return color

        attenuation, ray = scattered
        throughput = throughput * attenuation

    return color
