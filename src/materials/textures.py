# materials/textures.py
import math
import random
from typing import Optional
import numpy as np
from core.vector import Vector3, Color
from materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Sample the texture at texture coordinates (u, v) and hit point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(10x) sin(10y) sin(10z) picks one
    of the two sub-textures.
    """
    def __init__(self, odd: Texture, even: Texture):
        self.odd = odd
        self.even = even

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like grey bands perturbed by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, rng: Optional[random.Random] = None):
        self.noise = Perlin(rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        t = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turbulence(p)))
        return Color(t, t, t)

class ImageTexture(Texture):
    """
    Nearest-pixel lookup into a decoded image.

    ``data`` is a height x width x 3 array of 8-bit RGB values with row 0
    at the top of the image.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected a height x width x 3 image, got shape {data.shape}")
        self.data = data
        self.height, self.width = data.shape[0], data.shape[1]

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.width == 0 or self.height == 0:
            # Cyan makes a missing image obvious in the render.
            return Color(0.0, 1.0, 1.0)

        # Clamp to [0,1] and flip V since image row 0 is the top.
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Color(float(r) / 255.0, float(g) / 255.0, float(b) / 255.0)
