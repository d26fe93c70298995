"""
Pytest fixtures and helpers shared by the path tracer tests.
"""

import random

import numpy as np
import pytest

from core.vector import Vector3, Color
from camera.camera import Camera
from geometry.world import Scene
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.diffuse_light import DiffuseLight


@pytest.fixture
def rng():
    """Deterministic random source for a single test."""
    return random.Random(1234)


@pytest.fixture
def white():
    return Color(1.0, 1.0, 1.0)


@pytest.fixture
def lambertian_sphere_scene(white):
    """Unit sphere at the origin with a white diffuse surface, black background."""
    scene = Scene(background=Color(0.0, 0.0, 0.0))
    material = scene.add_material(Lambertian(white))
    scene.add(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material))
    return scene


@pytest.fixture
def glowing_sphere_scene(white):
    """Unit sphere at the origin that emits white light, black background."""
    scene = Scene(background=Color(0.0, 0.0, 0.0))
    material = scene.add_material(DiffuseLight(white))
    scene.add(Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material))
    return scene


@pytest.fixture
def front_camera():
    """Pinhole camera at (0, 0, 3) looking at the origin with a square image."""
    return Camera(
        look_from=Vector3(0.0, 0.0, 3.0),
        look_at=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=60.0,
        aspect_ratio=1.0,
        aperture=0.0,
        focus_dist=3.0,
    )


def assert_vector_close(actual, expected, atol=1e-9, err_msg=""):
    """Assert that two vectors are component-wise close."""
    np.testing.assert_allclose(
        actual.as_tuple(), expected.as_tuple(), atol=atol,
        err_msg=f"Vector mismatch: {err_msg}"
    )
