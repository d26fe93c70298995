"""Unit tests for material scattering and emission."""

import math
import random

import pytest

from core.ray import Ray
from core.vector import Color, Vector3
from geometry.hittable import HitRecord
from geometry.sphere import Sphere
from materials.dielectric import Dielectric, schlick
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, SolidTexture
from conftest import assert_vector_close


def head_on_hit(ray_origin=Vector3(0.0, 0.0, 5.0)):
    """Ray along -z into a unit sphere at the origin and its hit record."""
    ray = Ray(ray_origin, Vector3(0.0, 0.0, -1.0), time=0.25)
    rec = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, 0).hit(ray, 0.001, math.inf)
    return ray, rec


class TestLambertian:

    def test_attenuation_is_texture_value(self, rng):
        ray, rec = head_on_hit()
        attenuation, scattered = Lambertian(Color(0.2, 0.4, 0.6)).scatter(ray, rec, rng)
        assert attenuation == Color(0.2, 0.4, 0.6)
        assert scattered.origin == rec.p
        assert scattered.time == ray.time

    def test_scatters_into_normal_hemisphere(self, rng):
        ray, rec = head_on_hit()
        material = Lambertian(Color(0.5, 0.5, 0.5))
        for _ in range(200):
            _, scattered = material.scatter(ray, rec, rng)
            assert scattered.direction.dot(rec.normal) >= 0.0
            assert not scattered.direction.near_zero()

    def test_degenerate_direction_falls_back_to_normal(self):
        class Cancelling(random.Random):
            # Draws that produce the point (0, 0, -1), cancelling the +z normal.
            def uniform(self, a, b):
                return {0: 0.0, 1: 0.0, 2: -0.999999999999}[self.calls.pop(0)]

        rng = Cancelling(0)
        rng.calls = [0, 1, 2]
        ray, rec = head_on_hit()
        _, scattered = Lambertian(Color(1.0, 1.0, 1.0)).scatter(ray, rec, rng)
        assert scattered.direction == rec.normal

    def test_textured_albedo(self, rng):
        checker = CheckerTexture(SolidTexture(Color(1.0, 0.0, 0.0)), SolidTexture(Color(0.0, 1.0, 0.0)))
        ray, rec = head_on_hit()
        attenuation, _ = Lambertian(checker).scatter(ray, rec, rng)
        assert attenuation == checker.value(rec.u, rec.v, rec.p)


class TestMetal:

    def test_mirror_reflection(self, rng):
        ray, rec = head_on_hit()
        attenuation, scattered = Metal(Color(0.8, 0.8, 0.8), 0.0).scatter(ray, rec, rng)
        assert attenuation == Color(0.8, 0.8, 0.8)
        assert_vector_close(scattered.direction, Vector3(0.0, 0.0, 1.0))

    def test_fuzz_is_capped(self):
        assert Metal(Color(1.0, 1.0, 1.0), 3.0).fuzz == 1.0

    def test_absorbs_when_scattered_into_surface(self, rng):
        # Grazing incidence with maximum fuzz sends many rays below the surface.
        rec = HitRecord(p=Vector3(0.0, 0.0, 0.0), normal=Vector3(0.0, 1.0, 0.0), t=1.0)
        ray = Ray(Vector3(-1.0, 0.001, 0.0), Vector3(1.0, -0.001, 0.0))
        material = Metal(Color(1.0, 1.0, 1.0), 1.0)
        results = [material.scatter(ray, rec, rng) for _ in range(200)]
        absorbed = [r for r in results if r is None]
        assert absorbed
        for r in results:
            if r is not None:
                assert r[1].direction.dot(rec.normal) > 0


class TestDielectric:

    @pytest.mark.parametrize("seed", range(20))
    def test_head_on_attenuation_is_unit(self, seed):
        ray, rec = head_on_hit()
        attenuation, scattered = Dielectric(1.5).scatter(ray, rec, random.Random(seed))
        assert attenuation == Color(1.0, 1.0, 1.0)
        # Normal incidence: either straight through or straight back.
        d = scattered.direction.normalize()
        assert abs(d.x) < 1e-12 and abs(d.y) < 1e-12
        assert math.isclose(abs(d.z), 1.0)
        assert scattered.origin == rec.p

    def test_head_on_mostly_refracts(self):
        ray, rec = head_on_hit()
        material = Dielectric(1.5)
        rng = random.Random(7)
        through = sum(1 for _ in range(500) if material.scatter(ray, rec, rng)[1].direction.z < 0)
        # Schlick reflectance at normal incidence for n = 1.5 is 4%.
        assert through > 400

    def test_oblique_refraction_changes_direction(self):
        incoming = Vector3(0.5, 0.0, -1.0).normalize()
        rec = HitRecord(p=Vector3(0.0, 0.0, 0.0), normal=Vector3(0.0, 0.0, 1.0), t=1.0, front_face=True)
        ray = Ray(Vector3(0.0, 0.0, 0.0) - incoming, incoming)
        material = Dielectric(1.5)
        rng = random.Random(11)
        refracted = [s for a, s in (material.scatter(ray, rec, rng) for _ in range(100))
                     if s.direction.z < 0]
        assert refracted
        for scattered in refracted:
            d = scattered.direction.normalize()
            # Bent towards the normal on entering glass.
            assert abs(d.x) < abs(incoming.x)

    def test_total_internal_reflection(self, rng):
        # Leaving glass at a steep angle always reflects.
        incoming = Vector3(0.9, 0.0, -0.1).normalize()
        rec = HitRecord(p=Vector3(0.0, 0.0, 0.0), normal=Vector3(0.0, 0.0, 1.0), t=1.0, front_face=False)
        ray = Ray(Vector3(0.0, 0.0, 0.0) - incoming, incoming)
        for _ in range(50):
            attenuation, scattered = Dielectric(1.5).scatter(ray, rec, rng)
            assert attenuation == Color(1.0, 1.0, 1.0)
            assert scattered.direction.z > 0

    def test_schlick_bounds(self):
        assert math.isclose(schlick(1.0, 1.5), 0.04)
        assert math.isclose(schlick(0.0, 1.5), 1.0)


class TestDiffuseLight:

    def test_never_scatters(self, rng):
        ray, rec = head_on_hit()
        assert DiffuseLight(Color(4.0, 4.0, 4.0)).scatter(ray, rec, rng) is None

    def test_emits_texture_value(self):
        light = DiffuseLight(Color(4.0, 3.0, 2.0))
        assert light.emitted(0.5, 0.5, Vector3(0.0, 0.0, 0.0)) == Color(4.0, 3.0, 2.0)

    def test_non_emissive_materials_emit_black(self):
        p = Vector3(0.0, 0.0, 0.0)
        for material in (Lambertian(Color(1.0, 1.0, 1.0)), Metal(Color(1.0, 1.0, 1.0)), Dielectric(1.5)):
            assert material.emitted(0.0, 0.0, p) == Color(0.0, 0.0, 0.0)
