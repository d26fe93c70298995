"""Unit tests for the thin-lens camera."""

import math

from camera.camera import Camera
from core.vector import Vector3
from conftest import assert_vector_close


def make_camera(**overrides):
    params = dict(
        look_from=Vector3(0.0, 0.0, 3.0),
        look_at=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=2.0,
        aperture=0.0,
        focus_dist=1.0,
    )
    params.update(overrides)
    return Camera(**params)


class TestCameraBasis:

    def test_orthonormal_basis(self):
        camera = make_camera(look_from=Vector3(1.0, 2.0, 3.0), look_at=Vector3(-1.0, 0.5, 0.0))
        for axis in (camera.u, camera.v, camera.w):
            assert math.isclose(axis.length(), 1.0)
        assert abs(camera.u.dot(camera.v)) < 1e-12
        assert abs(camera.u.dot(camera.w)) < 1e-12
        assert abs(camera.v.dot(camera.w)) < 1e-12

    def test_w_points_backwards(self):
        camera = make_camera()
        assert_vector_close(camera.w, Vector3(0.0, 0.0, 1.0))
        assert_vector_close(camera.u, Vector3(1.0, 0.0, 0.0))
        assert_vector_close(camera.v, Vector3(0.0, 1.0, 0.0))


class TestGetRay:

    def test_center_ray_points_at_target(self, rng):
        camera = make_camera()
        ray = camera.get_ray(0.5, 0.5, rng)
        assert_vector_close(ray.origin, Vector3(0.0, 0.0, 3.0))
        assert_vector_close(ray.direction.normalize(), Vector3(0.0, 0.0, -1.0))

    def test_viewport_corners_follow_fov_and_aspect(self, rng):
        # vfov 90 at focus distance 1: the viewport spans y in [-1, 1], x in [-2, 2].
        camera = make_camera()
        lower_left = camera.get_ray(0.0, 0.0, rng)
        upper_right = camera.get_ray(1.0, 1.0, rng)
        assert_vector_close(lower_left.direction, Vector3(-2.0, -1.0, -1.0))
        assert_vector_close(upper_right.direction, Vector3(2.0, 1.0, -1.0))

    def test_pinhole_rays_share_origin(self, rng):
        camera = make_camera()
        for s, t in [(0.1, 0.2), (0.9, 0.3), (0.5, 0.7)]:
            assert camera.get_ray(s, t, rng).origin == camera.look_from

    def test_aperture_jitters_origin_within_lens(self, rng):
        camera = make_camera(aperture=0.5, focus_dist=3.0)
        origins = [camera.get_ray(0.5, 0.5, rng).origin for _ in range(100)]
        for origin in origins:
            offset = origin - camera.look_from
            assert offset.length() <= 0.25 + 1e-12
            assert abs(offset.dot(camera.w)) < 1e-12
        assert any(o != camera.look_from for o in origins)

    def test_aperture_rays_converge_on_focus_plane(self, rng):
        camera = make_camera(aperture=0.5, focus_dist=3.0)
        for _ in range(20):
            ray = camera.get_ray(0.5, 0.5, rng)
            # The focus plane is at z = 0, three units in front of the camera.
            t = -ray.origin.z / ray.direction.z
            p = ray.at(t)
            assert abs(p.x) < 1e-9 and abs(p.y) < 1e-9

    def test_ray_time_within_shutter(self, rng):
        camera = make_camera(time0=0.25, time1=0.75)
        times = [camera.get_ray(0.5, 0.5, rng).time for _ in range(100)]
        assert all(0.25 <= t <= 0.75 for t in times)
        assert len(set(times)) > 1

    def test_closed_shutter_time(self, rng):
        camera = make_camera(time0=0.4, time1=0.4)
        assert camera.get_ray(0.5, 0.5, rng).time == 0.4
