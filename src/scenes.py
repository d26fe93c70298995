# scenes.py
"""
Demo scenes. Each builder returns a SceneSetup holding the scene and the
camera and render defaults it was composed for.
"""
import logging
import random
from typing import Optional
from core.vector import Vector3, Point3, Color
from core.utils import random_vector
from camera.camera import Camera
from geometry.world import Scene
from geometry.sphere import Sphere, MovingSphere
from geometry.aarect import AARect
from geometry.box import Box
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.textures import SolidTexture, CheckerTexture, NoiseTexture
from materials.texture_loader import load_texture

logger = logging.getLogger(__name__)

SKY = Color(0.7, 0.8, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

class SceneSetup:
    """A scene plus the view and quality settings it is meant to be rendered with."""
    def __init__(self, scene: Scene, look_from: Point3, look_at: Point3, vfov: float,
                 aspect_ratio: float = 16.0 / 9.0, aperture: float = 0.0,
                 image_width: int = 400, samples_per_pixel: int = 100, max_depth: int = 50,
                 vup: Vector3 = None, focus_dist: float = 10.0,
                 time0: float = 0.0, time1: float = 1.0):
        self.scene = scene
        self.look_from = look_from
        self.look_at = look_at
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.image_width = image_width
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.vup = vup if vup is not None else Vector3(0.0, 1.0, 0.0)
        self.focus_dist = focus_dist
        self.time0 = time0
        self.time1 = time1

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    def camera(self, aspect_ratio: Optional[float] = None) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      aspect_ratio if aspect_ratio is not None else self.aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)

def _checker() -> CheckerTexture:
    return CheckerTexture(SolidTexture(Color(0.2, 0.3, 0.1)), SolidTexture(Color(0.9, 0.9, 0.9)))

def random_scene(rng: random.Random) -> SceneSetup:
    scene = Scene(background=SKY)
    ground = scene.add_material(Lambertian(_checker()))
    scene.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, ground))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = random_vector(rng) * random_vector(rng)
                material = scene.add_material(Lambertian(albedo))
                center2 = center + Vector3(0.0, rng.uniform(0.0, 0.5), 0.0)
                scene.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, material))
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(rng, 0.5, 1.0)
                material = scene.add_material(Metal(albedo, rng.uniform(0.0, 0.5)))
                scene.add(Sphere(center, 0.2, material))
            else:
                # glass
                material = scene.add_material(Dielectric(1.5))
                scene.add(Sphere(center, 0.2, material))

    scene.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, scene.add_material(Dielectric(1.5))))
    scene.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0,
                     scene.add_material(Lambertian(Color(0.4, 0.2, 0.1)))))
    scene.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0,
                     scene.add_material(Metal(Color(0.7, 0.6, 0.5), 0.0))))

    return SceneSetup(scene, Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0), 20.0, aperture=0.1)

def two_spheres(rng: random.Random) -> SceneSetup:
    scene = Scene(background=SKY)
    checker = scene.add_material(Lambertian(_checker()))
    scene.add(Sphere(Point3(0.0, -10.0, 0.0), 10.0, checker))
    scene.add(Sphere(Point3(0.0, 10.0, 0.0), 10.0, checker))
    return SceneSetup(scene, Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0), 20.0)

def two_perlin_spheres(rng: random.Random) -> SceneSetup:
    scene = Scene(background=SKY)
    noise = scene.add_material(Lambertian(NoiseTexture(4.0, rng)))
    scene.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, noise))
    scene.add(Sphere(Point3(0.0, 2.0, 0.0), 2.0, noise))
    return SceneSetup(scene, Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0), 20.0)

def earth(rng: random.Random, texture_path: str = "earthmap.jpg") -> SceneSetup:
    scene = Scene(background=SKY)
    surface = scene.add_material(Lambertian(load_texture(texture_path)))
    scene.add(Sphere(Point3(0.0, 0.0, 0.0), 2.0, surface))
    return SceneSetup(scene, Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0), 20.0)

def simple_light(rng: random.Random) -> SceneSetup:
    scene = Scene(background=BLACK)
    noise = scene.add_material(Lambertian(NoiseTexture(4.0, rng)))
    light = scene.add_material(DiffuseLight(Color(4.0, 4.0, 4.0)))
    scene.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, noise))
    scene.add(Sphere(Point3(0.0, 2.0, 0.0), 2.0, noise))
    scene.add(AARect.xy(3.0, 5.0, 1.0, 3.0, -2.0, light))
    return SceneSetup(scene, Point3(26.0, 3.0, 6.0), Point3(0.0, 2.0, 0.0), 20.0,
                      samples_per_pixel=400)

def cornell_box(rng: random.Random) -> SceneSetup:
    scene = Scene(background=BLACK)
    red = scene.add_material(Lambertian(Color(0.65, 0.05, 0.05)))
    white = scene.add_material(Lambertian(Color(0.73, 0.73, 0.73)))
    green = scene.add_material(Lambertian(Color(0.12, 0.45, 0.15)))
    light = scene.add_material(DiffuseLight(Color(15.0, 15.0, 15.0)))

    scene.add(AARect.yz(0.0, 555.0, 0.0, 555.0, 555.0, green))
    scene.add(AARect.yz(0.0, 555.0, 0.0, 555.0, 0.0, red))
    scene.add(AARect.xz(213.0, 343.0, 227.0, 332.0, 554.0, light))
    scene.add(AARect.xz(0.0, 555.0, 0.0, 555.0, 0.0, white))
    scene.add(AARect.xz(0.0, 555.0, 0.0, 555.0, 555.0, white))
    scene.add(AARect.xy(0.0, 555.0, 0.0, 555.0, 555.0, white))
    scene.add(Box(Point3(130.0, 0.0, 65.0), Point3(295.0, 165.0, 230.0), white))
    scene.add(Box(Point3(265.0, 0.0, 295.0), Point3(430.0, 330.0, 460.0), white))

    return SceneSetup(scene, Point3(278.0, 278.0, -800.0), Point3(278.0, 278.0, 0.0), 40.0,
                      aspect_ratio=1.0, image_width=600, samples_per_pixel=200)

SCENES = {
    1: random_scene,
    2: two_spheres,
    3: two_perlin_spheres,
    4: earth,
    5: simple_light,
    6: cornell_box,
}

def build_scene(number: int, rng: random.Random, texture_path: Optional[str] = None) -> SceneSetup:
    """
    Build demo scene ``number`` (1-6). Unknown numbers fall back to the
    Cornell box. The BVH is built before returning.
    """
    builder = SCENES.get(number, cornell_box)
    if builder is earth and texture_path is not None:
        setup = earth(rng, texture_path)
    else:
        setup = builder(rng)
    setup.scene.build_bvh(setup.time0, setup.time1, rng)
    logger.info("Built scene %d (%s): %d objects, %d materials", number, builder.__name__,
                len(setup.scene.objects), len(setup.scene.materials))
    return setup
