# renderer/raytracer.py
import logging
import os
import random
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple
import numpy as np
from core.vector import Color
from renderer.integrator import ray_color

logger = logging.getLogger(__name__)

# Spacing between per-pixel seeds of consecutive render seeds.
PIXEL_SEED_STRIDE = 1 << 32

# Set in each worker process by _init_worker.
_worker_renderer = None

def _init_worker(renderer: "Renderer"):
    global _worker_renderer
    _worker_renderer = renderer

def _render_batch_in_worker(start: int, stop: int) -> List[Tuple[int, Color]]:
    return _worker_renderer.render_batch(start, stop)

class Renderer:
    """
    Offline path tracer that samples every pixel of ``camera``'s view of
    ``scene`` and averages the samples into a linear color buffer.

    Pixels are independent work items: each one draws from its own
    random.Random seeded from (seed, pixel index), so the image depends only
    on the seed and not on the number of workers or the order they finish in.

    Workers are separate processes unless ``use_processes`` is False, in
    which case threads share the scene.
    """
    def __init__(self, scene, camera, width: int, height: int,
                 samples_per_pixel: int = 100, max_depth: int = 50,
                 workers: Optional[int] = None, use_processes: bool = True,
                 seed: Optional[int] = None, batch_size: Optional[int] = None):
        if width < 2 or height < 2:
            raise ValueError(f"Image must be at least 2x2 pixels, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")

        self.scene = scene
        self.camera = camera
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.use_processes = use_processes
        self.seed = seed if seed is not None else random.SystemRandom().randrange(PIXEL_SEED_STRIDE)
        self.batch_size = batch_size if batch_size is not None else width

    def pixel_coordinates(self, n: int) -> Tuple[int, int]:
        """Column i and row j of the n-th pixel in output order (top row first)."""
        row, i = divmod(n, self.width)
        return i, self.height - 1 - row

    def pixel_rng(self, n: int) -> random.Random:
        return random.Random(self.seed * PIXEL_SEED_STRIDE + n)

    def sample_pixel(self, i: int, j: int, rng: random.Random) -> Color:
        """
        Sum of ``samples_per_pixel`` jittered camera samples through pixel
        (i, j), with j = 0 being the bottom row.
        """
        color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            u = (i + rng.random()) / (self.width - 1)
            v = (j + rng.random()) / (self.height - 1)
            ray = self.camera.get_ray(u, v, rng)
            color = color + ray_color(ray, self.scene, self.max_depth, rng)
        return color

    def render_batch(self, start: int, stop: int) -> List[Tuple[int, Color]]:
        """Render pixels start..stop-1, each tagged with its output index."""
        results = []
        for n in range(start, stop):
            i, j = self.pixel_coordinates(n)
            results.append((n, self.sample_pixel(i, j, self.pixel_rng(n))))
        return results

    def render(self) -> np.ndarray:
        """
        Render the full image.

        Returns a (height, width, 3) float64 array of averaged linear RGB
        values, row 0 being the top of the image.
        """
        total = self.width * self.height
        bounds = [(start, min(start + self.batch_size, total))
                  for start in range(0, total, self.batch_size)]
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d, %d worker(s), seed %d",
                    self.width, self.height, self.samples_per_pixel, self.max_depth,
                    self.workers, self.seed)

        if self.workers <= 1:
            results = []
            for start, stop in bounds:
                results.extend(self.render_batch(start, stop))
        else:
            results = self._render_parallel(bounds)

        # Results arrive in completion order; each lands at its own index.
        buffer = np.empty((self.height, self.width, 3), dtype=np.float64)
        scale = 1.0 / self.samples_per_pixel
        for n, color in results:
            row, i = divmod(n, self.width)
            buffer[row, i] = (color.x * scale, color.y * scale, color.z * scale)
        return buffer

    def _render_parallel(self, bounds) -> List[Tuple[int, Color]]:
        results = []
        if self.use_processes:
            executor = ProcessPoolExecutor(max_workers=self.workers,
                                           initializer=_init_worker, initargs=(self,))
        else:
            executor = ThreadPoolExecutor(max_workers=self.workers)

        with executor:
            if self.use_processes:
                futures = [executor.submit(_render_batch_in_worker, start, stop)
                           for start, stop in bounds]
            else:
                futures = [executor.submit(self.render_batch, start, stop)
                           for start, stop in bounds]
            for future in as_completed(futures):
                results.extend(future.result())
        return results
