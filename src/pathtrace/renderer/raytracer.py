# renderer/raytracer.py
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Iterator, List, Optional, Tuple

import numpy as np
from loguru import logger

from pathtrace.camera.camera import Camera
from pathtrace.config import RenderSettings
from pathtrace.core.utils import ThreadRandom
from pathtrace.core.vector import Vector3
from pathtrace.geometry.world import World
from pathtrace.renderer.tone_mapping import encode_color, encode_frame

# Rows between progress messages
PROGRESS_EVERY = 16

class Renderer:
    """
    Turns a world and a camera into pixels.

    Each pixel averages a fixed samples x samples grid of camera rays. The
    rays of one pixel are traced concurrently on a thread pool and summed in
    grid order once all of them are done, so the average never depends on
    which thread finished first. Pixels themselves are produced one at a time
    in raster order.
    """
    def __init__(self, world: World, camera: Camera, settings: Optional[RenderSettings] = None):
        self.world = world
        self.camera = camera
        self.settings = (settings or RenderSettings()).validate()
        n = self.settings.samples
        self.offsets: List[Tuple[int, int]] = [(ax, ay) for ax in range(n) for ay in range(n)]
        self.rngs = ThreadRandom(self.settings.seed)

    @property
    def width(self) -> int:
        return self.settings.width

    @property
    def height(self) -> int:
        return self.settings.height

    def trace_sample(self, x: int, y: int, ax: int, ay: int) -> Vector3:
        """
        Traces the sub-sample (ax, ay) of pixel (x, y) with the calling thread's generator.
        """
        n = self.settings.samples
        u = (x * n + ax) / (self.width * n)
        v = (y * n + ay) / (self.height * n)
        ray = self.camera.get_ray(u, v)
        return self.world.trace(ray, self.settings.max_depth, self.rngs.get())

    def sample_pixel(self, x: int, y: int, executor: Optional[Executor] = None) -> Vector3:
        """
        Returns the averaged linear color of pixel (x, y). Without an executor
        the sub-samples are traced on the calling thread.
        """
        if executor is None:
            colors = (self.trace_sample(x, y, ax, ay) for ax, ay in self.offsets)
        else:
            # map() hands results back in submission order
            colors = executor.map(lambda offset: self.trace_sample(x, y, *offset), self.offsets)

        total = Vector3.black()
        for color in colors:
            total = total + color
        return total / len(self.offsets)

    def rows(self) -> range:
        """Image rows in emission order; y = 0 is the bottom of the image plane."""
        if self.settings.bottom_up:
            return range(self.height)
        return range(self.height - 1, -1, -1)

    def linear_pixels(self) -> Iterator[Tuple[int, int, Vector3]]:
        """
        Yields (row, column, color) for every pixel in raster order, where row
        counts emitted rows from 0.
        """
        s = self.settings
        # Fresh generators so every render of a seeded renderer starts alike
        self.rngs = ThreadRandom(s.seed)
        logger.info(f"Rendering {s.width}x{s.height}, {s.rays_per_pixel} rays per pixel, "
                    f"depth {s.max_depth}, {s.workers} workers")
        start = time.perf_counter()

        with ThreadPoolExecutor(max_workers=s.workers, thread_name_prefix="pathtrace") as executor:
            for row, y in enumerate(self.rows()):
                for x in range(s.width):
                    yield row, x, self.sample_pixel(x, y, executor)
                if (row + 1) % PROGRESS_EVERY == 0 or row + 1 == s.height:
                    logger.debug(f"Row {row + 1}/{s.height} done")

        logger.info(f"Rendering time: {time.perf_counter() - start:.2f}s")

    def render(self) -> Iterator[Tuple[int, int, int]]:
        """
        Yields one 8-bit (r, g, b) triple per pixel, row by row.
        """
        gamma = self.settings.gamma
        for _, _, color in self.linear_pixels():
            yield encode_color(color, gamma)

    def render_frame(self) -> np.ndarray:
        """
        Renders the whole image into a (height, width, 3) uint8 array whose
        first row is the first emitted row.
        """
        linear = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for row, x, color in self.linear_pixels():
            linear[row, x] = (color.x, color.y, color.z)
        return encode_frame(linear, self.settings.gamma)
