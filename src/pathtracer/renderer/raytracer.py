# renderer/raytracer.py
import logging
import os
import random
import threading
import time
from typing import List, Optional, Tuple
import numpy as np
from pathtracer.core.vector import Vector3
from pathtracer.errors import RenderError
from pathtracer.renderer.integrator import ray_color
from pathtracer.renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Multiplier spreading per-row seeds apart.
ROW_SEED_STRIDE = 1_000_003


class RowCounter:
    """
    Shared "next row to render" counter. Every call to claim() returns a
    new index, so each row is handed out exactly once; indices at or past
    ``total`` tell the caller there is no work left.
    """
    def __init__(self, total: int):
        self.total = total
        self._next = 0
        self._lock = threading.Lock()

    def claim(self) -> int:
        with self._lock:
            row = self._next
            self._next += 1
            return row


class ImageBuffer:
    """
    Output pixels, row 0 at the top. Workers commit a whole scanline per
    lock acquisition.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self._lock = threading.Lock()

    def write_row(self, row: int, scanline: np.ndarray):
        with self._lock:
            self.pixels[row] = scanline


class Renderer:
    """
    Multi-threaded scanline renderer.

    A fixed pool of worker threads shares one read-only scene, one
    RowCounter and one ImageBuffer. Each worker claims rows until the
    counter runs past the image height; a failing worker aborts the render
    and the failure is re-raised as RenderError once all threads have been
    joined.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = 50, threads: Optional[int] = None,
                 seed: Optional[int] = None):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if threads is None:
            threads = os.cpu_count() or 1
        if threads < 1:
            raise ValueError(f"threads must be >= 1, got {threads}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.threads = threads
        self.seed = seed

    def _row_rng(self, row: int, worker_rng: random.Random) -> random.Random:
        if self.seed is None:
            return worker_rng
        return random.Random(self.seed * ROW_SEED_STRIDE + row)

    def render_row(self, row: int, world, camera, background: Vector3,
                   lights, rng) -> np.ndarray:
        """Render output row ``row`` (0 = top) to a (width, 3) uint8 scanline."""
        accumulated = np.zeros((self.width, 3), dtype=np.float64)
        j = self.height - 1 - row
        u_scale = 1.0 / max(self.width - 1, 1)
        v_scale = 1.0 / max(self.height - 1, 1)
        for i in range(self.width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                s = (i + rng.random()) * u_scale
                t = (j + rng.random()) * v_scale
                color = ray_color(camera.get_ray(s, t, rng), background, world,
                                  self.max_depth, rng, lights)
                r += color.x
                g += color.y
                b += color.z
            accumulated[i] = (r, g, b)
        return gamma_correct(accumulated, self.samples_per_pixel)

    def _worker(self, world, camera, background, lights, row_counter: RowCounter,
                image_buffer: ImageBuffer, abort: threading.Event,
                failures: List[Tuple[str, int, BaseException]], progress: dict):
        worker_rng = random.Random()
        row = -1
        try:
            while not abort.is_set():
                row = row_counter.claim()
                if row >= self.height:
                    return
                scanline = self.render_row(row, world, camera, background, lights,
                                           self._row_rng(row, worker_rng))
                image_buffer.write_row(row, scanline)
                self._report_progress(progress)
        except Exception as exc:
            failures.append((threading.current_thread().name, row, exc))
            abort.set()

    def _report_progress(self, progress: dict):
        with progress["lock"]:
            progress["done"] += 1
            done = progress["done"]
        logger.debug("Scanlines remaining: %d", self.height - done)
        step = max(self.height // 10, 1)
        if done % step == 0 or done == self.height:
            logger.info("Rendered %d/%d rows (%.0f%%)", done, self.height,
                        100.0 * done / self.height)

    def render(self, world, camera, background: Vector3, lights=None,
               row_counter: Optional[RowCounter] = None,
               image_buffer: Optional[ImageBuffer] = None) -> np.ndarray:
        """
        Render the full image.

        Returns:
            (height, width, 3) uint8 array, row 0 at the top.

        Raises:
            RenderError: if any worker raised.
        """
        row_counter = row_counter if row_counter is not None else RowCounter(self.height)
        image_buffer = image_buffer if image_buffer is not None else ImageBuffer(self.width, self.height)
        abort = threading.Event()
        failures: List[Tuple[str, int, BaseException]] = []
        progress = {"done": 0, "lock": threading.Lock()}

        logger.info("Rendering %dx%d, %d spp, max depth %d, %d threads",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.threads)
        start = time.perf_counter()

        workers = [
            threading.Thread(
                target=self._worker,
                name=f"render-worker-{n}",
                args=(world, camera, background, lights, row_counter,
                      image_buffer, abort, failures, progress),
            )
            for n in range(self.threads)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        if failures:
            name, row, exc = failures[0]
            raise RenderError(f"{name} failed on row {row}: {exc}") from exc

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image_buffer.pixels


def render(world, camera, width: int, height: int, samples_per_pixel: int,
           max_depth: int, background: Vector3, lights=None,
           threads: Optional[int] = None, seed: Optional[int] = None) -> np.ndarray:
    """Render ``world`` through ``camera`` into a (height, width, 3) uint8 array."""
    renderer = Renderer(width, height, samples_per_pixel, max_depth, threads, seed)
    return renderer.render(world, camera, background, lights)
