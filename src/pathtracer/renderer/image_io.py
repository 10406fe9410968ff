# renderer/image_io.py
import logging
from pathlib import Path
from typing import TextIO
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def write_ppm(pixels: np.ndarray, stream: TextIO):
    """
    Write a (height, width, 3) uint8 buffer as plain-text PPM (P3), top row
    first.
    """
    height, width = pixels.shape[0], pixels.shape[1]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in pixels:
        for r, g, b in row:
            stream.write(f"{r} {g} {b}\n")

def save_image(pixels: np.ndarray, path) -> Path:
    """
    Save a pixel buffer. ``.ppm`` files are written as text PPM; any other
    suffix is encoded by Pillow.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        with open(path, "w", encoding="ascii") as f:
            write_ppm(pixels, f)
    else:
        Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
