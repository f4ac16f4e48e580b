# output/image_writer.py
import os
from typing import Iterable, TextIO, Tuple, Union

import numpy as np
from loguru import logger
from PIL import Image

def write_ppm(stream: TextIO, width: int, height: int, pixels: Iterable[Tuple[int, int, int]]) -> int:
    """
    Writes a plain-text PPM (P3) image, one raster row per line.

    The pixel iterable is consumed lazily, so rows reach the stream while the
    image is still rendering. Returns the number of pixels written.
    """
    stream.write(f"P3\n{width} {height}\n255\n")
    count = 0
    row = []
    for r, g, b in pixels:
        row.append(f"{r} {g} {b}")
        count += 1
        if len(row) == width:
            stream.write("\t".join(row) + "\n")
            row = []
    if row:
        stream.write("\t".join(row) + "\n")
    return count

def save_ppm(path: Union[str, os.PathLike], frame: np.ndarray) -> None:
    """Writes a (height, width, 3) uint8 frame as a P3 file."""
    height, width = frame.shape[:2]
    with open(path, "w") as f:
        write_ppm(f, width, height, (tuple(int(c) for c in px) for px in frame.reshape(-1, 3)))
    logger.info(f"Saved to: {os.path.abspath(path)}")

def save_png(path: Union[str, os.PathLike], frame: np.ndarray) -> None:
    """Writes a (height, width, 3) uint8 frame as a PNG with Pillow."""
    Image.fromarray(np.ascontiguousarray(frame, dtype=np.uint8)).save(path)
    logger.info(f"Saved to: {os.path.abspath(path)}")
