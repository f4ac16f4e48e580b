# renderer/tone_mapping.py
import math
from typing import Optional, Tuple

import numpy as np
from numba import njit

from pathtrace.core.vector import Vector3


@njit
def encode_pixels_kernel(linear, inv_gamma, output):
    for i in range(linear.shape[0]):
        for c in range(3):
            value = linear[i, c]
            # NaN and negative channels go to black before the gamma step
            if not value > 0.0:
                value = 0.0
            if inv_gamma != 1.0:
                value = value ** inv_gamma
            if value > 1.0:
                value = 1.0
            output[i, c] = np.uint8(math.floor(value * 255.0))


def _inv_gamma(gamma: Optional[float]) -> float:
    return 1.0 if gamma is None else 1.0 / gamma


def encode_pixels(linear: np.ndarray, gamma: Optional[float] = 2.0) -> np.ndarray:
    """
    Gamma-corrects and quantizes an (N, 3) array of linear colors to 8 bits.

    Channels are clamped to [0, 1] and mapped with floor(c * 255), so 1.0
    is the only value reaching 255. gamma=2 is the square root; None keeps
    the linear values.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64).reshape(-1, 3)
    output = np.empty(linear.shape, dtype=np.uint8)
    encode_pixels_kernel(linear, _inv_gamma(gamma), output)
    return output


def encode_color(color: Vector3, gamma: Optional[float] = 2.0) -> Tuple[int, int, int]:
    """Encodes one averaged linear color as an (r, g, b) byte triple."""
    r, g, b = encode_pixels(np.array([[color.x, color.y, color.z]]), gamma)[0]
    return int(r), int(g), int(b)


def encode_frame(linear: np.ndarray, gamma: Optional[float] = 2.0) -> np.ndarray:
    """Encodes a (height, width, 3) linear frame buffer as uint8."""
    height, width = linear.shape[:2]
    return encode_pixels(linear, gamma).reshape(height, width, 3)
