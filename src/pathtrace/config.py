# config.py
"""
Render defaults and named quality presets.
"""
import os
from dataclasses import dataclass, replace
from typing import Optional

from pathtrace.errors import ConfigError

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 200
DEFAULT_SAMPLES = 4      # Anti-aliasing factor: samples x samples rays per pixel
MAX_DEPTH = 10
DEFAULT_GAMMA = 2.0
SKY_BLUE = (0.2, 0.4, 0.8)

QUALITY_LEVELS = {
    "draft": {"samples": 1, "max_depth": 4},
    "balanced": {"samples": 4, "max_depth": 10},
    "final": {"samples": 10, "max_depth": 20},
}


def default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class RenderSettings:
    """
    Everything the renderer needs besides the scene.

    Attributes:
        width, height: Raster size in pixels.
        samples: Anti-aliasing factor A; each pixel averages A*A rays.
        max_depth: Bounces allowed per camera ray.
        gamma: Gamma applied before quantizing, or None for linear output.
        bottom_up: Emit the bottom row first instead of the top row.
        workers: Size of the sub-sample thread pool.
        seed: Optional seed for the per-thread generators.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    samples: int = DEFAULT_SAMPLES
    max_depth: int = MAX_DEPTH
    gamma: Optional[float] = DEFAULT_GAMMA
    bottom_up: bool = False
    workers: int = default_workers()
    seed: Optional[int] = None

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        try:
            preset = QUALITY_LEVELS[name]
        except KeyError:
            raise ConfigError(f"Unknown quality level {name!r}; choose from {', '.join(QUALITY_LEVELS)}") from None
        return replace(cls(**preset), **overrides)

    def validate(self) -> "RenderSettings":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples < 1:
            raise ConfigError(f"samples must be at least 1, got {self.samples}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth cannot be negative, got {self.max_depth}")
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")
        if self.gamma is not None and self.gamma <= 0:
            raise ConfigError(f"gamma must be positive, got {self.gamma}")
        return self

    @property
    def rays_per_pixel(self) -> int:
        return self.samples * self.samples
