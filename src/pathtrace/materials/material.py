# materials/material.py
import random
from typing import Tuple
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Every material carries a color that attenuates light at each bounce.
    """
    def __init__(self, color: Vector3):
        self.color = color

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Vector3]:
        """
        Computes the outgoing direction and the attenuation for a hit.
        Returns a tuple (direction, attenuation); the direction need not be normalized.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r})"
