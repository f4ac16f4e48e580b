# materials/mirror.py
import random
from typing import Tuple
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.core.utils import reflect
from pathtrace.geometry.hittable import HitRecord
from pathtrace.materials.material import Material

class Mirror(Material):
    """
    Perfectly specular material, tinted by its color.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Vector3]:
        return reflect(ray_in.direction, rec.normal), self.color
