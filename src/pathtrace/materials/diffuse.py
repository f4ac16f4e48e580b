# materials/diffuse.py
import random
from typing import Tuple
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.core.utils import random_in_unit_sphere
from pathtrace.geometry.hittable import HitRecord
from pathtrace.materials.material import Material

class Diffuse(Material):
    """
    Matte material. Light leaves in a random direction biased toward the normal.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Vector3, Vector3]:
        # Target point p + n + s, taken relative to p
        direction = rec.normal + random_in_unit_sphere(rng)

        # If the sample cancels the normal, just use the normal.
        if direction.length_squared() < 1e-16:
            direction = rec.normal

        return direction, self.color
