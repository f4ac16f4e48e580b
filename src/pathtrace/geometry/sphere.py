# geometry/sphere.py
import math
from typing import Optional
from pathtrace.core.vector import Vector3
from pathtrace.core.ray import Ray
from pathtrace.geometry.hittable import EPSILON, Hittable, HitRecord

def nearest_root(a: float, b: float, c: float) -> Optional[float]:
    """
    Returns the smaller root of a*t^2 + b*t + c, or None when there is no real root.
    """
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0:
        return None
    # Only the near root is used, so a ray starting inside the sphere is not handled.
    return (-b - math.sqrt(discriminant)) / (2.0 * a)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius

        t = nearest_root(a, b, c)
        if t is None or t < EPSILON:
            return None

        p = ray.at(t)
        # Outward normal; not flipped for rays arriving from inside.
        normal = (p - self.center) / self.radius
        return HitRecord(t, p, normal, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
