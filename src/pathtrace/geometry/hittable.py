# geometry/hittable.py
from typing import Optional
from pathtrace.core.vector import Vector3
from pathtrace.core.ray import Ray

# Smallest accepted hit distance; keeps a scattered ray from re-hitting its own surface.
EPSILON = 1e-5

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "material")

    def __init__(self, t: float, p: Vector3, normal: Vector3, material):
        self.t = t              # Distance along the ray
        self.p = p              # Intersection point
        self.normal = normal    # Unit surface normal at intersection
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
