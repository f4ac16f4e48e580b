# geometry/plane.py
from typing import Optional
from pathtrace.core.vector import Vector3
from pathtrace.core.ray import Ray
from pathtrace.geometry.hittable import EPSILON, Hittable, HitRecord

class Plane(Hittable):
    """
    A plane through `point` with the given normal. When `radius` is set the
    plane is clipped to a disk of that radius around `point`.
    """
    def __init__(self, point: Vector3, normal: Vector3, material, radius: Optional[float] = None):
        self.point = point
        self.normal = normal.normalize()
        self.radius = radius
        self.radius2 = None if radius is None else radius * radius
        self.material = material

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        denom = ray.direction.dot(self.normal)
        # Exact comparison: nearly parallel rays pass and may give huge distances.
        if denom == 0.0:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < EPSILON:
            return None

        p = ray.at(t)
        if self.radius2 is not None and (p - self.point).length_squared() > self.radius2:
            return None

        return HitRecord(t, p, self.normal, self.material)

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, {self.normal!r}, radius={self.radius})"

class HorizontalPlane(Hittable):
    """
    The unbounded plane y = height. Its normal always faces the incoming ray.
    """
    def __init__(self, height: float, material):
        self.height = height
        self.material = material

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        dy = ray.direction.y
        if dy == 0.0:
            return None

        t = (self.height - ray.origin.y) / dy
        if t < EPSILON:
            return None

        normal = Vector3(0.0, 1.0, 0.0) if dy < 0 else Vector3(0.0, -1.0, 0.0)
        p = ray.at(t)
        return HitRecord(t, Vector3(p.x, self.height, p.z), normal, self.material)

    def __repr__(self) -> str:
        return f"HorizontalPlane({self.height})"
