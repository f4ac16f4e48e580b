# geometry/world.py
import random
from typing import Iterable, Iterator, List, Optional
from pathtrace.config import SKY_BLUE
from pathtrace.core.ray import Ray
from pathtrace.core.vector import Vector3
from pathtrace.geometry.hittable import Hittable, HitRecord

class World:
    """
    A list of Hittable objects and the recursive color resolver over them.

    The world is built once and only read while rendering, so any number of
    threads may call hit() and trace() on it at the same time.
    """
    def __init__(self, objects: Iterable[Hittable] = (), sky: Optional[Vector3] = None, decay: float = 1.0):
        self.objects: List[Hittable] = list(objects)
        self.sky = sky if sky is not None else Vector3(*SKY_BLUE)
        self.decay = decay

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Returns the nearest hit over every object, or None. On equal distances
        the object added first wins.
        """
        hit_record = None
        for obj in self.objects:
            rec = obj.hit(ray)
            if rec is not None and (hit_record is None or rec.t < hit_record.t):
                hit_record = rec
        return hit_record

    def background(self, ray: Ray) -> Vector3:
        """
        Sky gradient from white at the bottom to the sky color at the top.
        """
        t = (ray.direction.y + 1.0) / 2.0
        return Vector3.lerp(Vector3.white(), self.sky, t)

    def trace(self, ray: Ray, depth: int, rng: random.Random) -> Vector3:
        """
        Resolves the color seen along `ray`, allowing at most `depth` more
        bounces. Returns black once the bounces are used up.
        """
        if depth <= 0:
            return Vector3.black()

        rec = self.hit(ray)
        if rec is None:
            return self.background(ray)

        direction, attenuation = rec.material.scatter(ray, rec, rng)
        color = self.trace(Ray(rec.p, direction), depth - 1, rng)
        return attenuation * color * self.decay
