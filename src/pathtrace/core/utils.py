# core/utils.py
import itertools
import random
import threading
from typing import Optional

from pathtrace.core.vector import Vector3

MAX_SPHERE_ATTEMPTS = 64

class ThreadRandom:
    """
    Hands every thread its own random generator. With a seed, each thread's
    stream is derived from the seed and the order in which threads first ask
    for one. Separate instances never share state.
    """
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._local = threading.local()
        self._lock = threading.Lock()
        self._index = itertools.count()

    def get(self) -> random.Random:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            if self.seed is None:
                rng = random.Random()
            else:
                with self._lock:
                    rng = random.Random(self.seed * 1_000_003 + next(self._index))
            self._local.rng = rng
        return rng


_default = ThreadRandom()


def thread_rng() -> random.Random:
    """
    Returns the calling thread's unseeded generator.
    """
    return _default.get()


def random_in_unit_sphere(rng: random.Random, max_attempts: int = MAX_SPHERE_ATTEMPTS) -> Vector3:
    """
    Returns a random point inside a unit sphere by rejection sampling the
    [-1, 1) cube. Falls back to the zero vector if no sample is accepted
    within max_attempts draws.
    """
    for _ in range(max_attempts):
        p = Vector3.random(rng) * 2.0 - Vector3.one()
        if p.length_squared() < 1.0:
            return p
    return Vector3.zero()


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)
