# materials/presets.py
import random
from pathtrace.core.vector import Vector3
from pathtrace.materials.diffuse import Diffuse
from pathtrace.materials.mirror import Mirror

class DiffusePresets:
    """Predefined matte materials."""

    @staticmethod
    def matte() -> Diffuse:
        return Diffuse(Vector3(0.5, 0.5, 0.5))

    @staticmethod
    def chalk() -> Diffuse:
        return Diffuse(Vector3(0.9, 0.9, 0.88))

    @staticmethod
    def clay() -> Diffuse:
        return Diffuse(Vector3(0.7, 0.3, 0.3))

    @staticmethod
    def grass() -> Diffuse:
        return Diffuse(Vector3(0.3, 0.6, 0.2))

class MirrorPresets:
    """Predefined mirror materials. The color is the fraction of light kept per bounce."""

    @staticmethod
    def silver() -> Mirror:
        return Mirror(Vector3(0.9, 0.9, 0.9))

    @staticmethod
    def gold() -> Mirror:
        return Mirror(Vector3(1.0, 0.78, 0.34))

    @staticmethod
    def copper() -> Mirror:
        return Mirror(Vector3(0.95, 0.64, 0.54))

def random_diffuse(rng: random.Random) -> Diffuse:
    # Squaring keeps random albedos away from washed-out pastels
    return Diffuse(Vector3.random(rng) * Vector3.random(rng))

def random_mirror(rng: random.Random) -> Mirror:
    return Mirror(Vector3.random(rng) * 0.5 + Vector3(0.5, 0.5, 0.5))
