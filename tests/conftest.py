"""Pytest configuration for pathtrace tests.

Shared fixtures: seeded random generators, small deterministic scenes and
the fixed camera basis used by the default scene.
"""

import random

import pytest
from loguru import logger

from pathtrace.camera.camera import Camera
from pathtrace.core.vector import Vector3
from pathtrace.geometry.plane import HorizontalPlane
from pathtrace.geometry.sphere import Sphere
from pathtrace.geometry.world import World
from pathtrace.materials.diffuse import Diffuse
from pathtrace.materials.mirror import Mirror


@pytest.fixture
def rng():
    """A seeded generator so scatter tests are repeatable."""
    return random.Random(1234)


@pytest.fixture
def camera():
    """The default scene's camera: a 4x2 image plane at z = -1."""
    return Camera(
        origin=Vector3(0.0, 0.0, 0.0),
        lower_left_corner=Vector3(-2.0, -1.0, -1.0),
        horizontal=Vector3(4.0, 0.0, 0.0),
        vertical=Vector3(0.0, 2.0, 0.0),
    )


@pytest.fixture
def mirror_world():
    """A world that never consumes randomness: mirrors only."""
    return World([
        HorizontalPlane(-1.0, Mirror(Vector3(0.8, 0.8, 0.8))),
        Sphere(Vector3(0.0, 0.0, -2.0), 0.6, Mirror(Vector3(0.9, 0.6, 0.3))),
        Sphere(Vector3(0.8, -0.3, -1.5), 0.3, Mirror(Vector3(0.5, 0.9, 0.5))),
    ])


@pytest.fixture
def matte():
    return Diffuse(Vector3(0.5, 0.5, 0.5))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by a test so none outlives a captured stream."""
    yield
    logger.remove()
