# scenes.py
"""
Scene builders. Each builder takes the raster size and returns the world to
render and the camera looking at it.
"""
import math
import random
from typing import Callable, Dict, Tuple

from loguru import logger

from pathtrace.camera.camera import Camera
from pathtrace.core.vector import Vector3
from pathtrace.errors import SceneError
from pathtrace.geometry.mesh import Triangle, TriangleMesh
from pathtrace.geometry.plane import HorizontalPlane, Plane
from pathtrace.geometry.sphere import Sphere
from pathtrace.geometry.world import World
from pathtrace.materials.diffuse import Diffuse
from pathtrace.materials.mirror import Mirror
from pathtrace.materials.presets import DiffusePresets, MirrorPresets, random_diffuse, random_mirror

SceneBuilder = Callable[[int, int], Tuple[World, Camera]]


def spheres_scene(width: int, height: int) -> Tuple[World, Camera]:
    """
    Three mirror spheres in a row, a matte sphere behind the camera that only
    shows up in reflections, and a huge matte sphere as the ground.
    """
    matte = Diffuse(Vector3(0.5, 0.5, 0.5))
    reflect = Mirror(Vector3(0.9, 0.9, 0.9))
    world = World([
        Sphere(Vector3(0.0, -0.25, 2.0), 0.5, matte),
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, reflect),
        Sphere(Vector3(1.0, 0.0, -1.8), 0.5, reflect),
        Sphere(Vector3(-1.0, 0.0, -1.8), 0.5, reflect),
        Sphere(Vector3(0.0, -100.5, -2.0), 100.0, matte),
    ])

    # Image plane two units tall at z = -1, as wide as the aspect ratio asks
    aspect = width / height
    camera = Camera(
        origin=Vector3(0.0, 0.0, 0.0),
        lower_left_corner=Vector3(-aspect, -1.0, -1.0),
        horizontal=Vector3(2.0 * aspect, 0.0, 0.0),
        vertical=Vector3(0.0, 2.0, 0.0),
    )
    return world, camera


def pyramid(base_center: Vector3, base: float, height: float, material) -> TriangleMesh:
    """Four-sided pyramid standing on its base, faces wound outward."""
    h = base / 2.0
    top = base_center + Vector3(0.0, height, 0.0)
    corners = [base_center + Vector3(-h, 0.0, h), base_center + Vector3(h, 0.0, h),
               base_center + Vector3(h, 0.0, -h), base_center + Vector3(-h, 0.0, -h)]
    faces = [Triangle(corners[i], corners[(i + 1) % 4], top, material) for i in range(4)]
    return TriangleMesh(faces)


def showcase_scene(width: int, height: int, seed: int = 7) -> Tuple[World, Camera]:
    """
    Every primitive kind at once: an unbounded floor, a mirror disk, a
    pyramid of triangles and a ring of randomly colored spheres.
    """
    rng = random.Random(seed)
    world = World(decay=0.99)
    world.add(HorizontalPlane(-0.5, DiffusePresets.matte()))
    world.add(Plane(Vector3(0.0, 0.6, -3.5), Vector3(0.0, 0.0, 1.0), MirrorPresets.silver(), radius=1.1))
    world.add(Sphere(Vector3(0.0, 0.0, -1.5), 0.5, MirrorPresets.gold()))
    world.add(pyramid(Vector3(-1.4, -0.5, -2.2), 0.9, 1.0, DiffusePresets.clay()))
    world.add(Triangle(Vector3(1.0, -0.5, -2.5), Vector3(2.0, -0.5, -2.0), Vector3(1.5, 0.6, -2.3),
                       MirrorPresets.copper()))

    for i in range(8):
        angle = 2.0 * math.pi * i / 8
        center = Vector3(math.cos(angle) * 1.6, -0.3, -1.5 + math.sin(angle) * 1.2)
        material = random_mirror(rng) if i % 3 == 0 else random_diffuse(rng)
        world.add(Sphere(center, 0.2, material))

    camera = Camera.from_view(
        position=Vector3(0.0, 0.4, 1.5),
        yaw=0.0,
        pitch=-0.12,
        fov=math.radians(60),
        aspect_ratio=width / height,
    )
    return world, camera


SCENES: Dict[str, SceneBuilder] = {
    "spheres": spheres_scene,
    "showcase": showcase_scene,
}


def get_scene(name: str) -> SceneBuilder:
    try:
        return SCENES[name]
    except KeyError:
        raise SceneError(f"Unknown scene {name!r}; choose from {', '.join(SCENES)}") from None


def build_scene(name: str, width: int, height: int) -> Tuple[World, Camera]:
    world, camera = get_scene(name)(width, height)
    logger.info(f"Built scene {name!r} with {len(world)} objects")
    return world, camera
