# geometry/mesh.py
from typing import Iterable, List, Optional
from loguru import logger
from pathtrace.core.vector import Vector3
from pathtrace.core.ray import Ray
from pathtrace.errors import SceneError
from pathtrace.geometry.hittable import EPSILON, Hittable, HitRecord

class Triangle(Hittable):
    """Represents a single flat-shaded triangle in 3D space."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material

        # Edges in winding order, each paired with its start vertex
        self.edges = ((v1 - v0, v0), (v2 - v1, v1), (v0 - v2, v2))
        n = (v1 - v0).cross(v2 - v0)
        # Collinear or repeated vertices span no area and have no normal
        self.degenerate = n.length_squared() == 0.0
        self.normal = n if self.degenerate else n.normalize()

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        if self.degenerate:
            return None

        denom = ray.direction.dot(self.normal)

        # Parallel to the triangle's plane
        if denom == 0.0:
            return None

        t = (self.v0 - ray.origin).dot(self.normal) / denom
        if t < EPSILON:
            return None

        p = ray.at(t)
        # The point must lie on the inner side of every edge
        for edge, start in self.edges:
            if self.normal.dot(edge.cross(p - start)) < 0.0:
                return None

        return HitRecord(t, p, self.normal, self.material)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"

class TriangleMesh(Hittable):
    """Represents a 3D mesh composed of triangles."""
    def __init__(self, triangles: Iterable[Triangle]):
        self.triangles: List[Triangle] = list(triangles)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        closest_hit = None
        for triangle in self.triangles:
            rec = triangle.hit(ray)
            if rec is not None and (closest_hit is None or rec.t < closest_hit.t):
                closest_hit = rec
        return closest_hit

    def __len__(self) -> int:
        return len(self.triangles)

def load_obj(filename: str, material) -> TriangleMesh:
    """
    Load a triangle mesh from a Wavefront OBJ file.

    Only vertex positions (`v`) and faces (`f`) are read; texture and normal
    indices on faces are ignored. Polygons are fan-triangulated, so they are
    assumed to be convex.

    Faces with zero area are skipped with a warning.

    Raises:
        SceneError: If a vertex or face record cannot be parsed, or a face
            refers to a vertex that does not exist.
    """
    vertices: List[Vector3] = []
    triangles: List[Triangle] = []

    logger.debug(f"Opening file: {filename}")
    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue

            try:
                if values[0] == 'v':
                    vertices.append(Vector3(float(values[1]), float(values[2]), float(values[3])))
                elif values[0] == 'f':
                    # OBJ indices are 1-based; negative ones count back from the last vertex
                    indices = []
                    for token in values[1:]:
                        index = int(token.split('/')[0])
                        resolved = index - 1 if index > 0 else len(vertices) + index
                        if not 0 <= resolved < len(vertices):
                            raise ValueError(f"vertex index {index} out of range")
                        indices.append(resolved)
                    if len(indices) < 3:
                        raise ValueError("face needs at least three vertices")

                    v0 = vertices[indices[0]]
                    for i in range(1, len(indices) - 1):
                        triangle = Triangle(v0, vertices[indices[i]], vertices[indices[i + 1]], material)
                        if triangle.degenerate:
                            logger.warning(f"{filename}:{line_num}: skipping degenerate triangle")
                            continue
                        triangles.append(triangle)
            except (ValueError, IndexError) as e:
                raise SceneError(f"{filename}:{line_num}: cannot parse {line.strip()!r} ({e})") from e

    logger.info(f"Loaded {len(vertices)} vertices, {len(triangles)} triangles from {filename}")
    return TriangleMesh(triangles)
