from pathtrace.geometry.hittable import EPSILON, Hittable, HitRecord
from pathtrace.geometry.mesh import Triangle, TriangleMesh, load_obj
from pathtrace.geometry.plane import HorizontalPlane, Plane
from pathtrace.geometry.sphere import Sphere
from pathtrace.geometry.world import World
