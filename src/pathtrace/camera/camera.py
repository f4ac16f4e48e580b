# camera/camera.py
import math
from pathtrace.core.vector import Vector3
from pathtrace.core.ray import Ray

class Camera:
    """
    A pinhole camera described by its image-plane basis: the plane spans
    lower_left_corner + horizontal*u + vertical*v for u, v in [0, 1].
    """
    def __init__(self, origin: Vector3, lower_left_corner: Vector3,
                 horizontal: Vector3, vertical: Vector3):
        self.origin = origin
        self.lower_left_corner = lower_left_corner
        self.horizontal = horizontal
        self.vertical = vertical

    @classmethod
    def from_view(cls, position: Vector3, yaw: float, pitch: float,
                  fov: float, aspect_ratio: float, focus_dist: float = 1.0) -> "Camera":
        """
        Builds the basis from a view direction (yaw and pitch in radians,
        yaw 0 looks down -z) and a vertical field of view in radians.
        """
        global_up = Vector3(0, 1, 0)

        # Compute forward vector
        forward = Vector3(
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch)
        ).normalize()

        # Compute right and up vectors
        right = forward.cross(global_up).normalize()
        up = right.cross(forward).normalize()

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(fov / 2)
        viewport_width = aspect_ratio * viewport_height

        horizontal = right * viewport_width * focus_dist
        vertical = up * viewport_height * focus_dist
        lower_left_corner = (position +
                             forward * focus_dist -
                             horizontal * 0.5 -
                             vertical * 0.5)
        return cls(position, lower_left_corner, horizontal, vertical)

    def get_ray(self, u: float, v: float) -> Ray:
        """Generates the ray through image-plane coordinates (u, v)."""
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, lower_left_corner={self.lower_left_corner!r}, "
                f"horizontal={self.horizontal!r}, vertical={self.vertical!r})")
