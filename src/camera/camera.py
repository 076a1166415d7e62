# camera/camera.py
import math
from core.vector import Vector3, UP
from core.ray import Ray

class Camera:
    """Pinhole camera looking along -z at yaw = pitch = 0."""
    def __init__(self, position: Vector3, yaw: float, pitch: float,
                 fov: float, aspect_ratio: float):
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov  # Vertical field of view in radians
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        # Compute forward vector
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        # Compute right and up vectors
        self.right = self.forward.cross(UP).normalize()
        self.up = self.right.cross(self.forward).normalize()

        # Viewport one unit in front of the eye
        viewport_height = 2.0 * math.tan(self.fov / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.horizontal = self.right * viewport_width
        self.vertical = self.up * viewport_height

        self.lower_left_corner = (self.position +
                                  self.forward -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates a ray through the viewport coordinates (u, v), where (0, 0)
        is the lower left corner and (1, 1) the upper right one.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.position)
        return Ray(self.position, direction)
