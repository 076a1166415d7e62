# geometry/plane.py
import numpy as np
from core.vector import Vector3
from core.ray import Ray
from core.color import RGBColor, BLACK
from core.utils import is_valid_distance
from geometry.geometric_object import GeometricObject, HitResult, MISS
from geometry.shade_record import ShadeRecordBuilder

class Plane(GeometricObject):
    """
    An infinite plane through a point with a unit normal, shaded with a
    single flat color.
    """
    def __init__(self, point: Vector3, normal: Vector3):
        # The normal must not be the zero vector.
        if not normal.is_normalized():
            normal = normal.normalize()
        self._point = point
        self._normal = normal
        self._color = BLACK

    def point(self) -> Vector3:
        return self._point

    def normal(self) -> Vector3:
        return self._normal

    def hit(self, ray: Ray) -> HitResult:
        numerator = (self._point - ray.origin).dot(self._normal)
        denominator = ray.direction.dot(self._normal)
        # IEEE division: a parallel ray gives inf or nan instead of raising.
        with np.errstate(divide="ignore", invalid="ignore"):
            t = float(np.float64(numerator) / np.float64(denominator))

        if not is_valid_distance(t):
            return MISS

        record = (ShadeRecordBuilder()
                  .hit_an_object(True)
                  .local_hit_point(ray.at(t))
                  .normal(self._normal)
                  .color(self.color())
                  .finalize())
        return True, t, record

    def color(self) -> RGBColor:
        return self._color

    def set_color(self, color: RGBColor) -> None:
        self._color = color

    def __repr__(self) -> str:
        return f"Plane(point={self._point!r}, normal={self._normal!r}, color={self._color!r})"
