# core/ray.py
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and a unit direction.
    A non-unit direction is normalized on construction.
    """
    __slots__ = ("_origin", "_direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self._origin = origin
        self._direction = direction if direction.is_normalized() else direction.normalize()

    @property
    def origin(self) -> Vector3:
        return self._origin

    @property
    def direction(self) -> Vector3:
        return self._direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self._origin + self._direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self._origin!r}, direction={self._direction!r})"
