# geometry/shade_record.py
from typing import Optional
from core.vector import Vector3
from core.color import RGBColor

class ShadeRecord:
    """
    Data handed from a ray-object intersection to the shading stage.
    Read-only once built; create instances with ShadeRecordBuilder.
    """
    __slots__ = ("_hit_an_object", "_local_hit_point", "_normal", "_color")

    def __init__(self, hit_an_object: bool = False,
                 local_hit_point: Optional[Vector3] = None,
                 normal: Optional[Vector3] = None,
                 color: Optional[RGBColor] = None):
        self._hit_an_object = hit_an_object
        self._local_hit_point = local_hit_point  # World-space hit point
        self._normal = normal                    # Surface normal at the hit
        self._color = color                      # Flat color of the primitive

    @property
    def hit_an_object(self) -> bool:
        return self._hit_an_object

    @property
    def local_hit_point(self) -> Optional[Vector3]:
        return self._local_hit_point

    @property
    def normal(self) -> Optional[Vector3]:
        return self._normal

    @property
    def color(self) -> Optional[RGBColor]:
        return self._color

    def __repr__(self) -> str:
        return (f"ShadeRecord(hit_an_object={self._hit_an_object}, "
                f"local_hit_point={self._local_hit_point!r}, "
                f"normal={self._normal!r}, color={self._color!r})")


class ShadeRecordBuilder:
    """
    Accumulates ShadeRecord fields one at a time. Every setter overwrites the
    previous value and returns the builder, so calls can be chained:

        ShadeRecordBuilder().hit_an_object(True).color(c).finalize()

    No validation happens in finalize(); a record flagged as a hit is expected
    to carry the point, normal and color as well.
    """
    def __init__(self):
        self._hit_an_object = False
        self._local_hit_point = None
        self._normal = None
        self._color = None

    def hit_an_object(self, hit: bool) -> "ShadeRecordBuilder":
        self._hit_an_object = hit
        return self

    def local_hit_point(self, point: Vector3) -> "ShadeRecordBuilder":
        self._local_hit_point = point
        return self

    def normal(self, normal: Vector3) -> "ShadeRecordBuilder":
        self._normal = normal
        return self

    def color(self, color: RGBColor) -> "ShadeRecordBuilder":
        self._color = color
        return self

    def finalize(self) -> ShadeRecord:
        return ShadeRecord(self._hit_an_object, self._local_hit_point,
                           self._normal, self._color)
