# geometry/geometric_object.py
from typing import Optional, Tuple
from core.ray import Ray
from core.color import RGBColor
from geometry.shade_record import ShadeRecord

# (hit, t, shade record). On a miss this is (False, None, None).
HitResult = Tuple[bool, Optional[float], Optional[ShadeRecord]]

MISS: HitResult = (False, None, None)

class GeometricObject:
    """
    Abstract class for primitives that can be hit by a ray.
    Subclasses keep their color behind color()/set_color().
    """
    def hit(self, ray: Ray) -> HitResult:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def color(self) -> RGBColor:
        raise NotImplementedError("color() must be implemented by subclasses.")

    def set_color(self, color: RGBColor) -> None:
        raise NotImplementedError("set_color() must be implemented by subclasses.")
