# geometry/world.py
from typing import Iterator, List, Optional
from core.ray import Ray
from core.color import RGBColor, BLACK
from core.utils import INFINITY
from geometry.geometric_object import GeometricObject
from geometry.shade_record import ShadeRecord

class World:
    """
    The scene: an ordered list of primitives plus the color drivers paint
    for rays that hit nothing.
    """
    def __init__(self, background_color: RGBColor = BLACK):
        self.objects: List[GeometricObject] = []
        self.background_color = background_color

    def add(self, obj: GeometricObject):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[GeometricObject]:
        return iter(self.objects)

    def hit_objects(self, ray: Ray) -> Optional[ShadeRecord]:
        """
        Returns the shade record of the nearest primitive hit by the ray, or
        None. On equal distances the primitive added first wins.
        """
        nearest = None
        closest_so_far = INFINITY
        for obj in self.objects:
            hit, t, record = obj.hit(ray)
            if hit and t < closest_so_far:
                closest_so_far = t
                nearest = record
        return nearest
