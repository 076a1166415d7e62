# tracer/multiple_objects.py
from typing import Optional
from core.ray import Ray
from core.color import RGBColor
from geometry.world import World
from tracer.tracer import Tracer

class MultipleObjects(Tracer):
    """
    Flat-color tracer: the color of the nearest primitive in the world.
    The world is shared by reference, so later scene edits are visible.
    """
    def __init__(self, world: World):
        self.world = world

    def trace_ray(self, ray: Ray) -> Optional[RGBColor]:
        record = self.world.hit_objects(ray)
        if record is not None and record.hit_an_object:
            return record.color
        return None
