# tracer/tracer.py
from typing import Optional
from core.ray import Ray
from core.color import RGBColor

class Tracer:
    """
    Maps a ray to the color seen along it, or None when nothing is hit.
    Drivers decide what to paint for None (usually the world background).
    """
    def trace_ray(self, ray: Ray) -> Optional[RGBColor]:
        raise NotImplementedError("trace_ray() must be implemented by subclasses.")
