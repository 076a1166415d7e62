from geometry.shade_record import ShadeRecord, ShadeRecordBuilder
from geometry.geometric_object import GeometricObject, HitResult, MISS
from geometry.plane import Plane
from geometry.world import World

__all__ = [
    "ShadeRecord",
    "ShadeRecordBuilder",
    "GeometricObject",
    "HitResult",
    "MISS",
    "Plane",
    "World",
]
