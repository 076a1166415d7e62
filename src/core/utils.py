# core/utils.py
import math

# Minimum parametric distance accepted as a hit. Shared by every primitive so
# that nearest-hit ordering stays consistent across shape kinds.
EPSILON = 1e-4

INFINITY = math.inf

def is_valid_distance(t: float) -> bool:
    """
    True when t is a usable hit distance: finite and strictly above EPSILON.
    NaN and +/-inf (rays parallel to a surface) are rejected.
    """
    return t > EPSILON and math.isfinite(t)
