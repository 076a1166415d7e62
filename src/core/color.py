# core/color.py
from typing import Tuple

class RGBColor:
    """
    A linear RGB color with three real-valued channels and no alpha.
    Equality is exact.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    def __add__(self, other: "RGBColor") -> "RGBColor":
        return RGBColor(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return RGBColor(self.r * other, self.g * other, self.b * other)
        return RGBColor(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "RGBColor":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "RGBColor":
        return RGBColor(self.r / t, self.g / t, self.b / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBColor):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_sequence(cls, values) -> "RGBColor":
        r, g, b = values
        return cls(float(r), float(g), float(b))

    def __repr__(self) -> str:
        return f"RGBColor({self.r}, {self.g}, {self.b})"


BLACK = RGBColor(0.0, 0.0, 0.0)
WHITE = RGBColor(1.0, 1.0, 1.0)
RED = RGBColor(1.0, 0.0, 0.0)
GREEN = RGBColor(0.0, 1.0, 0.0)
BLUE = RGBColor(0.0, 0.0, 1.0)
