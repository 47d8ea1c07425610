# core/color.py
import numbers

class Color:
    """
    An RGB radiance/reflectance triple. Shaped like Vector3 but kept as its
    own type so geometry and light never mix by accident.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        object.__setattr__(self, "r", float(r))
        object.__setattr__(self, "g", float(g))
        object.__setattr__(self, "b", float(b))

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    @classmethod
    def black(cls) -> "Color":
        return cls(0.0, 0.0, 0.0)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Color(self.r * other, self.g * other, self.b * other)
        # Component-wise product (filtering one color by another).
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.r / t, self.g / t, self.b / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def clamp(self) -> "Color":
        """Pins every channel into [0, 1] independently."""
        return Color(
            min(1.0, max(0.0, self.r)),
            min(1.0, max(0.0, self.g)),
            min(1.0, max(0.0, self.b))
        )

    def is_black(self) -> bool:
        return self.r == 0.0 and self.g == 0.0 and self.b == 0.0

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
