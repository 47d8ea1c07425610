# scene/light.py
from raytracer.core.color import Color
from raytracer.core.vector import Vector3

class PointLight:
    """
    An infinitesimal light emitting `color` from `position`.
    """
    __slots__ = ("position", "color")

    def __init__(self, position: Vector3, color: Color):
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.color!r})"
