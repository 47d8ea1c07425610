# materials/material.py
from enum import Enum
from raytracer.core.color import Color

class MaterialType(Enum):
    DIFFUSE = "diffuse"
    REFLECTIVE = "reflective"
    REFRACTIVE = "refractive"

class Material:
    """
    Abstract material. Every material has a base color and a type tag the
    shading engine dispatches on.
    """
    type: MaterialType = None

    def __init__(self, color: Color):
        self.color = color

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r})"
