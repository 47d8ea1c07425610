# materials/refractive.py
from raytracer.core.color import Color
from raytracer.materials.material import Material, MaterialType

class Refractive(Material):
    """
    Dielectric (glass, water, ...) splitting light between a reflected and
    a transmitted ray according to the Fresnel equations.
    """
    type = MaterialType.REFRACTIVE

    def __init__(self, color: Color, refractive_index: float):
        super().__init__(color)
        self.refractive_index = float(refractive_index)

    def __repr__(self) -> str:
        return f"Refractive({self.color!r}, {self.refractive_index})"
