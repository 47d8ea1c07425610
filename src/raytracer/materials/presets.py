# materials/presets.py
from raytracer.core.color import Color
from raytracer.materials.diffuse import Diffuse
from raytracer.materials.reflective import Reflective
from raytracer.materials.refractive import Refractive

class ColorPresets:
    """Common color presets for materials and lights."""

    WHITE = Color(1.0, 1.0, 1.0)
    BLACK = Color(0.0, 0.0, 0.0)
    RED = Color(0.9, 0.1, 0.1)
    GREEN = Color(0.1, 0.9, 0.1)
    BLUE = Color(0.1, 0.1, 0.9)
    YELLOW = Color(0.9, 0.9, 0.1)
    GREY = Color(0.5, 0.5, 0.5)

    @staticmethod
    def warm_light(intensity: float = 1.0) -> Color:
        return Color(1.0, 0.95, 0.9) * intensity

    @staticmethod
    def cool_light(intensity: float = 1.0) -> Color:
        return Color(0.9, 0.95, 1.0) * intensity

class MaterialPresets:
    """Predefined materials with realistic refractive indices."""

    @staticmethod
    def matte(color: Color) -> Diffuse:
        return Diffuse(color)

    @staticmethod
    def mirror() -> Reflective:
        return Reflective(ColorPresets.WHITE)

    @staticmethod
    def glass() -> Refractive:
        return Refractive(ColorPresets.WHITE, 1.52)  # Common glass

    @staticmethod
    def water() -> Refractive:
        return Refractive(ColorPresets.WHITE, 1.33)

    @staticmethod
    def diamond() -> Refractive:
        return Refractive(ColorPresets.WHITE, 2.42)

    @staticmethod
    def ice() -> Refractive:
        return Refractive(ColorPresets.WHITE, 1.31)
