# materials/reflective.py
from raytracer.materials.material import Material, MaterialType

class Reflective(Material):
    """
    Perfect mirror. The color is carried for completeness; the shading
    engine returns the mirrored radiance unfiltered.
    """
    type = MaterialType.REFLECTIVE
