# materials/diffuse.py
from raytracer.materials.material import Material, MaterialType

class Diffuse(Material):
    """
    Lambertian diffuse material: lit by point lights through N.L and, when
    ambient lighting is on, by sampled indirect light.
    """
    type = MaterialType.DIFFUSE
