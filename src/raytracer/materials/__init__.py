from raytracer.materials.material import Material, MaterialType
from raytracer.materials.diffuse import Diffuse
from raytracer.materials.reflective import Reflective
from raytracer.materials.refractive import Refractive

__all__ = ["Material", "MaterialType", "Diffuse", "Reflective", "Refractive"]
