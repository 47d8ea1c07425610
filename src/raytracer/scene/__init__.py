from raytracer.scene.light import PointLight
from raytracer.scene.options import SceneOptions
from raytracer.scene.scene import Scene

__all__ = ["PointLight", "SceneOptions", "Scene"]
