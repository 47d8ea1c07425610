from raytracer.geometry.hittable import SceneEntity, RayHit, PARALLEL_EPSILON
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.triangle import Triangle
from raytracer.geometry.world import EntityList

__all__ = [
    "SceneEntity", "RayHit", "PARALLEL_EPSILON",
    "Plane", "Sphere", "Triangle", "EntityList",
]
