# geometry/plane.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import SceneEntity, RayHit, PARALLEL_EPSILON

class Plane(SceneEntity):
    """
    An infinite plane through `center` facing along `normal`.
    """
    def __init__(self, center: Vector3, normal: Vector3, material):
        self.center = center
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        denom = ray.direction.dot(self.normal)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        # t = (p - o) . N / (d . N)
        t = (self.center - ray.origin).dot(self.normal) / denom
        if t <= 0:
            return None

        return RayHit(ray.at(t), self.normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Plane({self.center!r}, {self.normal!r})"
