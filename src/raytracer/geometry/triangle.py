# geometry/triangle.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import SceneEntity, RayHit, PARALLEL_EPSILON

class Triangle(SceneEntity):
    """
    A single triangle with vertices wound v0 -> v1 -> v2. The face normal
    follows the right-hand rule over that winding.
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material

        edge1 = v1 - v0
        edge2 = v2 - v0
        self.normal = edge1.cross(edge2).normalize()

    def centroid(self) -> Vector3:
        return (self.v0 + self.v1 + self.v2) / 3

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        normal = self.normal
        denom = ray.direction.dot(normal)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.v0 - ray.origin).dot(normal) / denom
        if t <= 0:
            return None

        position = ray.at(t)

        # Inside-outside test: the point must lie on the inner side of all
        # three edges.
        for start, end in ((self.v0, self.v1), (self.v1, self.v2), (self.v2, self.v0)):
            c = (end - start).cross(position - start)
            if normal.dot(c) < 0:
                return None

        return RayHit(position, normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
