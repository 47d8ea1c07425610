# geometry/sphere.py
import math
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import SceneEntity, RayHit

class Sphere(SceneEntity):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Prefer the nearer root, fall back to the far one (origin inside).
        numerator = -b - sqrt_disc
        if numerator <= 0:
            numerator = -b + sqrt_disc
            if numerator <= 0:
                return None
        t = numerator / (2 * a)
        if t <= 0:
            return None

        position = ray.at(t)
        normal = (position - self.center).normalize()
        return RayHit(position, normal, ray.direction, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
