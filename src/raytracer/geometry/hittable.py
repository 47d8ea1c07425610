# geometry/hittable.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray

# Below this |d . n| a ray is treated as parallel to a flat surface.
PARALLEL_EPSILON = 1e-12

class RayHit:
    """
    Records details of a successful ray-object intersection.
    The normal is unit length and is NOT flipped towards the ray; compare it
    with `incident` to find out which side was hit.
    """
    __slots__ = ("position", "normal", "incident", "material")

    def __init__(self, position: Vector3, normal: Vector3, incident: Vector3, material):
        self.position = position    # Intersection point
        self.normal = normal        # Surface normal at intersection
        self.incident = incident    # Direction of the ray that produced the hit
        self.material = material

    def __repr__(self) -> str:
        return (f"RayHit(position={self.position!r}, normal={self.normal!r}, "
                f"incident={self.incident!r})")

class SceneEntity:
    """
    Abstract class for objects that can be hit by a ray.
    """
    material = None

    def intersect(self, ray: Ray) -> Optional[RayHit]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
