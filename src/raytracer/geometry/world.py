# geometry/world.py
from typing import Iterator, List, Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import SceneEntity, RayHit

class EntityList:
    """
    An ordered list of scene entities without duplicates (by identity).
    Nearest-hit queries are a linear scan; anything offering the same
    `nearest` contract can replace it.
    """
    def __init__(self):
        self.objects: List[SceneEntity] = []
        self._ids = set()

    def add(self, obj: SceneEntity) -> bool:
        """Adds obj unless this very object is already present."""
        if id(obj) in self._ids:
            return False
        self._ids.add(id(obj))
        self.objects.append(obj)
        return True

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[SceneEntity]:
        return iter(self.objects)

    def __contains__(self, obj) -> bool:
        return id(obj) in self._ids

    def nearest(self, ray: Ray) -> Optional[Tuple[SceneEntity, RayHit]]:
        """
        Returns (entity, hit) for the hit closest to the ray origin, or None.
        On exactly equal distances the entity added first wins.
        """
        closest = None
        closest_dist_sq = float("inf")
        for obj in self.objects:
            hit = obj.intersect(ray)
            if hit is None:
                continue
            dist_sq = (hit.position - ray.origin).length_sq()
            if dist_sq < closest_dist_sq:
                closest_dist_sq = dist_sq
                closest = (obj, hit)
        return closest
