# scene/scene.py
import logging
from typing import List, Optional, Tuple
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import SceneEntity, RayHit
from raytracer.geometry.world import EntityList
from raytracer.scene.light import PointLight
from raytracer.scene.options import SceneOptions

logger = logging.getLogger(__name__)

class Scene:
    """
    Entities, point lights and render options. Build it with add_entity and
    add_point_light, then treat it as read-only while rendering.
    """
    def __init__(self, options: Optional[SceneOptions] = None):
        self.options = options if options is not None else SceneOptions()
        self.entities = EntityList()
        self.lights: List[PointLight] = []

    def add_entity(self, entity: SceneEntity):
        if not isinstance(entity, SceneEntity):
            raise TypeError(f"expected a SceneEntity, got {type(entity).__name__}")
        if self.entities.add(entity):
            logger.debug("Added entity %r", entity)

    def add_point_light(self, light: PointLight):
        if not isinstance(light, PointLight):
            raise TypeError(f"expected a PointLight, got {type(light).__name__}")
        if any(l is light for l in self.lights):
            return
        self.lights.append(light)
        logger.debug("Added light %r", light)

    def nearest_hit(self, ray: Ray) -> Optional[Tuple[SceneEntity, RayHit]]:
        return self.entities.nearest(ray)

    def in_shadow(self, entity: SceneEntity, light: PointLight, hit: RayHit) -> bool:
        """
        True when something other than `entity` sits between the shading
        point and the light. The entity that produced the hit is skipped by
        identity, so the shadow ray needs no origin offset.
        """
        position = hit.position
        to_light = light.position - position
        light_dist_sq = to_light.length_sq()
        shadow_ray = Ray(position, to_light.normalize())

        for other in self.entities:
            if other is entity:
                continue
            blocker = other.intersect(shadow_ray)
            if blocker is None:
                continue
            if (blocker.position - position).length_sq() < light_dist_sq:
                return True
        return False

    def __repr__(self) -> str:
        return f"Scene({len(self.entities)} entities, {len(self.lights)} lights)"
