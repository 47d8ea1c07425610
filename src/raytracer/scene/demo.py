# scene/demo.py
import logging
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.triangle import Triangle
from raytracer.materials.presets import ColorPresets, MaterialPresets
from raytracer.scene.light import PointLight
from raytracer.scene.options import SceneOptions
from raytracer.scene.scene import Scene

logger = logging.getLogger(__name__)

def build_single_sphere_scene(options: Optional[SceneOptions] = None) -> Scene:
    """One white diffuse unit sphere at (0, 0, 4) lit from (2, 2, 0)."""
    scene = Scene(options)
    scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, MaterialPresets.matte(ColorPresets.WHITE)))
    scene.add_point_light(PointLight(Vector3(2, 2, 0), ColorPresets.WHITE))
    return scene

def build_demo_scene(options: Optional[SceneOptions] = None) -> Scene:
    """
    A closed room of planes (red left wall, green right wall) holding a
    matte, a mirror and a glass sphere in front of a blue triangle.
    """
    scene = Scene(options)

    # Room, every wall facing inwards.
    scene.add_entity(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), MaterialPresets.matte(ColorPresets.GREY)))
    scene.add_entity(Plane(Vector3(0, 2.5, 0), Vector3(0, -1, 0), MaterialPresets.matte(ColorPresets.WHITE)))
    scene.add_entity(Plane(Vector3(0, 0, 8), Vector3(0, 0, -1), MaterialPresets.matte(ColorPresets.WHITE)))
    scene.add_entity(Plane(Vector3(0, 0, -1), Vector3(0, 0, 1), MaterialPresets.matte(ColorPresets.WHITE)))
    scene.add_entity(Plane(Vector3(-2.5, 0, 0), Vector3(1, 0, 0), MaterialPresets.matte(ColorPresets.RED)))
    scene.add_entity(Plane(Vector3(2.5, 0, 0), Vector3(-1, 0, 0), MaterialPresets.matte(ColorPresets.GREEN)))

    # Triangle wound so its normal faces the camera.
    scene.add_entity(Triangle(
        Vector3(-1, -1, 7), Vector3(0, 0.6, 7), Vector3(1, -1, 7),
        MaterialPresets.matte(ColorPresets.BLUE)
    ))

    scene.add_entity(Sphere(Vector3(-1.2, -0.4, 5), 0.6, MaterialPresets.matte(ColorPresets.YELLOW)))
    scene.add_entity(Sphere(Vector3(1.2, -0.3, 6), 0.7, MaterialPresets.mirror()))
    scene.add_entity(Sphere(Vector3(0.2, -0.6, 3.8), 0.4, MaterialPresets.glass()))

    scene.add_point_light(PointLight(Vector3(0, 2.2, 4), ColorPresets.warm_light(0.9)))
    scene.add_point_light(PointLight(Vector3(-1.5, 1.5, 1), ColorPresets.cool_light(0.4)))

    logger.debug("Built demo scene: %r", scene)
    return scene

SCENES = {
    "demo": build_demo_scene,
    "sphere": build_single_sphere_scene,
}
