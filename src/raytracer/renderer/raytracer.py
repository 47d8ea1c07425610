# renderer/raytracer.py
import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from raytracer.camera.camera import Camera
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import orthonormal_basis, reflect, refract
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import RayHit, SceneEntity
from raytracer.materials.material import MaterialType
from raytracer.renderer.image import Image
from raytracer.renderer.kernels import fresnel_reflectance, hemisphere_sample
from raytracer.scene.scene import Scene

logger = logging.getLogger(__name__)

MAX_DEPTH = 4
AMBIENT_SAMPLES = 8
# Distance secondary rays are pushed off a surface to avoid re-hitting it.
SURFACE_OFFSET = 1e-6
HEMISPHERE_PDF = 1 / (2 * math.pi)

class Renderer:
    """
    Whitted-style recursive ray tracer over a Scene.

    shade() never mutates the renderer or the scene; all randomness comes
    from the generator passed in, so rows can be rendered concurrently.
    """
    def __init__(self, scene: Scene, max_depth: int = MAX_DEPTH,
                 ambient_samples: int = AMBIENT_SAMPLES, seed: Optional[int] = None):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if ambient_samples < 1:
            raise ValueError(f"ambient_samples must be >= 1, got {ambient_samples}")
        self.scene = scene
        self.max_depth = max_depth
        self.ambient_samples = ambient_samples
        self.seed = seed

    # ------------------------------------------------------------------
    # Light transport
    # ------------------------------------------------------------------
    def shade(self, ray: Ray, depth: int = 0, rng=None) -> Color:
        """
        Radiance arriving along `ray`. Rays at or beyond max_depth, and rays
        that hit nothing, return black.
        """
        if depth >= self.max_depth:
            return Color.black()

        nearest = self.scene.nearest_hit(ray)
        if nearest is None:
            return Color.black()
        entity, hit = nearest
        material = entity.material

        outside = hit.incident.dot(hit.normal) < 0
        offset = hit.normal * SURFACE_OFFSET
        above = hit.position + offset if outside else hit.position - offset
        below = hit.position - offset if outside else hit.position + offset

        material_type = getattr(material, "type", None)
        if material_type is MaterialType.DIFFUSE:
            direct = self.direct_light(entity, hit)
            if not self.scene.options.ambient_lighting_enabled:
                return direct
            if rng is None:
                # Seeded afresh on each top-level call.
                rng = np.random.default_rng(self.seed)
            indirect = self.indirect_light(hit.normal, above, depth, rng)
            return (direct + indirect) * material.color / math.pi

        if material_type is MaterialType.REFLECTIVE:
            direction = reflect(hit.incident, hit.normal).normalize()
            return self.shade(Ray(above, direction), depth + 1, rng)

        if material_type is MaterialType.REFRACTIVE:
            return self._refract(material, hit, above, below, depth, rng)

        return Color.black()

    def direct_light(self, entity: SceneEntity, hit: RayHit) -> Color:
        """
        Lambertian contribution of every point light that can see the hit.
        Lights behind the surface add nothing.
        """
        color = Color.black()
        normal = hit.normal
        for light in self.scene.lights:
            if self.scene.in_shadow(entity, light, hit):
                continue
            to_light = (light.position - hit.position).normalize()
            cos_theta = normal.dot(to_light)
            if cos_theta <= 0:
                continue
            color = color + entity.material.color * light.color * cos_theta
        return color

    def indirect_light(self, normal: Vector3, origin: Vector3, depth: int, rng) -> Color:
        """
        Monte-Carlo estimate of light arriving over the hemisphere around
        `normal`, from `ambient_samples` uniformly distributed rays.
        """
        tangent, bitangent = orthonormal_basis(normal)

        total = Color.black()
        for _ in range(self.ambient_samples):
            x, y, z = hemisphere_sample(rng.random(), rng.random())
            direction = Vector3(
                x * bitangent.x + y * normal.x + z * tangent.x,
                x * bitangent.y + y * normal.y + z * tangent.y,
                x * bitangent.z + y * normal.z + z * tangent.z
            ).normalize()
            total = total + self.shade(Ray(origin, direction), depth + 1, rng) / HEMISPHERE_PDF
        return total / self.ambient_samples

    def _refract(self, material, hit: RayHit, above: Vector3, below: Vector3,
                 depth: int, rng) -> Color:
        n = hit.normal
        cosi = max(-1.0, min(1.0, hit.incident.dot(n)))
        etai, etat = 1.0, material.refractive_index

        if cosi < 0:
            # Entering the material from outside.
            cosi = -cosi
        else:
            etai, etat = etat, etai
            n = -n

        eta = etai / etat
        reflectance = fresnel_reflectance(cosi, etai, etat)

        transmitted = Color.black()
        if reflectance < 1:
            direction = refract(hit.incident, n, eta, cosi)
            if direction is None:
                reflectance = 1.0
            else:
                transmitted = self.shade(Ray(below, direction), depth + 1, rng)

        direction = reflect(hit.incident, hit.normal).normalize()
        reflected = self.shade(Ray(above, direction), depth + 1, rng)
        return transmitted * (1 - reflectance) + reflected * reflectance

    # ------------------------------------------------------------------
    # Frame driver
    # ------------------------------------------------------------------
    def trace_pixel(self, camera: Camera, x: int, y: int, rng=None) -> Color:
        """Average radiance over all primary rays of pixel (x, y), unclamped."""
        rays = camera.get_rays(x, y, rng)
        color = Color.black()
        for ray in rays:
            color = color + self.shade(ray, 0, rng)
        return color / len(rays)

    def render_row(self, camera: Camera, image: Image, y: int, rng):
        for x in range(image.width):
            image.set_pixel(x, y, self.trace_pixel(camera, x, y, rng).clamp())
        logger.debug("Row %d/%d done", y + 1, image.height)

    def render(self, image: Image, workers: int = 1) -> Image:
        """
        Renders the scene into `image`. Every row draws from its own random
        generator spawned from the renderer seed, so the result for a given
        seed does not depend on `workers`.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        camera = Camera(image.width, image.height, self.scene.options)
        row_seeds = np.random.SeedSequence(self.seed).spawn(image.height)
        row_rngs = [np.random.default_rng(s) for s in row_seeds]

        logger.info("Rendering %dx%d, %d sample(s)/pixel, max depth %d, %d worker(s), %r",
                    image.width, image.height, len(camera.offsets), self.max_depth,
                    workers, self.scene)
        start = time.perf_counter()
        if workers == 1:
            for y in range(image.height):
                self.render_row(camera, image, y, row_rngs[y])
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self.render_row, camera, image, y, row_rngs[y])
                           for y in range(image.height)]
                for future in futures:
                    future.result()
        logger.info("Render finished in %.2f s", time.perf_counter() - start)
        return image
