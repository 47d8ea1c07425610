"""Tests for the recursive shading engine and the frame driver."""

import math

import numpy as np
import pytest

from conftest import assert_color_close
from raytracer.camera.camera import Camera
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.materials.diffuse import Diffuse
from raytracer.materials.material import Material
from raytracer.materials.reflective import Reflective
from raytracer.materials.refractive import Refractive
from raytracer.renderer.image import Image
from raytracer.renderer.raytracer import MAX_DEPTH, Renderer
from raytracer.scene.demo import build_demo_scene
from raytracer.scene.light import PointLight
from raytracer.scene.options import SceneOptions
from raytracer.scene.scene import Scene

FORWARD = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
# N.L at the front of the unit sphere at (0, 0, 4) for a light at (2, 2, 0).
FRONT_COS = 3 / math.sqrt(17)


def single_sphere(material, white, options=None):
    scene = Scene(options)
    scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, material))
    scene.add_point_light(PointLight(Vector3(2, 2, 0), white))
    return scene


class TestShade:
    def test_defaults(self, sphere_scene):
        scene, _, _ = sphere_scene
        assert Renderer(scene).max_depth == MAX_DEPTH == 4

    @pytest.mark.parametrize("material", [
        Diffuse(Color(1, 1, 1)),
        Reflective(Color(1, 1, 1)),
        Refractive(Color(1, 1, 1), 1.5),
    ])
    @pytest.mark.parametrize("ambient", [False, True])
    def test_depth_limit_returns_black(self, white, material, ambient):
        scene = single_sphere(material, white, SceneOptions(ambient_lighting_enabled=ambient))
        renderer = Renderer(scene, seed=1)
        assert renderer.shade(FORWARD, renderer.max_depth).is_black()

    def test_miss_returns_black(self, sphere_scene):
        scene, _, _ = sphere_scene
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert Renderer(scene).shade(ray).is_black()

    def test_diffuse_direct_light(self, sphere_scene):
        scene, _, _ = sphere_scene
        color = Renderer(scene).shade(FORWARD)
        assert_color_close(color, Color(FRONT_COS, FRONT_COS, FRONT_COS))

    def test_diffuse_filters_light_and_material_colors(self):
        scene = Scene()
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, Diffuse(Color(0.5, 1.0, 0.2))))
        scene.add_point_light(PointLight(Vector3(2, 2, 0), Color(1.0, 0.5, 1.0)))
        color = Renderer(scene).shade(FORWARD)
        assert_color_close(color, Color(0.5, 0.5, 0.2) * FRONT_COS)

    def test_diffuse_shadowed(self, sphere_scene, white_diffuse):
        scene, _, _ = sphere_scene
        scene.add_entity(Sphere(Vector3(1, 1, 1.5), 1.2, white_diffuse))
        assert Renderer(scene).shade(FORWARD).is_black()

    def test_light_behind_surface_adds_nothing(self, white, white_diffuse):
        scene = Scene()
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, white_diffuse))
        scene.add_point_light(PointLight(Vector3(2, 2, 0), white))
        # Lights the back of the sphere only; must not cancel the front light.
        scene.add_point_light(PointLight(Vector3(0, 0, 20), white))
        color = Renderer(scene).shade(FORWARD)
        assert_color_close(color, Color(FRONT_COS, FRONT_COS, FRONT_COS))

    def test_ambient_on_isolated_sphere_scales_direct_light(self, white, white_diffuse):
        # Hemisphere rays from a lone convex sphere escape, so indirect is zero.
        scene = single_sphere(white_diffuse, white, SceneOptions(ambient_lighting_enabled=True))
        color = Renderer(scene, seed=7).shade(FORWARD, rng=np.random.default_rng(7))
        expected = FRONT_COS / math.pi
        assert_color_close(color, Color(expected, expected, expected))

    def test_ambient_picks_up_indirect_light_when_shadowed(self, white, white_diffuse):
        scene = single_sphere(white_diffuse, white, SceneOptions(ambient_lighting_enabled=True))
        entity, hit = scene.nearest_hit(FORWARD)
        scene.add_entity(Sphere(Vector3(1, 1, 1.5), 1.2, white_diffuse))
        # A lit floor for the hemisphere rays to find.
        scene.add_entity(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), white_diffuse))
        renderer = Renderer(scene, max_depth=2, ambient_samples=16, seed=3)
        assert renderer.direct_light(entity, hit).is_black()
        color = renderer.shade(FORWARD, rng=np.random.default_rng(3))
        assert color.r > 0

    def test_ambient_is_reproducible_with_same_generator(self, white):
        scene = build_demo_scene(SceneOptions(ambient_lighting_enabled=True))
        renderer = Renderer(scene, max_depth=3)
        ray = Ray(Vector3(0, 0, 0), Vector3(-0.2, -0.3, 1).normalize())
        a = renderer.shade(ray, rng=np.random.default_rng(42))
        b = renderer.shade(ray, rng=np.random.default_rng(42))
        assert a == b

    def test_ambient_samples_around_stored_normal_on_back_face_hit(self, white, white_diffuse, monkeypatch):
        scene = Scene(SceneOptions(ambient_lighting_enabled=True))
        # The ray travels along +z and meets the plane from behind its normal.
        plane = Plane(Vector3(0, 0, 5), Vector3(0, 0, 1), white_diffuse)
        scene.add_entity(plane)
        scene.add_point_light(PointLight(Vector3(0, 0, 0), white))
        renderer = Renderer(scene, seed=5)
        shade = renderer.shade
        directions = []

        def recording_shade(ray, depth=0, rng=None):
            if depth >= 1:
                directions.append(ray.direction)
                return Color.black()
            return shade(ray, depth, rng)

        monkeypatch.setattr(renderer, "shade", recording_shade)
        renderer.shade(FORWARD, rng=np.random.default_rng(5))
        assert len(directions) == renderer.ambient_samples
        assert all(d.dot(plane.normal) >= 0 for d in directions)

    def test_ambient_without_generator_is_seeded_per_call(self, white, white_diffuse):
        scene = single_sphere(white_diffuse, white, SceneOptions(ambient_lighting_enabled=True))
        scene.add_entity(Plane(Vector3(0, -1, 0), Vector3(0, 1, 0), white_diffuse))
        renderer = Renderer(scene, max_depth=2, seed=9)
        first = renderer.shade(FORWARD)
        assert renderer.shade(FORWARD) == first
        assert renderer.shade(FORWARD, rng=np.random.default_rng(9)) == first
        assert not hasattr(renderer, "rng")

    def test_mirror_at_normal_incidence_reflects_back(self, white, white_diffuse):
        scene = Scene()
        scene.add_entity(Plane(Vector3(0, 0, 5), Vector3(0, 0, -1), Reflective(white)))
        # Only reachable by travelling back along -z.
        scene.add_entity(Sphere(Vector3(0, 0, -3), 1.0, white_diffuse))
        scene.add_point_light(PointLight(Vector3(0, 0, 0), white))
        color = Renderer(scene).shade(FORWARD)
        assert_color_close(color, Color(1, 1, 1))

    def test_mirror_returns_black_without_anything_to_reflect(self, white):
        scene = Scene()
        scene.add_entity(Plane(Vector3(0, 0, 5), Vector3(0, 0, -1), Reflective(white)))
        scene.add_point_light(PointLight(Vector3(0, 0, 0), white))
        assert Renderer(scene).shade(FORWARD).is_black()

    def test_refraction_with_matched_index_passes_straight_through(self, white, white_diffuse):
        scene = Scene()
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, Refractive(white, 1.0)))
        scene.add_entity(Sphere(Vector3(0, 0, 10), 1.0, white_diffuse))
        scene.add_point_light(PointLight(Vector3(0, 0, 8.5), white))
        color = Renderer(scene).shade(FORWARD)
        assert_color_close(color, Color(1, 1, 1))

    def test_glass_mixes_reflection_and_transmission(self, white, white_diffuse):
        scene = Scene()
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, Refractive(white, 1.5)))
        scene.add_entity(Sphere(Vector3(0, 0, 10), 1.0, white_diffuse))
        scene.add_point_light(PointLight(Vector3(0, 0, 8.5), white))
        color = Renderer(scene, max_depth=6).shade(FORWARD)
        assert 0.0 < color.r < 1.0

    def test_unknown_material_is_black(self, white):
        class Emissive(Material):
            pass

        scene = single_sphere(Emissive(white), white)
        assert Renderer(scene).shade(FORWARD).is_black()

    def test_rejects_bad_arguments(self, sphere_scene):
        scene, _, _ = sphere_scene
        with pytest.raises(ValueError):
            Renderer(scene, max_depth=-1)
        with pytest.raises(ValueError):
            Renderer(scene, ambient_samples=0)
        with pytest.raises(ValueError):
            Renderer(scene).render(Image(2, 2), workers=0)


class TestRender:
    def test_single_pixel_single_sphere(self, sphere_scene):
        scene, _, _ = sphere_scene
        image = Renderer(scene).render(Image(1, 1))
        assert_color_close(image.get_pixel(0, 0), Color(FRONT_COS, FRONT_COS, FRONT_COS))

    def test_single_pixel_shadowed(self, sphere_scene, white_diffuse):
        scene, _, _ = sphere_scene
        scene.add_entity(Sphere(Vector3(1, 1, 1.5), 1.2, white_diffuse))
        image = Renderer(scene).render(Image(1, 1))
        assert image.get_pixel(0, 0).is_black()

    def test_output_is_clamped(self, white_diffuse):
        scene = Scene()
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, white_diffuse))
        scene.add_point_light(PointLight(Vector3(0, 0, 0), Color(5, 5, 5)))
        image = Renderer(scene).render(Image(1, 1))
        assert image.get_pixel(0, 0) == Color(1, 1, 1)
        assert image.buffer.max() <= 1.0
        assert image.buffer.min() >= 0.0

    def test_antialiasing_averages_subsamples(self, white, white_diffuse):
        options = SceneOptions(aa_multiplier=3)
        scene = Scene(options)
        scene.add_entity(Sphere(Vector3(0, 0, 4), 1.0, white_diffuse))
        # Light at the eye so every visible point is lit.
        scene.add_point_light(PointLight(Vector3(0, 0, 0), white))
        renderer = Renderer(scene)
        image = renderer.render(Image(1, 1))

        rays = Camera(1, 1, options).get_rays(0, 0)
        assert len(rays) == 9
        expected = sum((renderer.shade(r) for r in rays), Color.black()) / 9
        assert_color_close(image.get_pixel(0, 0), expected.clamp())
        assert 0.0 < image.get_pixel(0, 0).r < 1.0

    def test_seeded_render_is_reproducible_across_workers(self):
        options = SceneOptions(ambient_lighting_enabled=True)
        serial = Renderer(build_demo_scene(options), max_depth=2, seed=11).render(Image(6, 4))
        threaded = Renderer(build_demo_scene(options), max_depth=2, seed=11).render(Image(6, 4), workers=3)
        np.testing.assert_array_equal(serial.buffer, threaded.buffer)

    def test_demo_scene_renders_something(self):
        image = Renderer(build_demo_scene()).render(Image(8, 6))
        assert image.buffer.max() > 0.0
