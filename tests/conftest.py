"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Allow running the tests from a checkout without installing the package.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from raytracer.core.color import Color
from raytracer.core.vector import Vector3
from raytracer.geometry.sphere import Sphere
from raytracer.materials.diffuse import Diffuse
from raytracer.scene.light import PointLight
from raytracer.scene.options import SceneOptions
from raytracer.scene.scene import Scene


@pytest.fixture
def white():
    return Color(1.0, 1.0, 1.0)


@pytest.fixture
def white_diffuse(white):
    return Diffuse(white)


@pytest.fixture
def sphere_scene(white, white_diffuse):
    """The single-sphere scene: unit sphere at (0, 0, 4), light at (2, 2, 0)."""
    scene = Scene(SceneOptions())
    sphere = Sphere(Vector3(0, 0, 4), 1.0, white_diffuse)
    light = PointLight(Vector3(2, 2, 0), white)
    scene.add_entity(sphere)
    scene.add_point_light(light)
    return scene, sphere, light


def assert_vec_close(a, b, tol=1e-9):
    assert abs(a.x - b.x) < tol and abs(a.y - b.y) < tol and abs(a.z - b.z) < tol, f"{a} != {b}"


def assert_color_close(a, b, tol=1e-6):
    assert abs(a.r - b.r) < tol and abs(a.g - b.g) < tol and abs(a.b - b.b) < tol, f"{a} != {b}"
