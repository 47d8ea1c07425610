# camera/camera.py
import math
from typing import List, Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.core.utils import rotate, random_in_unit_disk
from raytracer.scene.options import SceneOptions

FOV_DEGREES = 60.0

class Camera:
    """
    Pinhole camera at the world origin looking down +z, optionally rotated
    and moved by the scene options, with an optional thin lens.
    """
    def __init__(self, width: int, height: int, options: Optional[SceneOptions] = None,
                 fov: float = math.radians(FOV_DEGREES)):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        options = options if options is not None else SceneOptions()
        self.width = width
        self.height = height
        self.fov = fov
        self.aspect_ratio = width / height
        self.scale = math.tan(fov / 2)
        self.aa_multiplier = options.aa_multiplier

        self.position = options.camera_position
        self.axis = options.camera_axis
        self.angle = math.radians(options.camera_angle)
        self.lens_radius = options.aperture_radius
        self.focal_length = options.focal_length

        # Lens plane axes, used to displace ray origins for depth of field.
        self.right = self._orient(Vector3(1, 0, 0))
        self.up = self._orient(Vector3(0, 1, 0))
        self.offsets = self.sample_offsets()

    def _orient(self, v: Vector3) -> Vector3:
        return rotate(v, self.axis, self.angle)

    def screen_point(self, x: int, y: int):
        """Projection-plane coordinates (at z = 1) of the centre of pixel (x, y)."""
        pixel_x = (x + 0.5) / self.width
        pixel_y = (y + 0.5) / self.height
        x_pos = (pixel_x * 2 - 1) * self.scale
        y_pos = (1 - pixel_y * 2) * (self.scale / self.aspect_ratio)
        return x_pos, y_pos

    def sample_offsets(self) -> List[tuple]:
        """
        Sub-pixel offsets on the projection plane. A single centred sample
        for aa_multiplier == 1, otherwise n * n samples alternating in sign
        with their index and bounded by the pixel footprint.
        """
        n = self.aa_multiplier
        if n == 1:
            return [(0.0, 0.0)]
        offsets = []
        for i in range(1, n + 1):
            for j in range(1, n + 1):
                x_dir = 1 if i % 2 == 0 else -1
                y_dir = 1 if j % 2 == 0 else -1
                offsets.append((
                    (i * x_dir) / (self.width * n * 2),
                    (j * y_dir) / (self.height * n * 2),
                ))
        return offsets

    def get_ray(self, x_pos: float, y_pos: float, rng=None) -> Ray:
        """Ray through the projection-plane point (x_pos, y_pos, 1)."""
        direction = self._orient(Vector3(x_pos, y_pos, 1).normalize())
        if self.lens_radius <= 0 or rng is None:
            return Ray(self.position, direction)

        # Thin lens: start somewhere on the aperture and aim at the point the
        # pinhole ray reaches at the focal distance.
        focus_point = self.position + direction * self.focal_length
        rd = random_in_unit_disk(rng) * self.lens_radius
        origin = self.position + self.right * rd.x + self.up * rd.y
        return Ray(origin, (focus_point - origin).normalize())

    def get_rays(self, x: int, y: int, rng=None) -> List[Ray]:
        """All primary rays for pixel (x, y)."""
        x_pos, y_pos = self.screen_point(x, y)
        return [self.get_ray(x_pos + dx, y_pos + dy, rng) for dx, dy in self.offsets]
