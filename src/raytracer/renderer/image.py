# renderer/image.py
import logging
import numpy as np
from PIL import Image as PILImage
from raytracer.core.color import Color
from raytracer.renderer.tone_mapping import to_uint8

logger = logging.getLogger(__name__)

class Image:
    """
    In-memory output image. Pixels are stored as linear float RGB in a
    (height, width, 3) numpy buffer, row 0 at the top.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.float32)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")

    def set_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.buffer[y, x] = (color.r, color.g, color.b)

    def get_pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.buffer[y, x]
        return Color(float(r), float(g), float(b))

    def to_uint8(self, gamma: float = 1.0) -> np.ndarray:
        return to_uint8(self.buffer, gamma)

    def to_surface_array(self, gamma: float = 1.0) -> np.ndarray:
        """8-bit pixels laid out (width, height, 3), as pygame.surfarray expects."""
        return np.transpose(self.to_uint8(gamma), (1, 0, 2))

    def save(self, path, gamma: float = 1.0):
        PILImage.fromarray(self.to_uint8(gamma)).save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
