# scene/options.py
from dataclasses import dataclass, field
from raytracer.core.vector import Vector3

@dataclass(frozen=True)
class SceneOptions:
    """
    Read-only render configuration.

    aa_multiplier: samples per pixel along each axis (2 => 4 samples).
    ambient_lighting_enabled: toggles Monte-Carlo indirect light on diffuse
        surfaces.
    camera_position / camera_axis / camera_angle: camera placement; the
        camera is rotated camera_angle degrees around camera_axis, then moved
        to camera_position.
    aperture_radius / focal_length: thin-lens depth of field; off while the
        aperture radius is zero.
    """
    aa_multiplier: int = 1
    ambient_lighting_enabled: bool = False
    camera_position: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    camera_axis: Vector3 = field(default_factory=lambda: Vector3(0, 0, 1))
    camera_angle: float = 0.0
    aperture_radius: float = 0.0
    focal_length: float = 1.0

    def __post_init__(self):
        if self.aa_multiplier < 1:
            raise ValueError(f"aa_multiplier must be >= 1, got {self.aa_multiplier}")
        if self.aperture_radius < 0:
            raise ValueError(f"aperture_radius must be >= 0, got {self.aperture_radius}")
        if self.aperture_radius > 0 and self.focal_length <= 0:
            raise ValueError(f"focal_length must be positive, got {self.focal_length}")
