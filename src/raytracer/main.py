# main.py
import argparse
import logging
import sys
import pygame
from raytracer.core.vector import Vector3
from raytracer.renderer.image import Image
from raytracer.renderer.raytracer import Renderer
from raytracer.scene.demo import SCENES
from raytracer.scene.options import SceneOptions

logger = logging.getLogger("raytracer")

QUALITY_LEVELS = {
    "draft": {"aa": 1, "bounces": 2},
    "balanced": {"aa": 2, "bounces": 4},
    "high_quality": {"aa": 3, "bounces": 6},
}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a scene with a recursive Whitted ray tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="demo")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=240)
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="preset for --aa and --max-depth")
    parser.add_argument("--aa", type=int, default=None, help="anti-aliasing samples per axis")
    parser.add_argument("--max-depth", type=int, default=None, help="recursion limit")
    parser.add_argument("--ambient", action="store_true", help="enable Monte-Carlo ambient lighting")
    parser.add_argument("--camera-position", type=float, nargs=3, default=(0.0, 0.0, 0.0), metavar=("X", "Y", "Z"))
    parser.add_argument("--camera-axis", type=float, nargs=3, default=(0.0, 0.0, 1.0), metavar=("X", "Y", "Z"))
    parser.add_argument("--camera-angle", type=float, default=0.0, help="degrees around --camera-axis")
    parser.add_argument("--aperture", type=float, default=0.0, help="lens radius (0 = pinhole)")
    parser.add_argument("--focal-length", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--gamma", type=float, default=1.0)
    parser.add_argument("-o", "--output", default="output.png")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    quality = QUALITY_LEVELS[args.quality]
    if args.aa is None:
        args.aa = quality["aa"]
    if args.max_depth is None:
        args.max_depth = quality["bounces"]
    if args.aa < 1:
        parser.error("--aa must be at least 1")
    if args.max_depth < 0:
        parser.error("--max-depth must not be negative")
    return args

def build_options(args: argparse.Namespace) -> SceneOptions:
    return SceneOptions(
        aa_multiplier=args.aa,
        ambient_lighting_enabled=args.ambient,
        camera_position=Vector3(*args.camera_position),
        camera_axis=Vector3(*args.camera_axis),
        camera_angle=args.camera_angle,
        aperture_radius=args.aperture,
        focal_length=args.focal_length,
    )

class PreviewWindow:
    """Shows a finished render until the window is closed or Esc is pressed."""
    def __init__(self, image: Image, gamma: float = 1.0):
        self.image = image
        self.gamma = gamma

    def show(self):
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.image.width, self.image.height))
            pygame.display.set_caption("Ray Tracer")
            surface = pygame.surfarray.make_surface(self.image.to_surface_array(self.gamma))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                clock.tick(30)
        finally:
            pygame.quit()

def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose + 1, 2)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    scene = SCENES[args.scene](build_options(args))
    logger.info("Scene '%s': %r", args.scene, scene)
    renderer = Renderer(scene, max_depth=args.max_depth, seed=args.seed)
    image = renderer.render(Image(args.width, args.height), workers=args.workers)
    image.save(args.output, gamma=args.gamma)

    if args.preview:
        PreviewWindow(image, args.gamma).show()
    return 0

if __name__ == "__main__":
    sys.exit(main())
