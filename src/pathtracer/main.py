#!/usr/bin/env python3
"""Command line entry point.

Usage:
    pathtracer [--scene NAME] [--width W] [--samples N] [--output FILE] ...

Example:
    pathtracer --scene cornell_box --width 300 --samples 200 --output cornell.png
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer.config import QUALITY_PRESETS, RenderConfig
from pathtracer.errors import PathTracerError
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the Monte Carlo path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", default="random_spheres",
                        help="Scene to render (default: random_spheres)")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels (default: 400)")
    parser.add_argument("--aspect-ratio", type=float, default=None,
                        help="Width / height (default: the scene's own)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel (default: 100)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum bounces per path (default: 50)")
    parser.add_argument("--threads", type=int, default=None,
                        help="Worker threads (default: one per CPU)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible output")
    parser.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default=None,
                        help="Quality preset; explicit flags override it")
    parser.add_argument("--output", default="image.ppm",
                        help="Output file, .ppm or any format Pillow writes (default: image.ppm)")
    parser.add_argument("--texture", default=None,
                        help="Image for textured scenes (earth, final_scene)")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default: INFO)")
    parser.add_argument("--list-scenes", action="store_true",
                        help="List available scenes and exit")
    return parser.parse_args(argv)


def run(config: RenderConfig) -> None:
    """Build the configured scene, render it and write the image."""
    scene_rng = random.Random(config.seed)
    scene = build_scene(config.scene, scene_rng, config.aspect_ratio, config.texture_path)
    aspect_ratio = scene.camera.aspect_ratio
    height = config.height(aspect_ratio)

    renderer = Renderer(config.width, height, config.samples_per_pixel,
                        config.max_depth, config.threads, config.seed)
    pixels = renderer.render(scene.world, scene.camera, scene.background, scene.lights)
    save_image(pixels, config.output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.list_scenes:
        for name, info in SCENES.items():
            print(f"{name:20s} {info.description}")
        return 0

    try:
        config = RenderConfig.from_args(args)
        setup_logging(config.log_level)
        run(config)
        return 0
    except (PathTracerError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
