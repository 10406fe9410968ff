"""Render configuration."""

import argparse
from dataclasses import dataclass
from typing import Optional

# Quality presets: samples per pixel, bounce limit and a resolution scale
# applied to the configured width.
QUALITY_PRESETS = {
    "preview": {"samples": 4, "bounces": 8, "scale": 0.5},
    "balanced": {"samples": 50, "bounces": 20, "scale": 1.0},
    "final": {"samples": 500, "bounces": 50, "scale": 1.0},
}

DEFAULT_WIDTH = 400
DEFAULT_SAMPLES = 100
DEFAULT_MAX_DEPTH = 50


@dataclass
class RenderConfig:
    scene: str = "random_spheres"
    width: int = DEFAULT_WIDTH
    aspect_ratio: Optional[float] = None  # None: use the scene's own
    samples_per_pixel: int = DEFAULT_SAMPLES
    max_depth: int = DEFAULT_MAX_DEPTH
    threads: Optional[int] = None  # None: one per CPU
    seed: Optional[int] = None
    output: str = "image.ppm"
    log_level: str = "INFO"
    texture_path: Optional[str] = None

    def height(self, aspect_ratio: float) -> int:
        """Image height for the given aspect ratio, at least one row."""
        return max(1, int(self.width / aspect_ratio))

    def validate(self) -> None:
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.aspect_ratio is not None and self.aspect_ratio <= 0:
            raise ValueError(f"aspect ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples per pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"max depth must be positive, got {self.max_depth}")
        if self.threads is not None and self.threads < 1:
            raise ValueError(f"threads must be positive, got {self.threads}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RenderConfig":
        """
        Build a config from parsed arguments. A quality preset supplies
        samples, bounces and a width scale; explicit flags override it.
        """
        width = args.width if args.width is not None else DEFAULT_WIDTH
        samples = DEFAULT_SAMPLES
        max_depth = DEFAULT_MAX_DEPTH
        if args.quality is not None:
            preset = QUALITY_PRESETS[args.quality]
            samples = preset["samples"]
            max_depth = preset["bounces"]
            width = max(1, int(width * preset["scale"]))
        if args.samples is not None:
            samples = args.samples
        if args.max_depth is not None:
            max_depth = args.max_depth

        config = cls(
            scene=args.scene,
            width=width,
            aspect_ratio=args.aspect_ratio,
            samples_per_pixel=samples,
            max_depth=max_depth,
            threads=args.threads,
            seed=args.seed,
            output=args.output,
            log_level=args.log_level,
            texture_path=args.texture,
        )
        config.validate()
        return config
