# main.py
"""Render a scene to a PPM or PNG image.

Usage:
    pathtrace [options] > image.ppm
    pathtrace --scene showcase --output showcase.png

Example:
    pathtrace --width 200 --height 100 --samples 2 --output spheres.png
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from pathtrace.config import (
    DEFAULT_GAMMA,
    DEFAULT_HEIGHT,
    DEFAULT_SAMPLES,
    DEFAULT_WIDTH,
    MAX_DEPTH,
    QUALITY_LEVELS,
    RenderSettings,
    default_workers,
)
from pathtrace.errors import RenderError
from pathtrace.geometry.mesh import load_obj
from pathtrace.materials.presets import DiffusePresets
from pathtrace.output.image_writer import save_png, save_ppm, write_ppm
from pathtrace.renderer.raytracer import Renderer
from pathtrace.scenes import SCENES, build_scene


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtrace",
        description="Render a scene with the path-style ray tracer.",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="spheres",
                        help="Scene to render (default: spheres)")
    parser.add_argument("--obj", type=Path, default=None,
                        help="Add the triangles of a Wavefront OBJ file to the scene")
    parser.add_argument("--width", type=int, default=None,
                        help=f"Image width in pixels (default: {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None,
                        help=f"Image height in pixels (default: {DEFAULT_HEIGHT})")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default=None,
                        help="Preset for samples and depth; explicit flags override it")
    parser.add_argument("--samples", type=int, default=None,
                        help=f"Anti-aliasing factor, samples x samples rays per pixel (default: {DEFAULT_SAMPLES})")
    parser.add_argument("--depth", type=int, default=None,
                        help=f"Maximum bounces per ray (default: {MAX_DEPTH})")
    gamma = parser.add_mutually_exclusive_group()
    gamma.add_argument("--gamma", type=float, default=DEFAULT_GAMMA,
                       help=f"Gamma correction exponent (default: {DEFAULT_GAMMA})")
    gamma.add_argument("--no-gamma", dest="gamma", action="store_const", const=None,
                       help="Write linear values without gamma correction")
    parser.add_argument("--workers", type=int, default=default_workers(),
                        help="Threads tracing the sub-samples of each pixel")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random generators (output is still not bit-exact across runs)")
    parser.add_argument("--bottom-up", action="store_true",
                        help="Emit the bottom row first")
    parser.add_argument("--output", "-o", type=str, default="-",
                        help="Output path; .png is written with Pillow, anything else as PPM (default: stdout)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"],
                        help="Log level on stderr (default: INFO)")
    parser.add_argument("--quiet", action="store_true",
                        help="Only log warnings and errors")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries the image."""
    logger.remove()
    logger.add(sys.stderr, level=level,
               format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}")


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = {
        "width": args.width,
        "height": args.height,
        "samples": args.samples,
        "max_depth": args.depth,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    overrides.update(gamma=args.gamma, workers=args.workers, seed=args.seed, bottom_up=args.bottom_up)
    if args.quality is not None:
        return RenderSettings.from_quality(args.quality, **overrides).validate()
    return RenderSettings(**overrides).validate()


def run(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    world, camera = build_scene(args.scene, settings.width, settings.height)
    if args.obj is not None:
        world.add(load_obj(args.obj, DiffusePresets.chalk()))

    renderer = Renderer(world, camera, settings)
    if args.output == "-":
        write_ppm(sys.stdout, settings.width, settings.height, renderer.render())
        sys.stdout.flush()
        return

    frame = renderer.render_frame()
    if args.output.lower().endswith(".png"):
        save_png(args.output, frame)
    else:
        save_ppm(args.output, frame)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging("WARNING" if args.quiet else args.log_level)
    try:
        run(args)
    except (RenderError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
