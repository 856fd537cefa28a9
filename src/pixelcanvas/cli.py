"""Command-line interface for pixelcanvas.

Two modes share one parser:

- interactive (default): prompt for the canvas size unless given, then run
  the R/T/C/X drawing menu and export;
- batch (``--scene FILE``): draw every shape in a JSON scene file and export
  without prompting.

``--save-settings`` stores the given size, output directory and log level as
the defaults for later runs and exits without drawing.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from pixelcanvas import __version__
from pixelcanvas.app.session import DrawingSession, prompt_dimensions
from pixelcanvas.config import SessionConfig, configure_logging, make_session_config
from pixelcanvas.core.errors import CanvasError
from pixelcanvas.data.scene import draw_scene, load_scene_json, save_scene_json
from pixelcanvas.render.canvas import Canvas
from pixelcanvas.settings.store import SettingsStore
from pixelcanvas.settings.values import LOG_LEVELS

logger = logging.getLogger(__name__)


def _positive_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {n}")
    return n


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(
        prog="pixelcanvas",
        description="Draw filled shapes on a pixel canvas and save it as a PPM image",
    )
    p.add_argument("--width", type=_positive_int, default=None, help="Canvas width in pixels")
    p.add_argument("--height", type=_positive_int, default=None, help="Canvas height in pixels")
    p.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file to draw without prompting (batch mode)",
    )
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file name without the .ppm extension (batch mode; "
        "defaults to the scene file name)",
    )
    p.add_argument(
        "--output-dir",
        dest="output_dir",
        type=str,
        default=None,
        help="Directory for the exported image (default from settings)",
    )
    p.add_argument(
        "--save-scene",
        dest="save_scene",
        type=str,
        default=None,
        help="Write the successfully drawn shapes to this JSON scene file",
    )
    p.add_argument(
        "--save-settings",
        dest="save_settings",
        action="store_true",
        help="Store --width/--height/--output-dir/--log-level as the new defaults and exit",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default from settings)",
    )
    p.add_argument("--version", action="store_true", help="Print the version and exit")
    return p.parse_args(argv)


def _save_history(path: str, shapes: list, width: int, height: int) -> bool:
    try:
        save_scene_json(path, shapes, width=width, height=height)
    except CanvasError as e:
        print(f"**Error: {e}")
        return False
    return True


def _save_settings(args: argparse.Namespace) -> int:
    try:
        settings = SettingsStore.update(
            default_width=args.width,
            default_height=args.height,
            output_dir=args.output_dir,
            log_level=args.log_level,
        )
    except ValidationError as e:
        print(f"**Error: invalid settings: {e}")
        return 1
    except OSError as e:
        print(f"**Error: cannot save settings: {e}")
        return 1
    print(
        f"Saved defaults to {SettingsStore.settings_path()}: "
        f"{settings.default_width}x{settings.default_height}, "
        f"output {settings.output_dir}, log level {settings.log_level}"
    )
    return 0


def _run_batch(args: argparse.Namespace, cfg: SessionConfig) -> int:
    try:
        scene = load_scene_json(args.scene)
    except (OSError, ValueError) as e:
        print(f"**Error: cannot read scene {args.scene}: {e}")
        return 1

    width, height = cfg.batch_size(scene.width, scene.height)
    canvas = Canvas(width, height)
    drawn = []
    for shape, err in draw_scene(canvas, scene.shapes):
        if err is not None:
            print(f"{shape.describe()}\n**Error: {err}")
        else:
            drawn.append(shape)

    name = args.output or Path(args.scene).stem
    try:
        path = canvas.export(name, cfg.output_dir)
    except CanvasError as e:
        print(f"**Error: {e}")
        return 1

    if args.save_scene and not _save_history(args.save_scene, drawn, width, height):
        return 1
    print(f"Drew {len(drawn)} of {len(scene.shapes)} shapes; saved {path}")
    return 0


def _run_interactive(args: argparse.Namespace, cfg: SessionConfig) -> int:
    try:
        width, height = prompt_dimensions(width=cfg.width, height=cfg.height)
    except EOFError:
        return 1

    session = DrawingSession(Canvas(width, height), output_dir=cfg.output_dir)
    status = session.run()
    if args.save_scene and not _save_history(args.save_scene, session.history, width, height):
        return 1
    return status


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint for the pixelcanvas CLI. Returns an exit code."""
    args = parse_args(argv)

    if args.version:
        print(f"pixelcanvas {__version__}")
        return 0

    if args.save_settings:
        return _save_settings(args)

    cfg = make_session_config(args=args)
    configure_logging(cfg.log_level)
    logger.debug("session config: %s", cfg)

    try:
        if args.scene:
            return _run_batch(args, cfg)
        return _run_interactive(args, cfg)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
