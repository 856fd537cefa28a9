"""Runtime configuration helpers.

Merges the three configuration layers into one :class:`SessionConfig`:
package defaults from ``settings/values.yml``, persisted user
:class:`~pixelcanvas.settings.schema.Settings`, and command-line overrides.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .settings.store import SettingsStore

__all__ = ["SessionConfig", "make_session_config", "configure_logging"]


@dataclass(slots=True)
class SessionConfig:
    # Explicit canvas size from the command line; None means "ask" in
    # interactive mode and "fall back to defaults" in batch mode.
    width: int | None = None
    height: int | None = None
    default_width: int = 40
    default_height: int = 30
    output_dir: str = "."
    log_level: str = "WARNING"

    def batch_size(self, scene_width: int | None, scene_height: int | None) -> tuple[int, int]:
        """Canvas size for batch mode: CLI, then scene file, then defaults."""
        width = self.width or scene_width or self.default_width
        height = self.height or scene_height or self.default_height
        return width, height


def make_session_config(*, args: Optional[object] = None) -> SessionConfig:
    """Build a SessionConfig from persisted settings and optional CLI *args*.

    Rules:
    - Persisted Settings (SettingsStore.load()) provide defaults; they in turn
      default to the packaged values.yml.
    - CLI args (argparse.Namespace-like) override for the current session.
      Only attributes that are present and not None are applied.
    """
    settings = SettingsStore.load()
    cfg = SessionConfig(
        default_width=settings.default_width,
        default_height=settings.default_height,
        output_dir=settings.output_dir,
        log_level=settings.log_level,
    )

    if args is not None:
        a_width = getattr(args, "width", None)
        if a_width is not None:
            cfg.width = int(a_width)
        a_height = getattr(args, "height", None)
        if a_height is not None:
            cfg.height = int(a_height)
        a_dir = getattr(args, "output_dir", None)
        if a_dir is not None:
            cfg.output_dir = str(a_dir)
        a_level = getattr(args, "log_level", None)
        if a_level is not None:
            cfg.log_level = str(a_level).upper()

    return cfg


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
