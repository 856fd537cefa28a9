from __future__ import annotations

import argparse
from pathlib import Path

from pixelcanvas.config import make_session_config
from pixelcanvas.settings.schema import Settings
from pixelcanvas.settings.store import SettingsStore


def test_defaults_without_args(isolated_home: Path) -> None:
    cfg = make_session_config()
    assert cfg.width is None and cfg.height is None
    assert (cfg.default_width, cfg.default_height) == (40, 30)
    assert cfg.batch_size(None, None) == (40, 30)


def test_settings_then_args_override(isolated_home: Path) -> None:
    SettingsStore.save(Settings(default_width=11, default_height=12, output_dir="saved"))
    args = argparse.Namespace(width=5, height=None, output_dir="cli", log_level="info")
    cfg = make_session_config(args=args)
    assert cfg.width == 5 and cfg.height is None
    assert cfg.output_dir == "cli"
    assert cfg.log_level == "INFO"
    # CLI wins, then the scene, then persisted defaults
    assert cfg.batch_size(7, 8) == (5, 8)
    assert cfg.batch_size(None, None) == (5, 12)
