"""Settings persistence helpers.

Settings live in ``settings.json`` under ``$PIXELCANVAS_HOME`` (default
``~/.pixelcanvas``). The CLI writes them with ``--save-settings``; every run
reads them as the defaults beneath command-line flags.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import Settings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load, update and save :class:`Settings` on disk."""

    @staticmethod
    def settings_path() -> Path:
        home = os.environ.get("PIXELCANVAS_HOME")
        base = Path(home) if home else Path("~/.pixelcanvas")
        return base.expanduser() / "settings.json"

    @classmethod
    def load(cls) -> Settings:
        """Load settings from disk, returning defaults when missing or invalid."""
        path = cls.settings_path()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return Settings.model_validate(data)
        except FileNotFoundError:
            return Settings()
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring unreadable settings %s: %s", path, e)
            return Settings()

    @classmethod
    def save(cls, settings: Settings) -> Path:
        """Atomically persist *settings*, creating the settings directory.

        Raises:
            OSError: when the directory or file cannot be written.
        """
        path = cls.settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        try:
            tmp.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp, path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.info("saved settings to %s", path)
        return path

    @classmethod
    def update(cls, **changes: Any) -> Settings:
        """Merge the non-None *changes* into the stored settings and save them.

        Raises:
            ValidationError: when a changed value fails the Settings validators.
            OSError: when the settings file cannot be written.
        """
        current = cls.load()
        merged = current.model_dump()
        merged.update({k: v for k, v in changes.items() if v is not None})
        settings = Settings.model_validate(merged)
        cls.save(settings)
        return settings
