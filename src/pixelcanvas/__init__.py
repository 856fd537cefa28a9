"""pixelcanvas package root.

The project version is defined here as the single source of truth and
exposed via ``__version__``. The packaging configuration (pyproject.toml)
reads this attribute using ``version = { attr = "pixelcanvas.__version__" }``.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
