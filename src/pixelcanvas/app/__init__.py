"""Application front ends.

Exposes the interactive drawing session used by the CLI.
"""

from .session import DrawingSession, prompt_dimensions

__all__ = ["DrawingSession", "prompt_dimensions"]
