"""Scenes and figures for the Gram-Schmidt walkthrough.

- build_scene(): arrows revealed at a step, with palette colours
- FigureRenderer: writes scenes to image files with matplotlib
"""

from .scene import Arrow, PALETTE, build_scene
from .figures import FigureConfig, FigureRenderer, axis_limit

__all__ = [
    "Arrow",
    "PALETTE",
    "build_scene",
    "FigureConfig",
    "FigureRenderer",
    "axis_limit",
]
