"""OpenGL context helpers for Heartfield wireframe rendering."""
from __future__ import annotations

import logging
from typing import Tuple

from OpenGL import GL as gl

from scene import config

logger = logging.getLogger(__name__)

LINE_WIDTH = 1.5


def hex_to_rgba(color: int, alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """Convert a 24-bit ``0xRRGGBB`` value to normalized RGBA."""

    return (
        ((color >> 16) & 0xFF) / 255.0,
        ((color >> 8) & 0xFF) / 255.0,
        (color & 0xFF) / 255.0,
        alpha,
    )


BACKGROUND_COLOR = hex_to_rgba(config.COLORS["background"])


def initialize_gl(surface_size: Tuple[int, int]) -> None:
    """Configure OpenGL state for depth-tested 3D line rendering."""
    width, height = surface_size
    gl.glViewport(0, 0, width, height)
    gl.glClearColor(*BACKGROUND_COLOR)

    gl.glEnable(gl.GL_DEPTH_TEST)
    gl.glDepthFunc(gl.GL_LEQUAL)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    gl.glEnable(gl.GL_LINE_SMOOTH)
    gl.glLineWidth(LINE_WIDTH)
    logger.debug("GL initialized for %dx%d", width, height)


def resize_viewport(surface_size: Tuple[int, int]) -> None:
    """Update viewport when the window changes size."""
    initialize_gl(surface_size)
