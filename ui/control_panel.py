"""On-screen buttons for the Heartfield scene controls."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame
from OpenGL import GL as gl

from .bindings import action_for_key
from .layout import ControlPanelLayout

Vec2 = Tuple[int, int]


class ControlPanel:
    """Overlay that draws one button per control and maps clicks to actions."""

    def __init__(self, layout: ControlPanelLayout) -> None:
        pygame.font.init()
        self._button_font = pygame.font.SysFont("Consolas", 18)
        self.layout = layout

    def handle_mouse_click(self, pos: Vec2) -> Optional[str]:
        return self.layout.button_at(pos)

    @staticmethod
    def action_for_key(key: int) -> Optional[str]:
        return action_for_key(key)

    def draw(self, labels: Dict[str, str]) -> None:
        width, height = self.layout.window_size
        gl.glViewport(0, 0, width, height)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadIdentity()
        gl.glOrtho(0, width, height, 0, -1, 1)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadIdentity()
        gl.glDisable(gl.GL_DEPTH_TEST)

        self._draw_buttons(labels)

        gl.glEnable(gl.GL_DEPTH_TEST)

    def _draw_buttons(self, labels: Dict[str, str]) -> None:
        mouse_pos = pygame.mouse.get_pos()
        for action, rect in self.layout.button_rects.items():
            hovered = rect.collidepoint(mouse_pos)
            if hovered:
                fill = (0.2, 0.35, 0.55, 0.95)
                border = (0.65, 0.8, 1.0, 1.0)
            else:
                fill = (0.12, 0.18, 0.28, 0.85)
                border = (0.45, 0.5, 0.7, 1.0)
            gl.glColor4f(*fill)
            gl.glBegin(gl.GL_QUADS)
            gl.glVertex2f(rect.left, rect.top)
            gl.glVertex2f(rect.right, rect.top)
            gl.glVertex2f(rect.right, rect.bottom)
            gl.glVertex2f(rect.left, rect.bottom)
            gl.glEnd()
            gl.glColor4f(*border)
            gl.glBegin(gl.GL_LINE_LOOP)
            gl.glVertex2f(rect.left + 1, rect.top + 1)
            gl.glVertex2f(rect.right - 1, rect.top + 1)
            gl.glVertex2f(rect.right - 1, rect.bottom - 1)
            gl.glVertex2f(rect.left + 1, rect.bottom - 1)
            gl.glEnd()
            self._draw_text_centered(rect, labels.get(action, action))

    def _draw_text_centered(self, rect: pygame.Rect, text: str) -> None:
        surface = self._button_font.render(text, True, (230, 235, 255))
        data = pygame.image.tobytes(surface, "RGBA", True)
        x = rect.centerx - surface.get_width() * 0.5
        # Raster position is the bottom-left corner of the flipped image.
        y = rect.centery + surface.get_height() * 0.5
        gl.glRasterPos2f(x, y)
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
