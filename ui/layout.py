"""Layout helpers for the Heartfield control panel."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import pygame


Vec2 = Tuple[float, float]
Size = Tuple[int, int]


@dataclass
class ControlPanelLayout:
    """Stacks one button per control down the top-left corner."""

    window_size: Size
    actions: Sequence[str]
    button_width: int = 220
    button_height: int = 40
    spacing: int = 8
    margin: int = 16

    def update(self, window_size: Size) -> None:
        self.window_size = window_size

    @property
    def button_rects(self) -> Dict[str, pygame.Rect]:
        rects: Dict[str, pygame.Rect] = {}
        for index, action in enumerate(self.actions):
            top = self.margin + index * (self.button_height + self.spacing)
            rects[action] = pygame.Rect(self.margin, top, self.button_width, self.button_height)
        return rects

    @property
    def panel_rect(self) -> pygame.Rect:
        count = len(self.actions)
        if count == 0:
            return pygame.Rect(0, 0, 0, 0)
        height = count * self.button_height + (count - 1) * self.spacing
        return pygame.Rect(self.margin, self.margin, self.button_width, height)

    def is_in_panel(self, point: Vec2) -> bool:
        return self.panel_rect.collidepoint(point)

    def button_at(self, point: Vec2) -> Optional[str]:
        for action, rect in self.button_rects.items():
            if rect.collidepoint(point):
                return action
        return None
