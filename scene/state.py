"""Mutable animation parameters shared by the updater and the controls."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AnimationState:
    """Everything the control buttons can change.

    ``animation_start_time`` anchors the bounce oscillations; it is moved
    forward whenever bouncing restarts so the waves begin again from zero.
    ``scene_start_time`` anchors the waves that always run and never moves.
    """

    speed_multiplier: float = 1.0
    bounce_enabled: bool = True
    rain_enabled: bool = False
    animation_start_time: float = 0.0
    scene_start_time: float = 0.0
    cube_color_index: int = 0
    text_color_index: int = 0

    def elapsed(self, now: float) -> float:
        return now - self.animation_start_time

    def scene_time(self, now: float) -> float:
        return now - self.scene_start_time

    def restore_defaults(self, now: float) -> None:
        self.speed_multiplier = 1.0
        self.bounce_enabled = True
        self.rain_enabled = False
        self.animation_start_time = now
        self.cube_color_index = 0
        self.text_color_index = 0
