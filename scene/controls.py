"""Button handlers that mutate the animation state and scene colors."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from . import config
from .objects import Scene
from .state import AnimationState

logger = logging.getLogger(__name__)

# (control name, initial label) in on-screen order.
CONTROLS: Tuple[Tuple[str, str], ...] = (
    ("changeColor", "Change Cube Color"),
    ("toggleSpeed", "Toggle Animation Speed"),
    ("changeTextColor", "Change Text Color"),
    ("toggleBounce", "Toggle Text Bounce"),
    ("toggleRain", "Toggle Heart Rain"),
    ("resetScene", "Reset Scene"),
)


def next_speed(current: float) -> float:
    cycle = config.SPEED_CYCLE
    if current not in cycle:
        return cycle[0]
    return cycle[(cycle.index(current) + 1) % len(cycle)]


class ControlSurface:
    """State transitions for the six on-screen controls.

    Each handler takes the current time so that toggles which restart the
    oscillations can re-anchor ``AnimationState.animation_start_time``.
    """

    def __init__(self, scene: Scene, state: AnimationState) -> None:
        self.scene = scene
        self.state = state
        self.labels: Dict[str, str] = dict(CONTROLS)
        self._handlers: Dict[str, Callable[[float], None]] = {
            "changeColor": self.change_color,
            "toggleSpeed": self.toggle_speed,
            "changeTextColor": self.change_text_color,
            "toggleBounce": self.toggle_bounce,
            "toggleRain": self.toggle_rain,
            "resetScene": self.reset_scene,
        }

    def dispatch(self, action: str, now: float) -> None:
        try:
            handler = self._handlers[action]
        except KeyError:
            raise KeyError(f"Unknown control: {action!r}") from None
        logger.debug("Control %s activated", action)
        handler(now)

    def change_color(self, now: float = 0.0) -> None:
        palette = config.COLOR_PALETTES["cube"]
        self.state.cube_color_index = (self.state.cube_color_index + 1) % len(palette)
        self.scene.cube.color = palette[self.state.cube_color_index]

    def toggle_speed(self, now: float = 0.0) -> None:
        self.state.speed_multiplier = next_speed(self.state.speed_multiplier)
        self.labels["toggleSpeed"] = f"Speed: {config.SPEED_LABELS[self.state.speed_multiplier]}"
        logger.info("Speed multiplier set to %s", self.state.speed_multiplier)

    def change_text_color(self, now: float = 0.0) -> None:
        text = self.scene.text
        if text is None:
            return
        palette = config.COLOR_PALETTES["text"]
        self.state.text_color_index = (self.state.text_color_index + 1) % len(palette)
        text.color = palette[self.state.text_color_index]

    def toggle_bounce(self, now: float) -> None:
        self.state.bounce_enabled = not self.state.bounce_enabled
        if self.state.bounce_enabled:
            self.state.animation_start_time = now
            self.labels["toggleBounce"] = "Disable Bounce"
        else:
            self.labels["toggleBounce"] = "Enable Bounce"
            if self.scene.text is not None:
                self.scene.text.transform.position[1] = config.TEXT_REST_Y

    def toggle_rain(self, now: float = 0.0) -> None:
        self.state.rain_enabled = not self.state.rain_enabled
        for particle in self.scene.rain:
            particle.body.visible = self.state.rain_enabled
        self.labels["toggleRain"] = "Stop Rain" if self.state.rain_enabled else "Start Rain"

    def reset_scene(self, now: float) -> None:
        self.scene.reset()
        self.state.restore_defaults(now)
        self.labels = dict(CONTROLS)
        logger.info("Scene reset")
