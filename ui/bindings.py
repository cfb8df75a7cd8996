"""Keyboard shortcuts mirroring the control panel buttons."""
from __future__ import annotations

from typing import Dict, Optional

import pygame

KEY_BINDINGS: Dict[int, str] = {
    pygame.K_c: "changeColor",
    pygame.K_s: "toggleSpeed",
    pygame.K_t: "changeTextColor",
    pygame.K_b: "toggleBounce",
    pygame.K_h: "toggleRain",
    pygame.K_r: "resetScene",
}


def action_for_key(key: int) -> Optional[str]:
    return KEY_BINDINGS.get(key)
