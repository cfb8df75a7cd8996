"""Orbit camera for the Heartfield scene."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from . import config

Vec3 = Tuple[float, float, float]

# Keep the pole out of reach so the look-at basis never degenerates.
_MIN_POLAR = 1e-3


def _normalize(vec: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vec)
    if norm == 0:
        return vec
    return vec / norm


def _look_at_matrix(position: Vec3, target: Vec3, up: Vec3) -> np.ndarray:
    pos = np.array(position, dtype=np.float32)
    tgt = np.array(target, dtype=np.float32)
    up_vec = np.array(up, dtype=np.float32)

    forward = _normalize(tgt - pos)
    side = _normalize(np.cross(forward, up_vec))
    true_up = np.cross(side, forward)

    view = np.identity(4, dtype=np.float32)
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, pos)
    view[1, 3] = -np.dot(true_up, pos)
    view[2, 3] = np.dot(forward, pos)
    return view


def _perspective_matrix(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    perspective = np.zeros((4, 4), dtype=np.float32)
    f = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    perspective[0, 0] = f / aspect
    perspective[1, 1] = f
    perspective[2, 2] = (far + near) / (near - far)
    perspective[2, 3] = (2 * far * near) / (near - far)
    perspective[3, 2] = -1.0
    return perspective


@dataclass
class OrbitCamera:
    """Camera circling ``target`` on a sphere, steered by mouse drags.

    Drag and wheel input only queue deltas; ``update`` applies them, easing
    them out over several frames when damping is enabled.
    """

    position: Vec3
    target: Vec3
    viewport_size: Tuple[int, int]
    fov: float = config.CAMERA.fov
    near_clip: float = config.CAMERA.near
    far_clip: float = config.CAMERA.far
    controls: config.ControlsConfig = config.CONTROLS
    up: Vec3 = (0.0, 1.0, 0.0)
    _theta_delta: float = field(default=0.0, init=False, repr=False)
    _phi_delta: float = field(default=0.0, init=False, repr=False)
    _zoom_scale: float = field(default=1.0, init=False, repr=False)

    def orbit(self, drag: Tuple[float, float]) -> None:
        """Queue a rotation from a mouse drag measured in pixels."""

        _, height = self.viewport_size
        if height <= 0:
            return
        dx, dy = drag
        factor = 2.0 * math.pi * self.controls.rotate_speed / height
        self._theta_delta -= dx * factor
        self._phi_delta -= dy * factor

    def zoom(self, scroll_delta: float) -> None:
        """Queue a dolly in (positive) or out (negative)."""

        self._zoom_scale *= self.controls.zoom_step ** scroll_delta

    def pan(self, drag: Tuple[float, float]) -> None:
        """Slide target and camera together by a mouse drag in pixels.

        The drag is scaled so the scene under the cursor follows it at the
        target's depth.
        """

        _, height = self.viewport_size
        if height <= 0:
            return
        dx, dy = drag
        pos = np.array(self.position, dtype=np.float64)
        tgt = np.array(self.target, dtype=np.float64)
        up_vec = np.array(self.up, dtype=np.float64)
        target_distance = np.linalg.norm(pos - tgt) * math.tan(math.radians(self.fov) / 2.0)
        scale = 2.0 * target_distance * self.controls.pan_speed / height

        forward = _normalize(tgt - pos)
        side = _normalize(np.cross(forward, up_vec))
        if self.controls.screen_space_panning:
            vertical = np.cross(side, forward)
        else:
            vertical = _normalize(np.cross(up_vec, side))

        offset = -side * dx * scale + vertical * dy * scale
        self.position = tuple(float(v) for v in pos + offset)
        self.target = tuple(float(v) for v in tgt + offset)

    def distance(self) -> float:
        offset = np.array(self.position) - np.array(self.target)
        return float(np.linalg.norm(offset))

    def update(self) -> None:
        offset = np.array(self.position, dtype=np.float64) - np.array(self.target, dtype=np.float64)
        radius = float(np.linalg.norm(offset))
        if radius == 0.0:
            radius = self.controls.min_distance
            offset = np.array([0.0, 0.0, radius])
        theta = math.atan2(offset[0], offset[2])
        phi = math.acos(max(-1.0, min(1.0, offset[1] / radius)))

        if self.controls.enable_damping:
            damping = self.controls.damping_factor
            theta += self._theta_delta * damping
            phi += self._phi_delta * damping
        else:
            theta += self._theta_delta
            phi += self._phi_delta
        phi = max(_MIN_POLAR, min(math.pi - _MIN_POLAR, phi))
        radius = max(
            self.controls.min_distance,
            min(self.controls.max_distance, radius * self._zoom_scale),
        )

        sin_phi = math.sin(phi)
        self.position = (
            self.target[0] + radius * sin_phi * math.sin(theta),
            self.target[1] + radius * math.cos(phi),
            self.target[2] + radius * sin_phi * math.cos(theta),
        )

        if self.controls.enable_damping:
            self._theta_delta *= 1.0 - self.controls.damping_factor
            self._phi_delta *= 1.0 - self.controls.damping_factor
        else:
            self._theta_delta = 0.0
            self._phi_delta = 0.0
        self._zoom_scale = 1.0

    def update_viewport(self, size: Tuple[int, int]) -> None:
        self.viewport_size = size

    def aspect(self) -> float:
        width, height = self.viewport_size
        return width / height if height > 0 else 1.0

    def view_matrix(self) -> np.ndarray:
        return _look_at_matrix(self.position, self.target, self.up)

    def projection_matrix(self) -> np.ndarray:
        return _perspective_matrix(self.fov, self.aspect(), self.near_clip, self.far_clip)

    def view_projection_matrix(self) -> np.ndarray:
        return self.projection_matrix() @ self.view_matrix()


def create_default_camera(viewport_size: Tuple[int, int]) -> OrbitCamera:
    return OrbitCamera(
        position=config.CAMERA.position,
        target=config.CAMERA.target,
        viewport_size=viewport_size,
    )
