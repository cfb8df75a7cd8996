"""Tunable constants for the Heartfield scene."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

Vec3 = Tuple[float, float, float]


ANIMATION_SPEED: Dict[str, float] = {
    "cube": 0.01,
    "text": 0.01,
    "bounce": 0.02,
    "sphere": 0.02,
    "torus": 0.005,
    "heart": 0.01,
}

SPEED_CYCLE: Tuple[float, ...] = (1.0, 3.0, 0.5)
SPEED_LABELS: Dict[float, str] = {1.0: "Normal", 3.0: "Fast", 0.5: "Slow"}

COLORS: Dict[str, int] = {
    "cube": 0x00FF88,
    "sphere": 0xFF6B35,
    "torus": 0x4ECDC4,
    "text": 0xFF3366,
    "heart": 0xFF1744,
    "rain": 0xFF4D6D,
    "ground": 0x333333,
    "point_light": 0xFF6B35,
    "directional_light": 0xFFFFFF,
    "background": 0x1A1A2E,
}

COLOR_PALETTES: Dict[str, Tuple[int, ...]] = {
    "cube": (0x00FF88, 0xFF6B35, 0x4ECDC4, 0xFF3366, 0xF9CA24, 0x6C5CE7),
    "text": (0xFF3366, 0x00FF88, 0x4ECDC4, 0xFF6B35, 0xA29BFE, 0xFD79A8),
    "heart": (0xFF1744, 0xFF3366, 0xFD79A8, 0xE84393, 0xFF6B81, 0xD63031),
}

# Per-frame chance that the hero heart picks a random palette color.
RANDOM_COLOR_PROBABILITY = 0.01


@dataclass(frozen=True)
class Oscillation:
    """``center + amplitude * wave(frequency * t * speed + phase)``."""

    center: float
    amplitude: float
    frequency: float
    phase: float = 0.0


OSCILLATIONS: Dict[str, Oscillation] = {
    "sphere_y": Oscillation(center=1.0, amplitude=0.3, frequency=2.0),
    "torus_y": Oscillation(center=1.0, amplitude=0.2, frequency=1.5),
    "heart_y": Oscillation(center=3.0, amplitude=0.5, frequency=1.5),
    "heart_scale": Oscillation(center=0.1, amplitude=0.02, frequency=4.0),
    # bounce speed * 100, as in the text bounce of the browser demo
    "text_y": Oscillation(center=5.0, amplitude=0.8, frequency=ANIMATION_SPEED["bounce"] * 100),
    "light_x": Oscillation(center=0.0, amplitude=5.0, frequency=1.0),
    "light_z": Oscillation(center=0.0, amplitude=5.0, frequency=1.0),
}

# Floating cubes bob around their spawn height instead of drifting.
FLOATING_CUBE_COUNT = 8
FLOATING_CUBE_SIZE = 0.2
FLOATING_CUBE_AMPLITUDE = 0.06
FLOATING_CUBE_FREQUENCY = 2.0
FLOATING_CUBE_SPIN: Tuple[float, float] = (0.01, 0.008)

TEXT_REST_Y = 5.0


@dataclass(frozen=True)
class RainConfig:
    count: int = 40
    floor_threshold: float = -1.0
    spawn_min_y: float = 8.0
    spawn_max_y: float = 12.0
    spawn_half_extent: float = 10.0
    fall_speed: Tuple[float, float] = (0.02, 0.06)
    drift: float = 0.005
    rotation_speed: Tuple[float, float] = (0.01, 0.05)
    scale: float = 0.04


RAIN = RainConfig()


@dataclass(frozen=True)
class CameraConfig:
    fov: float = 75.0
    near: float = 0.1
    far: float = 1000.0
    position: Vec3 = (0.0, 2.0, 8.0)
    target: Vec3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ControlsConfig:
    enable_damping: bool = True
    damping_factor: float = 0.05
    min_distance: float = 1.0
    max_distance: float = 100.0
    rotate_speed: float = 1.0
    zoom_step: float = 0.95
    pan_speed: float = 1.0
    # False keeps panning on the plane perpendicular to the world up axis.
    screen_space_panning: bool = False


CAMERA = CameraConfig()
CONTROLS = ControlsConfig()

# Initial placements; rotation in radians.
INITIAL_POSITIONS: Dict[str, Vec3] = {
    "cube": (0.0, 1.0, 0.0),
    "sphere": (3.0, 1.0, -2.0),
    "torus": (-3.0, 1.0, -1.0),
    "ground": (0.0, -1.0, 0.0),
    "heart": (-5.0, 3.0, 2.0),
    "text": (0.0, 3.0, -2.0),
    "point_light": (-5.0, 3.0, 0.0),
    "directional_light": (5.0, 10.0, 5.0),
}

MESH_SETTINGS = {
    "cube_size": 1.0,
    "sphere_radius": 0.8,
    "sphere_segments": 32,
    "torus_radius": 0.7,
    "torus_tube": 0.2,
    "torus_radial_segments": 16,
    "torus_tubular_segments": 100,
    "ground_size": 20.0,
    "ground_divisions": 20,
    "heart_curve_steps": 12,
    "heart_depth": 2.0,
    "heart_scale": 0.1,
    "light_marker_size": 0.15,
}

TEXT_SETTINGS = {
    "content": "Hello",
    "size": 1.0,
    "depth": 0.2,
    "font_pixels": 96,
    "outline_every": 2,
}
