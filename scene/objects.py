"""Scene objects and the one-time scene construction."""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from . import config

Vec3 = Tuple[float, float, float]

logger = logging.getLogger(__name__)


@dataclass
class Transform:
    position: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    rotation: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    scale: List[float] = field(default_factory=lambda: [1.0, 1.0, 1.0])

    def copy(self) -> "Transform":
        return Transform(list(self.position), list(self.rotation), list(self.scale))

    def set_uniform_scale(self, value: float) -> None:
        self.scale = [value, value, value]

    def model_matrix(self) -> np.ndarray:
        """Return ``T * Rx * Ry * Rz * S`` as a row-major 4x4 matrix."""

        rx, ry, rz = self.rotation
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)
        rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]], dtype=np.float32)
        rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]], dtype=np.float32)
        rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]], dtype=np.float32)

        model = np.identity(4, dtype=np.float32)
        model[:3, :3] = rot_x @ rot_y @ rot_z @ np.diag(np.array(self.scale, dtype=np.float32))
        model[:3, 3] = self.position
        return model


@dataclass
class SceneObject:
    """A drawable mesh instance plus the values needed to reset it."""

    name: str
    mesh: str
    transform: Transform
    color: int
    visible: bool = True
    initial_transform: Transform = field(init=False)
    initial_color: int = field(init=False)

    def __post_init__(self) -> None:
        self.initial_transform = self.transform.copy()
        self.initial_color = self.color

    def reset(self) -> None:
        self.transform = self.initial_transform.copy()
        self.color = self.initial_color


@dataclass
class Particle:
    """A falling rain heart; ``velocity`` is applied once per frame."""

    body: SceneObject
    velocity: Vec3
    rotation_speed: float
    initial_position: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        self.initial_position = tuple(self.body.transform.position)

    @property
    def position(self) -> List[float]:
        return self.body.transform.position

    @property
    def rotation(self) -> List[float]:
        return self.body.transform.rotation

    def respawn(self, rng: random.Random, rain: config.RainConfig = config.RAIN) -> None:
        self.body.transform.position = list(random_spawn_point(rng, rain))
        self.body.transform.rotation[0] = 0.0
        self.body.transform.rotation[2] = 0.0

    def reset(self) -> None:
        self.body.reset()
        self.body.transform.position = list(self.initial_position)


def random_spawn_point(rng: random.Random, rain: config.RainConfig = config.RAIN) -> Vec3:
    extent = rain.spawn_half_extent
    return (
        rng.uniform(-extent, extent),
        rng.uniform(rain.spawn_min_y, rain.spawn_max_y),
        rng.uniform(-extent, extent),
    )


def random_velocity(rng: random.Random, rain: config.RainConfig = config.RAIN) -> Vec3:
    low, high = rain.fall_speed
    return (
        rng.uniform(-rain.drift, rain.drift),
        -rng.uniform(low, high),
        rng.uniform(-rain.drift, rain.drift),
    )


@dataclass
class Scene:
    cube: SceneObject
    sphere: SceneObject
    torus: SceneObject
    ground: SceneObject
    heart: SceneObject
    point_light: SceneObject
    directional_light: SceneObject
    floating_cubes: List[SceneObject]
    floating_base_y: List[float]
    rain: List[Particle]
    text: Optional[SceneObject] = None

    def attach_text(self, mesh: str = "text") -> SceneObject:
        """Insert the text object once its mesh has been built."""

        if self.text is None:
            self.text = _make_object(
                "text",
                mesh,
                config.INITIAL_POSITIONS["text"],
                config.COLORS["text"],
            )
            logger.info("Text mesh attached to scene")
        return self.text

    def objects(self) -> Iterator[SceneObject]:
        yield self.ground
        yield self.cube
        yield self.sphere
        yield self.torus
        yield self.heart
        yield self.point_light
        yield self.directional_light
        yield from self.floating_cubes
        for particle in self.rain:
            yield particle.body
        if self.text is not None:
            yield self.text

    def reset(self) -> None:
        for obj in (
            self.cube,
            self.sphere,
            self.torus,
            self.ground,
            self.heart,
            self.point_light,
            self.directional_light,
        ):
            obj.reset()
        for cube in self.floating_cubes:
            cube.reset()
        for particle in self.rain:
            particle.reset()
            particle.body.visible = False
        if self.text is not None:
            self.text.reset()


def _make_object(
    name: str,
    mesh: str,
    position: Vec3,
    color: int,
    *,
    rotation: Vec3 = (0.0, 0.0, 0.0),
    scale: float = 1.0,
    visible: bool = True,
) -> SceneObject:
    transform = Transform(list(position), list(rotation), [scale, scale, scale])
    return SceneObject(name=name, mesh=mesh, transform=transform, color=color, visible=visible)


def _create_floating_cubes(rng: random.Random) -> Tuple[List[SceneObject], List[float]]:
    cubes: List[SceneObject] = []
    base_heights: List[float] = []
    for index in range(config.FLOATING_CUBE_COUNT):
        position = (
            (rng.random() - 0.5) * 10,
            rng.random() * 4 + 2,
            (rng.random() - 0.5) * 10,
        )
        color = int(rng.random() * 0xFFFFFF)
        cubes.append(
            _make_object(
                f"floating_cube_{index}",
                "floating_cube",
                position,
                color,
            )
        )
        base_heights.append(position[1])
    return cubes, base_heights


def _create_rain(rng: random.Random, rain: config.RainConfig = config.RAIN) -> List[Particle]:
    particles: List[Particle] = []
    for index in range(rain.count):
        x, _, z = random_spawn_point(rng, rain)
        # Stagger the first wave over the whole column so it does not land at once.
        y = rng.uniform(rain.floor_threshold, rain.spawn_max_y)
        body = _make_object(
            f"rain_heart_{index}",
            "heart",
            (x, y, z),
            config.COLORS["rain"],
            scale=rain.scale,
            visible=False,
        )
        low, high = rain.rotation_speed
        particles.append(
            Particle(
                body=body,
                velocity=random_velocity(rng, rain),
                rotation_speed=rng.uniform(low, high),
            )
        )
    return particles


def build_scene(rng: random.Random) -> Scene:
    """Create every object except the text, which arrives later."""

    positions = config.INITIAL_POSITIONS
    floating_cubes, base_heights = _create_floating_cubes(rng)
    scene = Scene(
        cube=_make_object("cube", "cube", positions["cube"], config.COLORS["cube"]),
        sphere=_make_object("sphere", "sphere", positions["sphere"], config.COLORS["sphere"]),
        torus=_make_object("torus", "torus", positions["torus"], config.COLORS["torus"]),
        ground=_make_object(
            "ground",
            "ground",
            positions["ground"],
            config.COLORS["ground"],
        ),
        heart=_make_object(
            "heart",
            "heart",
            positions["heart"],
            config.COLORS["heart"],
            rotation=(math.pi, 0.0, 0.0),
            scale=config.MESH_SETTINGS["heart_scale"],
        ),
        point_light=_make_object(
            "point_light",
            "light_marker",
            positions["point_light"],
            config.COLORS["point_light"],
        ),
        directional_light=_make_object(
            "directional_light",
            "light_marker",
            positions["directional_light"],
            config.COLORS["directional_light"],
        ),
        floating_cubes=floating_cubes,
        floating_base_y=base_heights,
        rain=_create_rain(rng),
    )
    logger.debug(
        "Scene built: %d floating cubes, %d rain hearts",
        len(scene.floating_cubes),
        len(scene.rain),
    )
    return scene
