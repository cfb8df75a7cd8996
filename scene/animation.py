"""Per-frame animation of the Heartfield scene."""
from __future__ import annotations

import math
import random
from typing import Callable, Optional

from . import config
from .objects import Particle, Scene
from .state import AnimationState


def oscillate(
    wave: config.Oscillation,
    elapsed: float,
    speed: float,
    func: Callable[[float], float] = math.sin,
) -> float:
    """Evaluate ``wave`` at ``elapsed`` seconds; a pure function of time."""

    return wave.center + wave.amplitude * func(wave.frequency * elapsed * speed + wave.phase)


class AnimationUpdater:
    """Advances every animated object once per displayed frame.

    Rotations accumulate a fixed step per call, so they run at the display
    refresh rate. Positions that oscillate are recomputed from the elapsed
    time instead, which keeps them independent of how many frames were drawn.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        rain: config.RainConfig = config.RAIN,
    ) -> None:
        self._rng = rng or random.Random()
        self._rain = rain

    def update(self, scene: Scene, state: AnimationState, now: float) -> None:
        speed = state.speed_multiplier
        elapsed = state.elapsed(now)

        self._spin_cube(scene, speed)
        self._orbit_light(scene, state.scene_time(now), speed)

        if state.bounce_enabled:
            self._animate_sphere(scene, elapsed, speed)
            self._animate_torus(scene, elapsed, speed)
            self._animate_floating_cubes(scene, elapsed, speed)
            self._animate_heart(scene, elapsed, speed)
            self._animate_text(scene, elapsed, speed)

        if state.rain_enabled:
            for particle in scene.rain:
                self.advance_particle(particle)

        self._maybe_recolor_heart(scene)

    def _spin_cube(self, scene: Scene, speed: float) -> None:
        step = config.ANIMATION_SPEED["cube"] * speed
        rotation = scene.cube.transform.rotation
        rotation[0] += step
        rotation[1] += step

    def _orbit_light(self, scene: Scene, scene_time: float, speed: float) -> None:
        position = scene.point_light.transform.position
        position[0] = oscillate(config.OSCILLATIONS["light_x"], scene_time, speed)
        position[2] = oscillate(config.OSCILLATIONS["light_z"], scene_time, speed, math.cos)

    def _animate_sphere(self, scene: Scene, elapsed: float, speed: float) -> None:
        transform = scene.sphere.transform
        transform.rotation[1] += config.ANIMATION_SPEED["sphere"] * speed
        transform.position[1] = oscillate(config.OSCILLATIONS["sphere_y"], elapsed, speed)

    def _animate_torus(self, scene: Scene, elapsed: float, speed: float) -> None:
        transform = scene.torus.transform
        step = config.ANIMATION_SPEED["torus"] * speed
        transform.rotation[0] += step
        transform.rotation[1] += step * 2
        transform.position[1] = oscillate(
            config.OSCILLATIONS["torus_y"], elapsed, speed, math.cos
        )

    def _animate_floating_cubes(self, scene: Scene, elapsed: float, speed: float) -> None:
        spin_x, spin_y = config.FLOATING_CUBE_SPIN
        for index, (cube, base_y) in enumerate(zip(scene.floating_cubes, scene.floating_base_y)):
            transform = cube.transform
            transform.rotation[0] += spin_x * (index + 1) * speed
            transform.rotation[1] += spin_y * (index + 1) * speed
            wave = config.Oscillation(
                center=base_y,
                amplitude=config.FLOATING_CUBE_AMPLITUDE,
                frequency=config.FLOATING_CUBE_FREQUENCY,
                phase=float(index),
            )
            transform.position[1] = oscillate(wave, elapsed, speed)

    def _animate_heart(self, scene: Scene, elapsed: float, speed: float) -> None:
        transform = scene.heart.transform
        transform.rotation[1] += config.ANIMATION_SPEED["heart"] * speed
        transform.set_uniform_scale(oscillate(config.OSCILLATIONS["heart_scale"], elapsed, speed))
        transform.position[1] = oscillate(config.OSCILLATIONS["heart_y"], elapsed, speed)

    def _animate_text(self, scene: Scene, elapsed: float, speed: float) -> None:
        if scene.text is None:
            return
        transform = scene.text.transform
        transform.rotation[1] += config.ANIMATION_SPEED["text"] * speed
        transform.position[1] = oscillate(config.OSCILLATIONS["text_y"], elapsed, speed)

    def advance_particle(self, particle: Particle) -> None:
        """Integrate one frame of fall; respawn above the scene past the floor."""

        position = particle.position
        vx, vy, vz = particle.velocity
        position[0] += vx
        position[1] += vy
        position[2] += vz
        particle.rotation[0] += particle.rotation_speed
        particle.rotation[2] += particle.rotation_speed
        if position[1] < self._rain.floor_threshold:
            particle.respawn(self._rng, self._rain)

    def _maybe_recolor_heart(self, scene: Scene) -> None:
        if self._rng.random() < config.RANDOM_COLOR_PROBABILITY:
            scene.heart.color = self._rng.choice(config.COLOR_PALETTES["heart"])
