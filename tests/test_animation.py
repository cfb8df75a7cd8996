import math
import random

import pytest

from scene import config
from scene.animation import AnimationUpdater, oscillate
from scene.controls import ControlSurface


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns ``value``."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _oscillating_values(scene):
    return (
        scene.sphere.transform.position[1],
        scene.torus.transform.position[1],
        scene.heart.transform.position[1],
        tuple(scene.heart.transform.scale),
        tuple(cube.transform.position[1] for cube in scene.floating_cubes),
        tuple(scene.point_light.transform.position),
    )


def test_oscillate_matches_formula() -> None:
    wave = config.Oscillation(center=1.0, amplitude=0.3, frequency=2.0, phase=0.5)
    assert oscillate(wave, 1.5, 3.0) == pytest.approx(1.0 + 0.3 * math.sin(2.0 * 1.5 * 3.0 + 0.5))
    assert oscillate(wave, 1.5, 3.0, math.cos) == pytest.approx(
        1.0 + 0.3 * math.cos(2.0 * 1.5 * 3.0 + 0.5)
    )


def test_oscillating_positions_depend_only_on_time(scene, state) -> None:
    updater = AnimationUpdater(FixedRandom(0.5))
    updater.update(scene, state, 2.5)
    first = _oscillating_values(scene)

    for now in (2.6, 3.1, 4.0, 7.25):
        updater.update(scene, state, now)
    updater.update(scene, state, 2.5)

    assert _oscillating_values(scene) == first


def test_oscillating_positions_follow_elapsed_time(scene, state) -> None:
    state.speed_multiplier = 3.0
    state.animation_start_time = 10.0
    AnimationUpdater(FixedRandom(0.5)).update(scene, state, 10.25)

    elapsed = 0.25
    assert scene.sphere.transform.position[1] == pytest.approx(1 + math.sin(2 * elapsed * 3) * 0.3)
    assert scene.torus.transform.position[1] == pytest.approx(1 + math.cos(1.5 * elapsed * 3) * 0.2)
    assert scene.heart.transform.position[1] == pytest.approx(3 + math.sin(1.5 * elapsed * 3) * 0.5)
    assert scene.heart.transform.scale[0] == pytest.approx(0.1 + math.sin(4 * elapsed * 3) * 0.02)
    assert scene.point_light.transform.position[0] == pytest.approx(math.sin(elapsed * 3) * 5)
    assert scene.point_light.transform.position[2] == pytest.approx(math.cos(elapsed * 3) * 5)
    for index, cube in enumerate(scene.floating_cubes):
        expected = scene.floating_base_y[index] + math.sin(2 * elapsed * 3 + index) * 0.06
        assert cube.transform.position[1] == pytest.approx(expected)


def test_rotations_accumulate_per_call(scene, state) -> None:
    updater = AnimationUpdater(FixedRandom(0.5))
    state.speed_multiplier = 0.5
    history = []
    for frame in range(10):
        # Same timestamp every call: rotation still advances with call count.
        updater.update(scene, state, 1.0)
        history.append(
            (
                scene.cube.transform.rotation[0],
                scene.sphere.transform.rotation[1],
                scene.torus.transform.rotation[1],
                scene.heart.transform.rotation[1],
                scene.floating_cubes[-1].transform.rotation[0],
            )
        )

    for before, after in zip(history, history[1:]):
        assert all(b < a for b, a in zip(before, after))
    assert scene.cube.transform.rotation[0] == pytest.approx(10 * 0.01 * 0.5)
    assert scene.torus.transform.rotation[1] == pytest.approx(10 * 0.005 * 2 * 0.5)


def test_bounce_disabled_holds_gated_objects(scene, state) -> None:
    updater = AnimationUpdater(FixedRandom(0.5))
    scene.attach_text()
    updater.update(scene, state, 1.0)
    state.bounce_enabled = False

    held = [
        (list(obj.transform.position), list(obj.transform.rotation), list(obj.transform.scale))
        for obj in [scene.sphere, scene.torus, scene.heart, scene.text, *scene.floating_cubes]
    ]
    cube_rotation = scene.cube.transform.rotation[0]
    for now in (2.0, 3.0, 4.0):
        updater.update(scene, state, now)

    after = [
        (list(obj.transform.position), list(obj.transform.rotation), list(obj.transform.scale))
        for obj in [scene.sphere, scene.torus, scene.heart, scene.text, *scene.floating_cubes]
    ]
    assert after == held
    assert scene.cube.transform.rotation[0] > cube_rotation


def test_missing_text_is_skipped(scene, state) -> None:
    assert scene.text is None
    AnimationUpdater(FixedRandom(0.5)).update(scene, state, 1.0)
    assert scene.text is None


def test_text_bounces_once_attached(scene, state) -> None:
    text = scene.attach_text()
    AnimationUpdater(FixedRandom(0.5)).update(scene, state, 0.75)
    assert text.transform.position[1] == pytest.approx(5 + math.sin(2 * 0.75) * 0.8)
    assert text.transform.rotation[1] == pytest.approx(0.01)


def test_rain_disabled_particles_do_not_move(scene, state) -> None:
    before = [list(p.position) for p in scene.rain]
    AnimationUpdater(FixedRandom(0.5)).update(scene, state, 1.0)
    assert [list(p.position) for p in scene.rain] == before


def test_rain_enabled_integrates_velocity(scene, state) -> None:
    state.rain_enabled = True
    particle = scene.rain[0]
    particle.body.transform.position = [1.0, 5.0, -1.0]
    particle.body.transform.rotation = [0.0, 0.0, 0.0]
    vx, vy, vz = particle.velocity

    AnimationUpdater(FixedRandom(0.5)).update(scene, state, 1.0)

    assert particle.position == pytest.approx([1.0 + vx, 5.0 + vy, -1.0 + vz])
    assert particle.rotation[0] == pytest.approx(particle.rotation_speed)
    assert particle.rotation[2] == pytest.approx(particle.rotation_speed)
    assert particle.rotation[1] == 0.0


def test_particle_below_floor_respawns(scene) -> None:
    rain = config.RAIN
    updater = AnimationUpdater(random.Random(7))
    for particle in scene.rain:
        particle.body.transform.position = [0.0, rain.floor_threshold - 0.5, 0.0]
        particle.body.transform.rotation = [1.0, 2.0, 3.0]
        updater.advance_particle(particle)

        x, y, z = particle.position
        assert rain.spawn_min_y <= y <= rain.spawn_max_y
        assert abs(x) <= rain.spawn_half_extent
        assert abs(z) <= rain.spawn_half_extent
        assert particle.rotation[0] == 0.0
        assert particle.rotation[2] == 0.0


def test_rain_keeps_falling_between_floor_and_spawn(scene, state) -> None:
    state.rain_enabled = True
    updater = AnimationUpdater(random.Random(3))
    for frame in range(2000):
        updater.update(scene, state, frame / 60.0)
    for particle in scene.rain:
        assert particle.velocity[1] < 0
        assert particle.position[1] >= config.RAIN.floor_threshold


def test_heart_recolors_when_trial_succeeds(scene, state) -> None:
    scene.heart.color = 0x123456
    AnimationUpdater(FixedRandom(0.0)).update(scene, state, 1.0)
    assert scene.heart.color in config.COLOR_PALETTES["heart"]


def test_heart_keeps_color_when_trial_fails(scene, state) -> None:
    scene.heart.color = 0x123456
    AnimationUpdater(FixedRandom(config.RANDOM_COLOR_PROBABILITY)).update(scene, state, 1.0)
    assert scene.heart.color == 0x123456


def test_light_orbit_ignores_bounce_restart(scene, state) -> None:
    controls = ControlSurface(scene, state)
    updater = AnimationUpdater(FixedRandom(0.5))
    updater.update(scene, state, 10.0)
    before = list(scene.point_light.transform.position)

    controls.toggle_bounce(10.0)
    controls.toggle_bounce(10.0)
    updater.update(scene, state, 10.0)

    assert state.animation_start_time == 10.0
    assert scene.point_light.transform.position == pytest.approx(before)


def test_light_orbit_ignores_reset(scene, state) -> None:
    controls = ControlSurface(scene, state)
    updater = AnimationUpdater(FixedRandom(0.5))
    updater.update(scene, state, 4.0)
    before = list(scene.point_light.transform.position)

    controls.reset_scene(4.0)
    updater.update(scene, state, 4.0)

    assert scene.point_light.transform.position == pytest.approx(before)
    assert before[0] == pytest.approx(math.sin(4.0) * 5)
