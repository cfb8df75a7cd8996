import random

import pytest

from scene.objects import build_scene
from scene.state import AnimationState


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scene(rng):
    return build_scene(rng)


@pytest.fixture
def state():
    return AnimationState(animation_start_time=0.0)
