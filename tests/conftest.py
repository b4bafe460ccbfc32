import random

import pytest

from flappy.data_models import Session
from flappy.game_engine import GameEngine
from flappy.physics_core import PhysicsCore
from flappy.pipe_stream import PipeStream


@pytest.fixture
def physics():
    return PhysicsCore()


@pytest.fixture
def stream():
    return PipeStream(rng=random.Random(1234))


@pytest.fixture
def engine(stream):
    return GameEngine(session=Session(), pipe_stream=stream)


@pytest.fixture
def hovering_engine(stream):
    """An engine whose bird ignores gravity, for long PLAY runs."""
    return GameEngine(session=Session(), physics=PhysicsCore(gravity=0.0), pipe_stream=stream)
