import random

from flappy.constants import SCREEN_WIDTH
from flappy.pipe_stream import PipeStream


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def randrange(self, *args, **kwargs):
        return self.value


def test_spawn_at_right_edge(stream):
    pipes = []
    pipe = stream.spawn(pipes)
    assert pipes == [pipe]
    assert pipe.x == SCREEN_WIDTH
    assert not pipe.scored


def test_gap_range_bounds():
    assert PipeStream(rng=FixedRandom(0)).spawn([]).gap_y == 100
    assert PipeStream(rng=FixedRandom(467)).spawn([]).gap_y == 567


def test_random_gaps_stay_inside_margins(stream):
    pipes = []
    for _ in range(1000):
        stream.spawn(pipes)
    assert all(100 <= p.gap_y < 568 for p in pipes)


def test_position_after_one_hundred_ticks(stream):
    pipes = []
    stream.spawn(pipes)
    for _ in range(100):
        stream.advance(pipes)
    assert pipes[0].x == 182.0


def test_pipe_removed_once_fully_off_screen(stream):
    pipes = []
    stream.spawn(pipes)
    for _ in range(193):
        stream.advance(pipes)
    assert len(pipes) == 1
    stream.advance(pipes)
    assert pipes == []


def test_spawns_only_on_interval(stream):
    pipes = []
    for frame in range(1, 100):
        stream.step(pipes, frame)
    assert pipes == []
    stream.step(pipes, 100)
    assert len(pipes) == 1
    assert pipes[0].x == SCREEN_WIDTH - 2.5


def test_spawn_order_matches_screen_order(stream):
    pipes = []
    for frame in range(1, 250):
        stream.step(pipes, frame)
    xs = [p.x for p in pipes]
    assert len(xs) == 2
    assert xs == sorted(xs)
