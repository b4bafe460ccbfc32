import pytest

from flappy.constants import GRAVITY, JUMP_IMPULSE
from flappy.data_models import Bird, Pipe


def test_velocity_updates_before_position(physics):
    y, v = physics.apply_gravity_and_movement(384.0, 0.0)
    assert v == GRAVITY
    assert y == 384.0 + GRAVITY


@pytest.mark.parametrize("y, v", [(100.0, -3.2), (500.0, 7.0), (0.0, 0.0)])
def test_integration_is_exact(physics, y, v):
    new_y, new_v = physics.apply_gravity_and_movement(y, v)
    assert new_v == v + GRAVITY
    assert new_y == y + new_v


@pytest.mark.parametrize("prior", [-8.5, -2.0, 0.0, 12.3])
def test_flap_overrides_velocity(physics, prior):
    bird = Bird(velocity=prior)
    physics.flap(bird)
    assert bird.velocity == JUMP_IMPULSE


def test_example_flap_sequence(physics):
    bird = Bird(y=384.0)
    physics.step_bird(bird)
    assert bird.velocity == pytest.approx(0.45)
    assert bird.y == pytest.approx(384.45)

    physics.flap(bird)
    physics.step_bird(bird)
    assert bird.velocity == pytest.approx(-8.05)
    assert bird.y == pytest.approx(376.4)


@pytest.mark.parametrize("y", [250.0, 300.0, 376.0])
def test_bird_inside_gap_is_safe(physics, y):
    assert not physics.hits_pipe(y, Pipe(x=100.0, gap_y=250.0))


@pytest.mark.parametrize("y", [249.9, 376.1, 0.0, 500.0])
def test_bird_outside_gap_collides(physics, y):
    assert physics.hits_pipe(y, Pipe(x=100.0, gap_y=250.0))


@pytest.mark.parametrize("x", [134.0, 48.0, 300.0, -52.0])
def test_no_pipe_collision_without_horizontal_overlap(physics, x):
    assert not physics.hits_pipe(0.0, Pipe(x=x, gap_y=250.0))


@pytest.mark.parametrize("x", [133.9, 48.1, 100.0])
def test_pipe_collision_at_overlap_edges(physics, x):
    assert physics.hits_pipe(0.0, Pipe(x=x, gap_y=250.0))


def test_ground_and_ceiling_thresholds(physics):
    assert physics.hits_bounds(622.0)
    assert not physics.hits_bounds(621.9)
    assert physics.hits_bounds(-0.1)
    assert not physics.hits_bounds(0.0)


def test_check_collision_combines_pipes_and_bounds(physics):
    pipes = [Pipe(x=400.0, gap_y=250.0), Pipe(x=100.0, gap_y=250.0)]
    assert not physics.check_collision(300.0, pipes)
    assert physics.check_collision(200.0, pipes)
    assert physics.check_collision(630.0, [])


def test_score_counts_each_pipe_once(physics):
    pipes = [Pipe(x=47.9, gap_y=200.0), Pipe(x=48.0, gap_y=200.0)]
    assert physics.update_score(pipes) == 1
    assert pipes[0].scored and not pipes[1].scored
    assert physics.update_score(pipes) == 0

    pipes[1].x = 40.0
    assert physics.update_score(pipes) == 1
    assert physics.update_score(pipes) == 0
