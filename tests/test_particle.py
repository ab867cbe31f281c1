import pytest

from constants import REST_COLOUR, TRAIL_LENGTH
from particle import Particle
from vector import Vector2

WIDTH, HEIGHT = 800, 600


@pytest.fixture
def particle():
    return Particle(Vector2(100, 100), mass=2, diameter=20)


def test_new_particle_is_at_rest(particle):
    assert particle.velocity == Vector2(0, 0)
    assert particle.acceleration == Vector2(0, 0)
    assert particle.colour == REST_COLOUR


def test_accepts_tuple_position():
    p = Particle((5, 7), mass=1, diameter=4)
    assert p.position == Vector2(5, 7)


def test_trail_shape(particle):
    assert len(particle.trail) == TRAIL_LENGTH
    for i, segment in enumerate(particle.trail):
        assert segment.diameter == pytest.approx(20 * (i + 1) / 11)
        assert segment.position == particle.position


def test_apply_force_divides_by_mass(particle):
    particle.apply_force(Vector2(2, -4))
    particle.apply_force(Vector2(2, 0))
    assert particle.acceleration == Vector2(2, -2)


def test_integrate_advances_and_resets_acceleration(particle):
    particle.apply_force(Vector2(2, 0))
    particle.integrate(WIDTH, HEIGHT)

    assert particle.velocity == Vector2(1, 0)
    assert particle.position == Vector2(101, 100)
    assert particle.acceleration == Vector2(0, 0)


def test_trail_lags_one_frame_per_segment(particle):
    particle.apply_force(Vector2(2, 0))
    particle.integrate(WIDTH, HEIGHT)
    assert particle.trail[0].position == Vector2(100, 100)

    particle.integrate(WIDTH, HEIGHT)
    assert particle.position == Vector2(102, 100)
    assert particle.trail[0].position == Vector2(101, 100)
    assert particle.trail[1].position == Vector2(100, 100)


def test_trail_length_is_constant(particle):
    for _ in range(25):
        particle.apply_force(Vector2(1, 1))
        particle.integrate(WIDTH, HEIGHT)
    assert len(particle.trail) == TRAIL_LENGTH


def test_trail_carries_previous_colour(particle):
    particle.velocity = Vector2(8, 0)
    particle.integrate(WIDTH, HEIGHT)
    fast_colour = particle.colour
    assert particle.trail[0].colour == REST_COLOUR

    particle.integrate(WIDTH, HEIGHT)
    assert particle.trail[0].colour == fast_colour
    assert particle.trail[1].colour == REST_COLOUR


def test_trail_does_not_alias_live_position(particle):
    particle.velocity = Vector2(5, 5)
    particle.integrate(WIDTH, HEIGHT)
    snapshot = particle.trail[0].position
    particle.integrate(WIDTH, HEIGHT)
    assert snapshot == Vector2(100, 100)


def test_wrap_right_edge_keeps_velocity(particle):
    particle.position = Vector2(WIDTH + 10 + 0.001, 300)
    particle.velocity = Vector2(3, 1)
    particle.normalize_position(WIDTH, HEIGHT)

    assert particle.position == Vector2(0, 300)
    assert particle.velocity == Vector2(3, 1)


def test_no_wrap_while_partly_visible(particle):
    particle.position = Vector2(WIDTH + 9, -9)
    particle.normalize_position(WIDTH, HEIGHT)
    assert particle.position == Vector2(WIDTH + 9, -9)


@pytest.mark.parametrize("start, expected", [
    ((-10.5, 300), (WIDTH, 300)),
    ((400, HEIGHT + 10.5), (400, 0)),
    ((400, -10.5), (400, HEIGHT)),
    ((WIDTH + 11, HEIGHT + 11), (0, 0)),
    ((-11, -11), (WIDTH, HEIGHT)),
])
def test_wrap_each_edge(particle, start, expected):
    particle.position = Vector2(*start)
    particle.normalize_position(WIDTH, HEIGHT)
    assert particle.position == Vector2(*expected)


def test_colour_at_low_speed_is_white(particle):
    particle.velocity = Vector2(0.3, 0.4)
    particle.update_colour()
    assert particle.colour == (255, 255, 255)


def test_colour_maps_speed_linearly(particle):
    particle.velocity = Vector2(8, 0)
    particle.update_colour()
    red, green, blue = particle.colour
    assert red == 255
    assert green == pytest.approx(255 - 127.5)
    assert blue == green


def test_colour_extrapolates_beyond_fifteen(particle):
    particle.velocity = Vector2(0, 29)
    particle.update_colour()
    assert particle.colour[1] == pytest.approx(-255)
    assert particle.colour[2] == pytest.approx(-255)


def test_render_items_draw_trail_back_to_front(particle):
    items = list(particle.render_items())

    assert len(items) == TRAIL_LENGTH + 1
    assert items[0][1] == particle.trail[-1].diameter
    assert items[-2][1] == particle.trail[0].diameter
    assert items[-1] == (particle.position, particle.diameter, particle.colour)
