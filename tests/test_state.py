import pytest

from ferriswheel.state import (
    ELEVATION_LIMIT,
    MIN_DISTANCE,
    SWAY_LIMIT,
    SWAY_SPEED,
    WheelState,
)


def test_defaults():
    state = WheelState()
    assert state.wheel_angle == 0.0
    assert state.moving is True
    assert state.sway_speed == pytest.approx(0.2)
    assert state.distance == pytest.approx(6.0)


def test_tick_advances_wheel_and_sway():
    state = WheelState()
    state.tick()
    assert state.wheel_angle == pytest.approx(0.5)
    assert state.sway_angle == pytest.approx(0.2)
    assert state.sway_forward is True


def test_wheel_angle_wraps():
    state = WheelState(wheel_angle=360.0)
    state.tick()
    assert state.wheel_angle == pytest.approx(0.5)


def test_wheel_angle_stays_in_range():
    state = WheelState()
    for _ in range(2000):
        state.tick()
        assert 0.0 <= state.wheel_angle <= 360.0


def test_sway_is_bounded_and_reverses():
    state = WheelState()
    directions = set()
    for _ in range(200):
        state.tick()
        directions.add(state.sway_forward)
        assert abs(state.sway_angle) <= SWAY_LIMIT + SWAY_SPEED + 1e-9
    assert directions == {True, False}


def test_pause_stops_wheel_and_decays_sway():
    state = WheelState()
    state.tick()
    state.press("l")
    assert state.moving is False
    angle = state.wheel_angle
    state.tick()
    assert state.wheel_angle == angle
    assert state.sway_speed < SWAY_SPEED
    for _ in range(500):
        state.tick()
    assert state.sway_speed == 0.0
    sway = state.sway_angle
    state.tick()
    assert state.sway_angle == sway


def test_resume_restores_sway_speed():
    state = WheelState()
    state.press("L")
    for _ in range(500):
        state.tick()
    state.press("L")
    state.tick()
    assert state.moving is True
    assert state.sway_speed == pytest.approx(SWAY_SPEED)


def test_azimuth_keys():
    state = WheelState()
    state.press("a")
    assert state.azimuth == pytest.approx(-0.05)
    state.press("d")
    state.press("D")
    assert state.azimuth == pytest.approx(0.05)


def test_elevation_is_clamped():
    state = WheelState()
    for _ in range(100):
        state.press("w")
    assert state.elevation == pytest.approx(ELEVATION_LIMIT)
    for _ in range(200):
        state.press("s")
    assert state.elevation == pytest.approx(-ELEVATION_LIMIT)


def test_zoom_in_is_clamped():
    state = WheelState()
    for _ in range(100):
        state.press("e")
    assert state.distance == pytest.approx(MIN_DISTANCE)


def test_zoom_round_trip():
    state = WheelState()
    before = state.distance
    state.press("q")
    assert state.distance > before
    state.press("e")
    assert state.distance == pytest.approx(before)


@pytest.mark.parametrize(
    "first, second",
    [("a", "A"), ("d", "D"), ("w", "W"), ("s", "S"), ("e", "E"), ("e", "="), ("q", "Q"), ("q", "-")],
)
def test_equivalent_keys(first, second):
    one, two = WheelState(), WheelState()
    one.press(first)
    two.press(second)
    assert one == two


@pytest.mark.parametrize("key", ["x", "", "1", " ", "ab"])
def test_unknown_keys_do_nothing(key):
    state = WheelState()
    state.press(key)
    assert state == WheelState()