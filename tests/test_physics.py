import pytest

from foil_setup_app.physics import (
    clamp, map_range, round_half_up, build_lift_curve, mph_to_mps, mps_to_mph, takeoff_speed_mps,
)


def test_clamp_bounds():
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10


@pytest.mark.parametrize("x", [-1e9, 0, 599.9, 600])
def test_map_range_saturates_below(x):
    assert map_range(x, 600, 1800, -2.5, 3.5) == -2.5


@pytest.mark.parametrize("x", [1800, 1800.1, 1e9])
def test_map_range_saturates_above(x):
    assert map_range(x, 600, 1800, -2.5, 3.5) == pytest.approx(3.5)


def test_map_range_midpoint():
    assert map_range(1200, 600, 1800, -2.5, 3.5) == pytest.approx(0.5)


def test_map_range_reversed_output():
    assert map_range(0.0, 0.18, 0.35, 8, -6) == 8
    assert map_range(1.0, 0.18, 0.35, 8, -6) == pytest.approx(-6)
    xs = [0.1 + 0.01 * k for k in range(40)]
    ys = [map_range(x, 0.18, 0.35, 8, -6) for x in xs]
    assert all(a >= b for a, b in zip(ys, ys[1:]))
    assert all(-6 <= y <= 8 for y in ys)


def test_map_range_monotonic_increasing():
    ys = [map_range(x, 4, 9, -2, 18) for x in range(0, 14)]
    assert all(a <= b for a, b in zip(ys, ys[1:]))


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0.0) == 0


def test_speed_conversion():
    assert mps_to_mph(mph_to_mps(17.0)) == pytest.approx(17.0)
    assert mps_to_mph(1.0) == pytest.approx(2.23694)


def test_takeoff_speed_balances_load():
    v = takeoff_speed_mps(75, 0.535, 0.12)
    lift = 0.5 * 1025 * v * v * 0.535 * 0.12
    assert lift == pytest.approx(75 * 9.81 * 1.05)


def test_lift_curve_shape():
    curve = build_lift_curve(0.535, 0.12, 75)
    assert len(curve) == 20
    assert [mph for mph, _ in curve] == list(range(6, 26))
    lifts = [lift for _, lift in curve]
    assert all(isinstance(l, int) and l >= 0 for l in lifts)
    assert all(a <= b for a, b in zip(lifts, lifts[1:]))


def test_lift_curve_values():
    curve = dict(build_lift_curve(0.535, 0.12, 75))
    # lift% = 0.5 * rho * v² * CL * A / (m * g) * 100
    v = 6 / 2.23694
    expected = 0.5 * 1025 * v * v * 0.535 * 0.12 / (75 * 9.81) * 100
    assert curve[6] == round_half_up(expected)
    assert curve[6] == 32


def test_lift_curve_is_repeatable():
    assert build_lift_curve(0.6, 0.09, 82) == build_lift_curve(0.6, 0.09, 82)
