import math

import pytest

from recal.function import NSUB, Function
from recal.numeric import cos, is_zero, sin, sqrt


def _sinx_x(x):
    if is_zero(x):
        return 1.0
    return sin(x) / x


def _exotic(x):
    if x == 0:
        return 0.0
    return math.exp(-1 / (x * x))


def _x2sin(x):
    if is_zero(x):
        return 0.0
    return x * x * sin(1 / x)


def _x3sin(x):
    if is_zero(x):
        return 0.0
    return x * x * x * sin(1 / x)


SINX_X = Function((-10, 10), _sinx_x)
EXOTIC = Function((-2, 2), _exotic)
X2SIN = Function((-1, 1), _x2sin)
X3SIN = Function((-1, 1), _x3sin)
SINE = Function((-3, 3), sin)


def _disc(x):
    if x < 0:
        return x * x - 1
    if x > 0:
        return x * x + 1
    return 0.0


DISC_FN = Function((-1.0, 1.0), _disc)


def test_differential_example():
    f = Function((-1.0, 1.0), cos)
    assert f.differential(0.0) == 0.0


def test_differential_of_square():
    f = Function((-1.0, 1.0), lambda x: x * x)
    assert f.differential(0.5) == pytest.approx(1.0, abs=1e-4)


def test_differential_not_converging_raises():
    f = Function((-1.0, 1.0), abs)
    with pytest.raises(ValueError):
        f.differential(0.0)


def test_derivative_keeps_interval():
    f = Function((-1.0, 2.0), lambda x: x * x * x)
    d = f.derivative()
    assert d.interval == (-1.0, 2.0)
    assert d.formula(1.0) == pytest.approx(3.0, abs=1e-4)


def test_integral_example():
    f = Function((-1 / sqrt(2), 1 / sqrt(2)), lambda x: 1 / sqrt(1 - x * x))
    assert f"{4 * f.integral():.4f}" == "6.2832"


def test_integral_area_example():
    f = Function((-1, 1), lambda x: 2 * sqrt(1 - x * x))
    assert f"{f.integral():.4f}" == "3.1416"


@pytest.mark.parametrize("sub, expected", [(10, "0.28500"), (100, "0.32835"), (1000, "0.33283")])
def test_left_sum_example(sub, expected):
    f = Function((0.0, 1.0), lambda x: x * x)
    assert f"{f.left_sum(sub):.5f}" == expected


def test_left_sum_rejects_zero():
    with pytest.raises(ValueError):
        Function((0.0, 1.0), lambda x: x).left_sum(0)


def test_trapezoid_linear_is_exact():
    f = Function((0.0, 1.0), lambda x: x)
    assert f.trapezoid(7) == pytest.approx(0.5)


def test_trapezoid_converges():
    f = Function((0.0, 1.0), lambda x: x * x)
    coarse = abs(f.trapezoid(10) - 1 / 3)
    fine = abs(f.trapezoid(100) - 1 / 3)
    assert fine < coarse
    assert f.trapezoid(1000) == pytest.approx(1 / 3, abs=1e-5)


@pytest.mark.parametrize("fn", [SINX_X, EXOTIC, X2SIN, X3SIN, SINE])
def test_graph_is_connected_polyline(fn):
    lines = fn.graph().lines
    assert len(lines) == NSUB
    assert lines[0].start.x == fn.interval[0]
    assert lines[-1].end.x == pytest.approx(fn.interval[1])
    for first, second in zip(lines, lines[1:]):
        assert first.end == second.start


def test_graph_samples_formula():
    for line in SINE.graph().lines:
        assert line.start.y == sin(line.start.x)
        assert line.end.y == sin(line.end.x)


def test_x2sin_graph_is_squeezed():
    for line in X2SIN.graph().lines:
        x = line.start.x
        assert abs(line.start.y) <= x * x + 1e-5


def test_graph_continuous_splits_jump():
    g = DISC_FN.graph_continuous(0.1)
    assert g.points
    assert len(g.points) == 2 * (NSUB - len(g.lines))
    for line in g.lines:
        assert abs(line.start.y - line.end.y) <= 0.1
    for point in g.points:
        assert point.y == DISC_FN.formula(point.x)


def test_graph_continuous_smooth_has_no_points():
    g = SINE.graph_continuous(0.1)
    assert g.points == []
    assert len(g.lines) == NSUB