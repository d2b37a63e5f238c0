"""Real functions on an interval: derivatives, integrals and sampled graphs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from itertools import pairwise

from recal.geometry import Graph, Line, Point
from recal.numeric import EPS, is_zero, linspace

NSUB = 100
NSUB_INT = 50000


@dataclass
class Function:
    """A formula together with the interval it is studied on."""

    interval: tuple[float, float]
    formula: Callable[[float], float]

    def __post_init__(self) -> None:
        a, b = self.interval
        self.interval = (float(a), float(b))

    def differential(self, c: float) -> float:
        """Derivative at ``c``, halving the step until both one-sided quotients agree."""
        f = self.formula
        fc = f(c)
        h = EPS
        while True:
            right = (f(c + h) - fc) / h
            left = (fc - f(c - h)) / h
            if is_zero(left - right):
                return (left + right) / 2
            h /= 2
            if h == 0:
                raise ValueError(f"difference quotients do not converge at {c}")

    def derivative(self) -> Function:
        """The derivative as a function on the same interval."""
        return Function(self.interval, self.differential)

    def graph(self) -> Graph:
        """Polyline through ``NSUB + 1`` evenly spaced samples."""
        f = self.formula
        xs = linspace(*self.interval, NSUB)
        return Graph(
            lines=[Line(Point(x0, f(x0)), Point(x1, f(x1))) for x0, x1 in pairwise(xs)]
        )

    def graph_continuous(self, eps: float) -> Graph:
        """Graph whose segments jumping by more than ``eps`` become endpoint markers."""
        points: list[Point] = []
        lines: list[Line] = []
        for line in self.graph().lines:
            if abs(line.start.y - line.end.y) > eps:
                points.extend((line.start, line.end))
            else:
                lines.append(line)
        return Graph(points=points, lines=lines)

    def integral(self) -> float:
        """Definite integral by Simpson's rule on ``NSUB_INT`` subintervals."""
        f = self.formula
        a, b = self.interval
        xs = linspace(a, b, NSUB_INT)
        total = sum(f(l) + 4 * f((l + r) / 2) + f(r) for l, r in pairwise(xs))
        dx = (b - a) / NSUB_INT
        return total * dx / 6

    def left_sum(self, sub: int) -> float:
        """Left Riemann sum on ``sub`` equal subintervals."""
        if sub < 1:
            raise ValueError(f"number of subintervals must be positive, got {sub}")
        a, b = self.interval
        xs = linspace(a, b, sub)
        total = sum(self.formula(x) for x in xs[:-1])
        return total * (b - a) / sub

    def trapezoid(self, sub: int) -> float:
        """Trapezoidal rule on ``sub`` equal subintervals."""
        if sub < 1:
            raise ValueError(f"number of subintervals must be positive, got {sub}")
        a, b = self.interval
        total = 0.0
        for i, x in enumerate(linspace(a, b, sub)):
            value = self.formula(x)
            total += value
            if 0 < i < sub:
                total += value
        return total * ((b - a) / sub) / 2