"""Parametrised plane curves."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from itertools import pairwise

from recal.function import NSUB, Function
from recal.geometry import Graph, Line, Point
from recal.numeric import cos, linspace, sin, sqrt


@dataclass
class Curve:
    """A curve ``t -> (x(t), y(t))`` for ``t`` in ``interval``."""

    interval: tuple[float, float]
    x: Callable[[float], float]
    y: Callable[[float], float]

    def __post_init__(self) -> None:
        a, b = self.interval
        self.interval = (float(a), float(b))

    def graph(self) -> Graph:
        """Polyline through ``NSUB + 1`` evenly spaced parameter values."""
        ts = linspace(*self.interval, NSUB)
        return Graph(
            lines=[
                Line(Point(self.x(t0), self.y(t0)), Point(self.x(t1), self.y(t1)))
                for t0, t1 in pairwise(ts)
            ]
        )

    def length(self) -> float:
        """Arc length, integrating the speed over the interval."""
        x_fn = Function(self.interval, self.x)
        y_fn = Function(self.interval, self.y)

        def speed(t: float) -> float:
            xp = x_fn.differential(t)
            yp = y_fn.differential(t)
            return sqrt(xp * xp + yp * yp)

        return Function(self.interval, speed).integral()


UNIT_CIRCLE = Curve((0.0, 2 * math.pi), cos, sin)