"""Plane points, segments and graphs made of them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Line:
    """A segment from ``start`` to ``end``."""

    start: Point
    end: Point


@dataclass
class Graph:
    """A drawing made of isolated points and segments."""

    points: list[Point] = field(default_factory=list)
    lines: list[Line] = field(default_factory=list)