"""Points, segments and arrows in space, rotated and projected onto the plane."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from recal.geometry import Graph, Line, Point
from recal.numeric import cos, sin


class Point3(NamedTuple):
    """A point in space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def rotate(self, theta: float, phi: float) -> Point3:
        """Turn by ``theta`` in the xy plane, then by ``phi`` in the yz plane."""
        p = rot(theta, (0, 1)).mul(self)
        return rot(phi, (1, 2)).mul(p)

    def project(self) -> Point:
        """Drop the z coordinate."""
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Matrix:
    """A 3 x 3 matrix stored by rows."""

    rows: tuple[tuple[float, float, float], ...]

    def mul(self, p: Point3) -> Point3:
        """The product of this matrix with the column vector ``p``."""
        return Point3(*(sum(m * c for m, c in zip(row, p)) for row in self.rows))


def identity() -> Matrix:
    """The 3 x 3 identity matrix."""
    return Matrix(tuple(tuple(1.0 if i == j else 0.0 for j in range(3)) for i in range(3)))


def rot(t: float, idx: tuple[int, int]) -> Matrix:
    """Rotation by ``t`` in the plane of the two coordinate axes ``idx``."""
    i, j = idx
    rows = [list(row) for row in identity().rows]
    c, s = cos(t), sin(t)
    rows[i][i] = c
    rows[i][j] = -s
    rows[j][i] = s
    rows[j][j] = c
    return Matrix(tuple(tuple(row) for row in rows))


class Line3(NamedTuple):
    """A segment in space."""

    start: Point3
    end: Point3

    def rotate(self, theta: float, phi: float):
        """Both ends rotated as by :meth:`Point3.rotate`."""
        return type(self)(self.start.rotate(theta, phi), self.end.rotate(theta, phi))

    def project(self) -> Line:
        """The segment seen in the xy plane."""
        return Line(self.start.project(), self.end.project())


class Arrow(Line3):
    """A segment drawn with a tip at its end."""

    __slots__ = ()


@dataclass
class Scene:
    """Points, segments and arrows in space."""

    points: list[Point3] = field(default_factory=list)
    lines: list[Line3] = field(default_factory=list)
    arrows: list[Arrow] = field(default_factory=list)

    def from_graph(self, graph: Graph) -> None:
        """Add the points and segments of a plane graph, placed at ``z = 0``."""
        self.points.extend(Point3(p.x, p.y, 0.0) for p in graph.points)
        self.lines.extend(
            Line3(Point3(ln.start.x, ln.start.y, 0.0), Point3(ln.end.x, ln.end.y, 0.0))
            for ln in graph.lines
        )

    def rotate(self, theta: float, phi: float) -> None:
        """Rotate everything in place."""
        self.points[:] = [p.rotate(theta, phi) for p in self.points]
        self.lines[:] = [ln.rotate(theta, phi) for ln in self.lines]
        self.arrows[:] = [Arrow(*a.rotate(theta, phi)) for a in self.arrows]