"""Canvas that draws spatial scenes and arrows."""

from __future__ import annotations

import math

from recal.canvas import Canvas
from recal.geometry import Line, Point
from recal.graphics.space import Scene
from recal.numeric import cos, sin

TIP = 5


class View(Canvas):
    """A canvas that also draws arrows and projected scenes."""

    def arrow(self, a: Line) -> None:
        """Draw the segment ``a`` with a two-stroke tip at its end."""
        self.line(a.start, a.end)
        i0, j0 = self.pixel(a.end.x, a.end.y)
        i1, j1 = self.pixel(a.start.x, a.start.y)
        d = math.hypot(i0 - i1, j0 - j1)
        if d == 0:
            return
        px = (a.start.x - a.end.x) * TIP / d
        py = (a.start.y - a.end.y) * TIP / d
        for t in (-math.pi / 4, math.pi / 4):
            c, s = cos(t), sin(t)
            self.line(a.end, Point(a.end.x + px * c - py * s, a.end.y + px * s + py * c))

    def draw(self, graph: Scene) -> None:
        """Draw the projection of the scene: points, then segments, then arrows."""
        for p in graph.points:
            q = p.project()
            self.point(q.x, q.y)
        for line in graph.lines:
            self.line(*line.project())
        for arrow in graph.arrows:
            self.arrow(arrow.project())