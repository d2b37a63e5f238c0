"""Raster canvas that maps plane coordinates onto the pixels of an image."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from PIL import Image

from recal.geometry import Graph, Point
from recal.numeric import linspace

WIDTH, HEIGHT = 400, 400

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

Pixel = tuple[int, int]


@dataclass
class Canvas:
    """An image of ``width`` x ``height`` pixels showing the window ``xlim`` x ``ylim``."""

    width: int = WIDTH
    height: int = HEIGHT
    xlim: tuple[float, float] = (0.0, 0.0)
    ylim: tuple[float, float] = (0.0, 0.0)
    image: Image.Image = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        self.image = Image.new("RGB", (self.width, self.height), WHITE)

    def pixel(self, x: float, y: float) -> Pixel:
        """Column and row of the pixel holding the point ``(x, y)``."""
        a, b = self.xlim
        c, d = self.ylim
        if a == b or c == d:
            raise ValueError(f"empty window: xlim={self.xlim}, ylim={self.ylim}")
        dw = (b - a) / self.width
        dh = (d - c) / self.height
        return int((x - a) / dw), int((d - y) / dh)

    def _set(self, i: int, j: int, colour: tuple[int, int, int]) -> None:
        if 0 <= i < self.width and 0 <= j < self.height:
            self.image.putpixel((i, j), colour)

    def point(self, x: float, y: float) -> None:
        """Mark ``(x, y)`` with a small red cross."""
        i0, j0 = self.pixel(x, y)
        for i in range(-2, 3):
            for j in range(-1, 2):
                self._set(i0 + i, j0 + j, RED)
                self._set(i0 + j, j0 + i, RED)

    def line(self, p: Point, q: Point) -> None:
        """Draw a black segment from ``p`` to ``q``."""
        i0, j0 = self.pixel(p.x, p.y)
        i1, j1 = self.pixel(q.x, q.y)
        n = max(abs(i0 - i1), abs(j0 - j1))
        for i2, j2 in zip(linspace(i0, i1, n), linspace(j0, j1, n)):
            for k in range(-1, 2):
                self._set(i2 + k, j2, BLACK)
                self._set(i2, j2 + k, BLACK)

    def draw(self, graph: Graph) -> None:
        """Draw the points of ``graph`` and then its segments."""
        for p in graph.points:
            self.point(p.x, p.y)
        for line in graph.lines:
            self.line(line.start, line.end)

    def save(self, path: str | os.PathLike[str] = "image.png") -> None:
        """Write the image as a PNG file."""
        self.image.save(path, format="PNG")