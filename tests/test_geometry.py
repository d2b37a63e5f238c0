import dataclasses

import pytest

from recal.geometry import Graph, Line, Point


def test_point_equality():
    assert Point(1.5, -2.0) == Point(1.5, -2.0)
    assert Point(1.5, -2.0) != Point(-2.0, 1.5)


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0
    assert p.x == 1.0
    assert p == Point(1.0, 2.0)


def test_line_keeps_endpoints():
    a, b = Point(0.0, 1.0), Point(2.0, 3.0)
    line = Line(a, b)
    assert line.start == a
    assert line.end == b


def test_graph_starts_empty():
    graph = Graph()
    assert graph.points == []
    assert graph.lines == []


def test_graphs_do_not_share_lists():
    first, second = Graph(), Graph()
    first.points.append(Point(1.0, 1.0))
    first.lines.append(Line(Point(0.0, 0.0), Point(1.0, 1.0)))
    assert second.points == []
    assert second.lines == []
    assert len(first.points) == 1