# recal

Elementary calculus built up from arithmetic alone. The exponential, logarithm,
square root, sine and cosine are computed from series, bisection and binary
search rather than taken from the `math` module, so each result shows how the
number is reached. Functions and parametric curves can be differentiated,
integrated and measured, then drawn to PNG images.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Numbers from first principles

```python
from recal.numeric import exp, log, sqrt, sin, cos, natural_sequence, natural_series

exp(1)                    # series sum 1 + x + x²/2! + ...
log(2)                    # about 0.693147
sqrt(20)
natural_sequence(10)      # (1 + 1/10)**10, about 2.593742
natural_series(10)        # sum of 1/k! for k up to 10, about 2.718282
```

`recal.numeric` also provides `base_n`, `fibonacci`, `iterative_square`,
`exp_sequence`, `log_by_bisect`, `mod_2pi`, `is_zero`, `min_max` and `linspace`,
together with the constants `EPS` (1e-6) and `PI`.

- `is_zero(x)` is true when `x` lies strictly between `-EPS` and `EPS`; the
  iterative routines stop on that tolerance.
- `base_n(b, n)` returns the digits of `b` in base `n`, least significant first.
- `fibonacci(n)` counts from F(0) = F(1) = 1.
- `linspace(a, b, n)` returns `n + 1` evenly spaced values; when both ends are
  integers the values are truncated to integers.
- `log` and `sqrt` raise `ValueError` for inputs outside their domain, as do
  `base_n` for a base below 2, `linspace` for a negative `n` and `min_max` for an
  empty sequence.

## Functions on an interval

```python
from recal.function import Function
from recal.numeric import sqrt

half_disc = Function((-1.0, 1.0), lambda x: 2 * sqrt(1 - x * x))
half_disc.integral()              # Simpson's rule on 50000 pieces, about 3.1416

square = Function((0.0, 1.0), lambda x: x * x)
square.left_sum(1000)             # about 0.33283
square.trapezoid(100)
square.differential(0.5)          # one-sided quotients, step halved until they agree
square.derivative()               # a new Function on the same interval
```

`graph()` samples the function at 101 evenly spaced points into a
`recal.geometry.Graph` of `Line` segments. `graph_continuous(eps)` turns every
segment whose ends differ in height by more than `eps` into a pair of isolated
`Point`s.

## Curves

```python
from math import pi
from recal.curve import Curve, UNIT_CIRCLE
from recal.numeric import sin, cos

cycloid = Curve((0.0, 2 * pi), lambda t: t - sin(t), lambda t: 1 - cos(t))
cycloid.length()                  # about 7.9999
cycloid.graph()
UNIT_CIRCLE.graph()
```

## Drawing

```python
from recal.canvas import Canvas
from recal.function import Function
from recal.numeric import exp

canvas = Canvas(xlim=(-1.1, 1.1), ylim=(0.0, 3.0))
canvas.draw(Function((-1.0, 1.0), exp).graph())
canvas.save("exp.png")
```

The canvas is 400 × 400 pixels by default with a white background. `point`
marks a small red cross, `line` draws a black segment, and `draw` draws a
graph's points and then its lines. Pixels that fall outside the image are
skipped. `pixel(x, y)` gives the column and row for a point and raises
`ValueError` when the window is empty, so set `xlim` and `ylim` before drawing.
`save()` writes `image.png` unless another path is given.

## Three dimensions

`recal.graphics.space` holds `Point3`, `Line3`, `Arrow` and `Scene`, which can
be rotated by an angle in the xy plane followed by an angle in the yz plane, and
projected onto the plane by dropping the z coordinate. `Matrix`, `identity` and
`rot` supply the rotation matrices. `Scene.from_graph` adds a plane graph at
z = 0. `recal.graphics.view.View` is a canvas that also draws arrows and scenes:

```python
from recal.curve import UNIT_CIRCLE
from recal.graphics.space import Arrow, Point3, Scene
from recal.graphics.view import View

scene = Scene()
scene.from_graph(UNIT_CIRCLE.graph())
scene.arrows.append(Arrow(Point3(0, 0, 0), Point3(0, 0, 1)))
scene.rotate(0.0, -1.3)

view = View(xlim=(-1.2, 1.2), ylim=(-1.2, 1.2))
view.draw(scene)
view.save("scene.png")
```

## What it does not do

The package is a library only: it has no command-line tool and does not open
windows to show plots. Drawings are written to PNG files with `save`.