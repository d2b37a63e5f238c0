"""Elementary numerics built from power series, bisection and repeated squaring."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count

EPS = 1e-6
PI = 3.14159265358979323846


def is_zero(x: float) -> bool:
    """Return True when ``x`` lies strictly inside ``(-EPS, EPS)``."""
    return -EPS < x < EPS


def base_n(b: int, n: int) -> list[int]:
    """Digits of ``b`` in base ``n``, least significant first."""
    if n < 2:
        raise ValueError(f"base must be at least 2, got {n}")
    digits = []
    while b > 0:
        b, digit = divmod(b, n)
        digits.append(digit)
    return digits


def fibonacci(n: int) -> float:
    """The n-th Fibonacci number, counting F(0) = F(1) = 1."""
    previous, current = 1.0, 1.0
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def iterative_square(a: float, n: int) -> float:
    """Square ``a`` repeatedly ``n`` times, giving ``a ** (2 ** n)``."""
    x = float(a)
    for _ in range(n):
        x *= x
    return x


def _binary_power(base: float, n: int) -> float:
    result = 1.0
    for position, bit in enumerate(base_n(n, 2)):
        if bit == 1:
            result *= iterative_square(base, position)
    return result


def natural_sequence(n: int) -> float:
    """``(1 + 1/n) ** n`` computed by repeated squaring."""
    if n <= 0:
        return 1.0
    return _binary_power(1 + 1 / n, n)


def natural_series(n: int) -> float:
    """Partial sum of ``1/k!`` for ``k`` from 0 to ``n``."""
    total, term = 1.0, 1.0
    for k in range(1, n + 1):
        term /= k
        total += term
    return total


def exp_sequence(x: float, n: int) -> float:
    """``(1 + x/n) ** n`` computed by repeated squaring; 0 for negative ``n``."""
    if n < 0:
        return 0.0
    if n == 0:
        return 1.0
    return _binary_power(1 + x / n, n)


def exp(x: float) -> float:
    """Exponential function summed from its power series."""
    total, term = 1.0, 1.0
    for k in count(1):
        if is_zero(term):
            break
        term *= x / k
        total += term
    return total


def log_by_bisect(x: float) -> float:
    """Natural logarithm found by bisecting ``exp(t) - x`` on ``[-10, 10]``."""
    low, high, mid = -10.0, 10.0, 0.0
    while not is_zero(high - low):
        mid = (low + high) / 2
        value = exp(mid) - x
        if value > 0:
            high = mid
        elif value < 0:
            low = mid
        else:
            return mid
    return mid


def _one_minus_log(t: float) -> float:
    """Series ``1 + t + t**2/2 + t**3/3 + ...``, that is ``1 - ln(1 - t)``."""
    if t < -1 or t > 1:
        raise ValueError(f"series argument out of range: {t}")
    total, term = 1.0, t
    for k in count(1):
        if is_zero(term):
            break
        total += term
        term *= t * k / (k + 1)
    return total


def log(x: float) -> float:
    """Natural logarithm via ``ln((1 + t) / (1 - t))`` with ``t = (x-1)/(x+1)``."""
    if x < 0 or is_zero(x):
        raise ValueError(f"logarithm undefined for {x}")
    t = (x - 1) / (x + 1)
    return _one_minus_log(t) - _one_minus_log(-t)


def sqrt(x: float) -> float:
    """Square root by scaling into ``[0, 4)`` and building the binary digits."""
    if x < 0:
        raise ValueError(f"square root undefined for {x}")
    halvings = 0
    while x >= 4:
        x /= 4
        halvings += 1
    root, step = 0.0, 1.0
    while not is_zero(step):
        if (root + step) * (root + step) < x:
            root += step
        step /= 2
    for _ in range(halvings):
        root *= 2
    return root


def mod_2pi(x: float) -> float:
    """Shift ``x`` by multiples of ``2*PI`` into ``[-PI, PI]``."""
    while x < -PI:
        x += 2 * PI
    while x > PI:
        x -= 2 * PI
    return x


def cos(x: float) -> float:
    """Cosine summed from its Taylor series."""
    x = mod_2pi(x)
    total, term = 0.0, 1.0
    for i in count():
        if is_zero(term):
            break
        total += term
        term *= -x * x / ((2 * i + 1) * (2 * i + 2))
    return total


def sin(x: float) -> float:
    """Sine summed from its Taylor series."""
    x = mod_2pi(x)
    total, term = 0.0, x
    for i in count():
        if is_zero(term):
            break
        total += term
        term *= -x * x / ((2 * i + 2) * (2 * i + 3))
    return total


def min_max(ys: Iterable[float]) -> tuple[float, float]:
    """Smallest and largest of ``ys``."""
    values = list(ys)
    if not values:
        raise ValueError("min_max of an empty sequence")
    return min(values), max(values)


def linspace(a, b, n: int) -> list:
    """``n + 1`` evenly spaced values from ``a`` to ``b``.

    When both ends are integers the values are truncated towards zero.
    """
    if n < 0:
        raise ValueError(f"number of subintervals must not be negative, got {n}")
    if n == 0:
        return [a]
    start, stop = float(a), float(b)
    step = (stop - start) / n
    values = [start + i * step for i in range(n + 1)]
    if isinstance(a, int) and isinstance(b, int):
        return [int(v) for v in values]
    return values