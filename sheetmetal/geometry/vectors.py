"""2D vector helpers for preview construction. Points and vectors are (x, y) tuples."""

import math
from typing import Tuple

Vector2 = Tuple[float, float]

ZERO: Vector2 = (0.0, 0.0)


def add(a: Vector2, b: Vector2) -> Vector2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vector2, b: Vector2) -> Vector2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vector2, s: float) -> Vector2:
    return (v[0] * s, v[1] * s)


def dot(a: Vector2, b: Vector2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def magnitude(v: Vector2) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def normalize(v: Vector2) -> Vector2:
    """Unit vector in the direction of v, or (0, 0) if v has no length."""
    m = magnitude(v)
    if m == 0:
        return ZERO
    return (v[0] / m, v[1] / m)


def midpoint(a: Vector2, b: Vector2) -> Vector2:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def interior_bisector(vertex: Vector2, prev_vertex: Vector2, next_vertex: Vector2) -> Vector2:
    """
    Unit vector along the interior angle bisector at `vertex`.

    Sums the unit edge directions toward both neighbours and normalizes.
    The result is flipped if it points away from the midpoint of the opposite
    edge, so it faces into the triangle whatever the winding order.
    """
    to_prev = normalize(sub(prev_vertex, vertex))
    to_next = normalize(sub(next_vertex, vertex))
    bisector = normalize(add(to_prev, to_next))
    to_opposite = sub(midpoint(prev_vertex, next_vertex), vertex)
    if dot(bisector, to_opposite) < 0:
        bisector = scale(bisector, -1)
    return bisector
