"""Operations specific to 3-vectors.

Every function requires exactly three components per argument and raises
:class:`~denselin.errors.ShapeMismatchError` otherwise.
"""

from __future__ import annotations

from typing import Sequence

from .errors import ShapeMismatchError
from .matrix import det
from .vector import Vector, magnitude, subtract


def _check_3d(*vectors: Sequence[float]) -> None:
    for vec in vectors:
        if len(vec) != 3:
            raise ShapeMismatchError(f"expected a 3-vector, got length {len(vec)}", expected=3, actual=len(vec))


def cross_product(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    _check_3d(lhs, rhs)
    x, y, z = lhs
    u, v, w = rhs
    return (y * w - z * v, z * u - x * w, x * v - y * u)


def is_parallel(lhs: Sequence[float], rhs: Sequence[float]) -> bool:
    """Exact test: the cross product is the zero vector."""

    return cross_product(lhs, rhs) == (0, 0, 0)


def equation_of_plane(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Vector:
    """Plane through three points as ``(a, b, c, d)`` meaning ``ax + by + cz = d``.

    ``(a, b, c)`` is the normal ``(p2 - p1) x (p3 - p1)``.
    """

    _check_3d(p1, p2, p3)
    a, b, c = cross_product(subtract(p2, p1), subtract(p3, p1))
    x, y, z = p1
    return (a, b, c, a * x + b * y + c * z)


def area_of_parallelogram(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    return magnitude(cross_product(lhs, rhs))


def scalar_triple_product(u: Sequence[float], v: Sequence[float], w: Sequence[float]) -> float:
    """``u . (v x w)``, computed as the determinant of the rows ``u, v, w``."""

    _check_3d(u, v, w)
    return det((u, v, w))


def volume_of_parallelepiped(u: Sequence[float], v: Sequence[float], w: Sequence[float]) -> float:
    return abs(scalar_triple_product(u, v, w))
