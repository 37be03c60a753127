"""Vector kernel: elementary arithmetic and the Gram–Schmidt family.

Vectors are plain tuples of numbers.  Inputs may be any sequence (lists,
tuples, ``numpy`` arrays); every function returns a fresh tuple and never
mutates its arguments.  Values are not cast to ``float`` so integer input stays
exact for operations that never divide.

Dimension mismatches raise :class:`~denselin.errors.ShapeMismatchError` at the
point they are detected.  Divisions by zero do not raise: :func:`divide`
returns ``inf``/``nan`` the way IEEE arithmetic does, so e.g. normalising the
zero vector yields non-finite components.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from .config import DEFAULT_ATOL
from .errors import ShapeMismatchError


Vector = Tuple[float, ...]
VectorSet = Tuple[Vector, ...]


def as_vector(values: Iterable[float]) -> Vector:
    """Return ``values`` as a tuple, leaving the numbers themselves untouched."""

    return tuple(values)


def zeros(length: int) -> Vector:
    return tuple(0 for _ in range(length))


def divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising ``ZeroDivisionError``.

    ``x / 0`` gives a signed infinity and ``0 / 0`` gives ``nan``.
    """

    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _check_same_length(lhs: Sequence[float], rhs: Sequence[float], operation: str) -> None:
    if len(lhs) != len(rhs):
        raise ShapeMismatchError(
            f"dimension mismatch in {operation}: {len(lhs)} != {len(rhs)}",
            expected=len(lhs),
            actual=len(rhs),
        )


def add(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    _check_same_length(lhs, rhs, "add")
    return tuple(a + b for a, b in zip(lhs, rhs))


def subtract(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    _check_same_length(lhs, rhs, "subtract")
    return tuple(a - b for a, b in zip(lhs, rhs))


def scalar_multiply(vec: Sequence[float], scalar: float) -> Vector:
    return tuple(scalar * v for v in vec)


def dot(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    _check_same_length(lhs, rhs, "dot")
    return sum(a * b for a, b in zip(lhs, rhs))


def hadamard_product(lhs: Sequence[float], rhs: Sequence[float]) -> Vector:
    _check_same_length(lhs, rhs, "hadamard_product")
    return tuple(a * b for a, b in zip(lhs, rhs))


def sqr_magnitude(vec: Sequence[float]) -> float:
    return dot(vec, vec)


def magnitude(vec: Sequence[float]) -> float:
    return math.sqrt(sqr_magnitude(vec))


def normalize(vec: Sequence[float]) -> Vector:
    """Scale ``vec`` to unit length.

    The zero vector is not special-cased: its components come back as ``nan``.
    """

    return scalar_multiply(vec, divide(1.0, magnitude(vec)))


def distance(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    return magnitude(subtract(lhs, rhs))


def is_orthogonal(lhs: Sequence[float], rhs: Sequence[float]) -> bool:
    """Exact test ``dot(lhs, rhs) == 0``; floating-point input may never pass."""

    return dot(lhs, rhs) == 0


def scalar_projection(vec: Sequence[float], onto: Sequence[float]) -> float:
    """Signed length of the component of ``vec`` along ``onto``."""

    return divide(dot(vec, onto), magnitude(onto))


def vector_projection(vec: Sequence[float], onto: Sequence[float]) -> Vector:
    """Projection of ``vec`` onto ``onto``."""

    return scalar_multiply(onto, divide(dot(vec, onto), sqr_magnitude(onto)))


def angle(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    """Angle between two vectors in radians.

    The cosine is clamped into ``[-1, 1]`` because rounding can push e.g.
    ``angle(v, v)`` fractionally past the domain of :func:`math.acos`.
    """

    cosine = divide(dot(lhs, rhs), magnitude(lhs) * magnitude(rhs))
    if math.isnan(cosine):
        return math.nan
    return math.acos(max(-1.0, min(1.0, cosine)))


def is_close(lhs: float, rhs: float, atol: float = DEFAULT_ATOL) -> bool:
    return abs(lhs - rhs) <= atol


def almost_equal(lhs: Sequence[float], rhs: Sequence[float], atol: float = DEFAULT_ATOL) -> bool:
    _check_same_length(lhs, rhs, "almost_equal")
    return all(is_close(a, b, atol) for a, b in zip(lhs, rhs))


# ----------------------------------------------------------------------
# Gram–Schmidt ---------------------------------------------------------
# ----------------------------------------------------------------------
def create_orthogonal_vector(vec: Sequence[float], basis: Iterable[Sequence[float]]) -> Vector:
    """Remove from ``vec`` its components along each vector of ``basis``.

    ``basis`` is assumed pairwise orthogonal.  Each projection is taken from
    the running result rather than the original ``vec`` (modified
    Gram–Schmidt), so the traversal order of ``basis`` affects rounding.
    """

    result = as_vector(vec)
    for base in basis:
        result = subtract(result, vector_projection(result, base))
    return result


def create_orthogonal_basis(vectors: Sequence[Sequence[float]]) -> VectorSet:
    """Orthogonalise a linearly independent vector set, in order.

    Every vector is made orthogonal to all previously *produced* basis
    vectors, not to the original inputs.
    """

    if len(vectors) == 0:
        raise ShapeMismatchError("vector set must contain at least one vector")
    basis: List[Vector] = [as_vector(vectors[0])]
    for vec in vectors[1:]:
        basis.append(create_orthogonal_vector(vec, basis))
    return tuple(basis)


def create_orthonormal_basis(vectors: Sequence[Sequence[float]]) -> VectorSet:
    return tuple(normalize(vec) for vec in create_orthogonal_basis(vectors))


def is_linearly_independent(vectors: Sequence[Sequence[float]]) -> bool:
    """Return ``True`` iff the square vector set has a non-zero determinant."""

    from .matrix import det

    return det(vectors) != 0
