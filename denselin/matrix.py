"""Matrix kernel: structural helpers, cofactor determinant and LU decomposition.

Matrices are tuples of row tuples.  Row arithmetic is delegated to
:mod:`denselin.vector`, so the same shape rules apply: mismatched operands
raise :class:`~denselin.errors.ShapeMismatchError`, operations that need a
square matrix raise :class:`~denselin.errors.NotSquareError`, and divisions by
zero surface as ``inf``/``nan`` instead of exceptions.

Row and column indices taken by :func:`remove_row`, :func:`remove_column`,
:func:`submatrix`, :func:`minor` and :func:`cofactor` are 1-based, matching the
usual mathematical notation :math:`A_{ij}`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Tuple

from .config import PIVOT_THRESHOLD
from .errors import NotSquareError, ShapeMismatchError
from .vector import Vector, as_vector, divide, dot, zeros
from . import vector as _vector

logger = logging.getLogger(__name__)


Matrix = Tuple[Vector, ...]


@dataclass(frozen=True)
class Rank:
    """Shape of a matrix; not the algebraic rank."""

    rows: int
    columns: int


@dataclass(frozen=True)
class LUDecomposition:
    """Factors of a row-permuted matrix: ``l @ u == P @ A``.

    ``l`` is unit lower triangular and ``u`` upper triangular.  The row
    permutation ``P`` applied while pivoting is not kept.
    """

    l: Matrix  # noqa: E741
    u: Matrix


def as_matrix(rows: Iterable[Iterable[float]]) -> Matrix:
    """Convert *rows* into the canonical matrix representation.

    Empty input and rows of differing width raise
    :class:`~denselin.errors.ShapeMismatchError`.
    """

    converted: List[Vector] = [as_vector(row) for row in rows]
    if not converted:
        raise ShapeMismatchError("matrix must contain at least one row")
    width = len(converted[0])
    for row in converted:
        if len(row) != width:
            raise ShapeMismatchError("inconsistent row width", expected=width, actual=len(row))
    return tuple(converted)


def _require_square(matrix: Sequence[Sequence[float]], operation: str) -> None:
    size = len(matrix)
    if size == 0:
        raise NotSquareError(f"{operation} requires a non-empty square matrix")
    for row in matrix:
        if len(row) != size:
            raise NotSquareError(
                f"{operation} requires a square matrix, got a row of width {len(row)} in a {size}-row matrix",
                expected=size,
                actual=len(row),
            )


def _check_same_rows(lhs: Sequence[Sequence[float]], rhs: Sequence[Sequence[float]], operation: str) -> None:
    if len(lhs) != len(rhs):
        raise ShapeMismatchError(
            f"row count mismatch in {operation}: {len(lhs)} != {len(rhs)}",
            expected=len(lhs),
            actual=len(rhs),
        )


def rank(matrix: Sequence[Sequence[float]]) -> Rank:
    return Rank(rows=len(matrix), columns=len(matrix[0]))


def add(lhs: Sequence[Sequence[float]], rhs: Sequence[Sequence[float]]) -> Matrix:
    _check_same_rows(lhs, rhs, "add")
    return tuple(_vector.add(a, b) for a, b in zip(lhs, rhs))


def subtract(lhs: Sequence[Sequence[float]], rhs: Sequence[Sequence[float]]) -> Matrix:
    _check_same_rows(lhs, rhs, "subtract")
    return tuple(_vector.subtract(a, b) for a, b in zip(lhs, rhs))


def scalar_multiply(matrix: Sequence[Sequence[float]], scalar: float) -> Matrix:
    return tuple(_vector.scalar_multiply(row, scalar) for row in matrix)


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    if len(matrix) == 0:
        return ()
    height = len(matrix)
    width = len(matrix[0])
    cols: List[List[float]] = [[0] * height for _ in range(width)]
    for i, row in enumerate(matrix):
        if len(row) != width:
            raise ShapeMismatchError("inconsistent row width in transpose", expected=width, actual=len(row))
        for j, value in enumerate(row):
            cols[j][i] = value
    return tuple(tuple(col) for col in cols)


def multiply(lhs: Sequence[Sequence[float]], rhs: Sequence[Sequence[float]]) -> Matrix:
    """Matrix product; ``lhs`` must have as many columns as ``rhs`` has rows."""

    if len(lhs) == 0:
        return ()
    if len(lhs[0]) != len(rhs):
        raise ShapeMismatchError(
            f"dimension mismatch in multiply: {len(lhs[0])} columns against {len(rhs)} rows",
            expected=len(lhs[0]),
            actual=len(rhs),
        )
    rhs_t = transpose(rhs)
    result_rows: List[Vector] = []
    for row in lhs:
        result_rows.append(tuple(dot(row, col) for col in rhs_t))
    return tuple(result_rows)


def remove_row(matrix: Sequence[Sequence[float]], i: int) -> Matrix:
    if not 1 <= i <= len(matrix):
        raise IndexError(f"row index {i} out of range for a {len(matrix)}-row matrix")
    return tuple(tuple(row) for index, row in enumerate(matrix, start=1) if index != i)


def remove_column(matrix: Sequence[Sequence[float]], j: int) -> Matrix:
    rows: List[Vector] = []
    for row in matrix:
        if not 1 <= j <= len(row):
            raise IndexError(f"column index {j} out of range for a row of width {len(row)}")
        rows.append(tuple(row[: j - 1]) + tuple(row[j:]))
    return tuple(rows)


def submatrix(matrix: Sequence[Sequence[float]], i: int, j: int) -> Matrix:
    """The ``(i, j)`` submatrix: ``matrix`` without row ``i`` and column ``j``."""

    return remove_column(remove_row(matrix, i), j)


# ----------------------------------------------------------------------
# Cofactor expansion ---------------------------------------------------
# ----------------------------------------------------------------------
def _det(matrix: Sequence[Sequence[float]]) -> float:
    if len(matrix) == 0:
        return 1
    if len(matrix) == 1:
        return matrix[0][0]
    return sum(element * _cofactor(matrix, 1, column) for column, element in enumerate(matrix[0], start=1))


def _cofactor(matrix: Sequence[Sequence[float]], i: int, j: int) -> float:
    return (-1) ** (i + j) * _det(submatrix(matrix, i, j))


def det(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant by Laplace expansion along the first row.

    Runs in O(n!) time; :func:`lu_determinant` is the polynomial alternative
    for larger matrices.
    """

    _require_square(matrix, "det")
    matrix = as_matrix(matrix)
    logger.debug("cofactor expansion of a %dx%d matrix", len(matrix), len(matrix))
    return _det(matrix)


def minor(matrix: Sequence[Sequence[float]], i: int, j: int) -> float:
    _require_square(matrix, "minor")
    return _det(submatrix(matrix, i, j))


def cofactor(matrix: Sequence[Sequence[float]], i: int, j: int) -> float:
    _require_square(matrix, "cofactor")
    return _cofactor(matrix, i, j)


def trace(matrix: Sequence[Sequence[float]]) -> float:
    if len(matrix) == 0:
        return 0
    return sum(matrix[i][i] for i in range(min(len(matrix), len(matrix[0]))))


def generate_matrix(generator: Callable[[int, int], float], rows: int, columns: int) -> Matrix:
    """Build a ``rows x columns`` matrix whose ``(i, j)`` entry (1-based) is ``generator(i, j)``."""

    return tuple(tuple(generator(i, j) for j in range(1, columns + 1)) for i in range(1, rows + 1))


# ----------------------------------------------------------------------
# LU decomposition -----------------------------------------------------
# ----------------------------------------------------------------------
def _lu_factor(matrix: Sequence[Sequence[float]], pivot_threshold: float) -> Tuple[Matrix, Matrix, Tuple[int, ...]]:
    """Eliminate ``matrix`` one leading column at a time.

    Each pending row carries its original index and the multipliers recorded
    for it so far, so reordering a later submatrix also reorders the
    already-computed part of ``L``.  Returns ``(L, U, order)`` where ``order``
    lists the original row index of each row of ``L @ U``.
    """

    size = len(matrix)
    pending: List[Tuple[int, Vector, Vector]] = [(index, (), as_vector(row)) for index, row in enumerate(matrix)]
    lower: List[Vector] = []
    upper: List[Vector] = []
    order: List[int] = []
    step = 0
    while pending:
        lead = pending[0][2][0]
        if lead == 0 or abs(lead) < pivot_threshold:
            pending = sorted(pending, key=lambda entry: -abs(entry[2][0]))
            logger.debug("step %d: pivot %r below threshold, reordered remaining rows", step, lead)
            if abs(pending[0][2][0]) < pivot_threshold:
                logger.debug("step %d: no row clears the pivot threshold, continuing with %r", step, pending[0][2][0])
        index, multipliers, pivot_row = pending[0]
        pivot = pivot_row[0]
        upper.append(zeros(step) + pivot_row)
        lower.append(multipliers + (1,) + zeros(size - step - 1))
        order.append(index)

        reduced: List[Tuple[int, Vector, Vector]] = []
        for other_index, other_multipliers, row in pending[1:]:
            factor = divide(row[0], pivot)
            remainder = _vector.subtract(row[1:], _vector.scalar_multiply(pivot_row[1:], factor))
            reduced.append((other_index, other_multipliers + (factor,), remainder))
        pending = reduced
        step += 1
    return tuple(lower), tuple(upper), tuple(order)


def lu_decomposition(matrix: Sequence[Sequence[float]], pivot_threshold: float = PIVOT_THRESHOLD) -> LUDecomposition:
    """LU decomposition with partial pivoting.

    Whenever the leading entry of the remaining submatrix is zero or smaller
    in magnitude than ``pivot_threshold``, the remaining rows are stably
    sorted by descending absolute leading entry.  This happens once per step;
    if no row clears the threshold the elimination proceeds with the small
    pivot, and a zero pivot yields ``inf``/``nan`` multipliers.
    """

    _require_square(matrix, "lu_decomposition")
    matrix = as_matrix(matrix)
    lower, upper, _ = _lu_factor(matrix, pivot_threshold)
    return LUDecomposition(l=lower, u=upper)


def _permutation_sign(order: Sequence[int]) -> int:
    inversions = sum(1 for a in range(len(order)) for b in range(a + 1, len(order)) if order[a] > order[b])
    return -1 if inversions % 2 else 1


def lu_determinant(matrix: Sequence[Sequence[float]], pivot_threshold: float = PIVOT_THRESHOLD) -> float:
    """Determinant from the LU factors: the diagonal product of ``U`` times the pivoting sign."""

    _require_square(matrix, "lu_determinant")
    matrix = as_matrix(matrix)
    _, upper, order = _lu_factor(matrix, pivot_threshold)
    return _permutation_sign(order) * math.prod(row[i] for i, row in enumerate(upper))
