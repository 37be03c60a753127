"""Exceptions raised by :mod:`denselin`.

Only shape problems are raised.  Degenerate numerics (a zero magnitude, a zero
pivot) are not errors: they surface as ``inf``/``nan`` in the result.
"""

from __future__ import annotations

from typing import Optional


class DenseLinError(Exception):
    """Base class for all errors raised by the package."""


class ShapeMismatchError(DenseLinError, ValueError):
    """Operands have incompatible dimensions.

    ``expected`` and ``actual`` hold the offending sizes when the caller that
    detected the mismatch knows them.
    """

    def __init__(self, message: str, expected: Optional[object] = None, actual: Optional[object] = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(ShapeMismatchError):
    """A square matrix (or square vector set) was required."""
