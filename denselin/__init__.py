"""denselin: a dense linear algebra kernel over plain Python tuples.

The package needs no compiled extensions.  Vectors and matrices are tuples
(inputs may be any sequence, ``numpy`` arrays included) and every operation is
a pure function returning new tuples.
"""

import logging

from .config import DEFAULT_ATOL, PIVOT_THRESHOLD
from .errors import DenseLinError, NotSquareError, ShapeMismatchError
from .vector import (
    add,
    almost_equal,
    angle,
    as_vector,
    create_orthogonal_basis,
    create_orthogonal_vector,
    create_orthonormal_basis,
    distance,
    dot,
    hadamard_product,
    is_close,
    is_linearly_independent,
    is_orthogonal,
    magnitude,
    normalize,
    scalar_multiply,
    scalar_projection,
    sqr_magnitude,
    subtract,
    vector_projection,
    zeros,
)
from .matrix import (
    LUDecomposition,
    Rank,
    as_matrix,
    cofactor,
    det,
    generate_matrix,
    lu_decomposition,
    lu_determinant,
    minor,
    multiply,
    rank,
    remove_column,
    remove_row,
    submatrix,
    trace,
    transpose,
)
from .matrix import add as matrix_add
from .matrix import scalar_multiply as matrix_scalar_multiply
from .matrix import subtract as matrix_subtract
from .vector3 import (
    area_of_parallelogram,
    cross_product,
    equation_of_plane,
    is_parallel,
    scalar_triple_product,
    volume_of_parallelepiped,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_ATOL",
    "PIVOT_THRESHOLD",
    "DenseLinError",
    "ShapeMismatchError",
    "NotSquareError",
    "as_vector",
    "zeros",
    "add",
    "subtract",
    "scalar_multiply",
    "dot",
    "hadamard_product",
    "sqr_magnitude",
    "magnitude",
    "normalize",
    "distance",
    "is_orthogonal",
    "scalar_projection",
    "vector_projection",
    "angle",
    "is_close",
    "almost_equal",
    "create_orthogonal_vector",
    "create_orthogonal_basis",
    "create_orthonormal_basis",
    "is_linearly_independent",
    "Rank",
    "LUDecomposition",
    "as_matrix",
    "rank",
    "matrix_add",
    "matrix_subtract",
    "matrix_scalar_multiply",
    "transpose",
    "multiply",
    "remove_row",
    "remove_column",
    "submatrix",
    "minor",
    "cofactor",
    "det",
    "trace",
    "generate_matrix",
    "lu_decomposition",
    "lu_determinant",
    "cross_product",
    "is_parallel",
    "equation_of_plane",
    "area_of_parallelogram",
    "scalar_triple_product",
    "volume_of_parallelepiped",
]
