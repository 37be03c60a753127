"""Numeric constants shared across the kernels.

Every function that consumes one of these also accepts it as a keyword
argument, so callers override per call rather than by mutating the module.
"""

# Leading entries with a smaller magnitude trigger a row reordering in
# :func:`denselin.matrix.lu_decomposition`.
PIVOT_THRESHOLD = 1e-3

DEFAULT_ATOL = 1e-9
