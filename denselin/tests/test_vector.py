from __future__ import annotations

import math

import numpy as np
import pytest

from denselin.errors import NotSquareError, ShapeMismatchError
from denselin.matrix import det
from denselin.vector import (
    add,
    almost_equal,
    angle,
    create_orthogonal_basis,
    create_orthogonal_vector,
    create_orthonormal_basis,
    distance,
    divide,
    dot,
    hadamard_product,
    is_linearly_independent,
    is_orthogonal,
    magnitude,
    normalize,
    scalar_multiply,
    scalar_projection,
    sqr_magnitude,
    subtract,
    vector_projection,
)


def test_elementwise_arithmetic():
    assert add([1, 2, 3], [4, 5, 6]) == (5, 7, 9)
    assert subtract([1, 2, 3], [4, 5, 6]) == (-3, -3, -3)
    assert scalar_multiply([1, -2, 3], 2.5) == (2.5, -5.0, 7.5)
    assert hadamard_product([1, 2, 3], [4, 5, 6]) == (4, 10, 18)


def test_inputs_are_not_mutated():
    u = [1, 2, 3]
    v = [3, 2, 1]
    add(u, v)
    normalize(u)
    assert u == [1, 2, 3]
    assert v == [3, 2, 1]


@pytest.mark.parametrize("operation", [add, subtract, dot, hadamard_product])
def test_mismatched_lengths_raise(operation):
    with pytest.raises(ShapeMismatchError) as info:
        operation([1, 2, 3], [1, 2])
    assert info.value.expected == 3
    assert info.value.actual == 2


def test_shape_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        add([1], [1, 2])


def test_dot_of_empty_vectors_is_zero():
    assert dot([], []) == 0


def test_magnitude_and_normalize():
    assert sqr_magnitude([1, 2, 3, 4]) == 30
    assert round(magnitude([1, 2, 3, 4]), 10) == 5.4772255751
    expected = [0.1825741858, 0.3651483717, 0.5477225575, 0.7302967433]
    assert [round(v, 10) for v in normalize([1, 2, 3, 4])] == expected


def test_normalize_zero_vector_is_not_finite():
    result = normalize([0, 0, 0])
    assert len(result) == 3
    assert all(math.isnan(v) for v in result)


def test_divide_follows_ieee_semantics():
    assert divide(3, 2) == 1.5
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert divide(1.0, -0.0) == -math.inf
    assert math.isnan(divide(0, 0))


def test_distance():
    assert distance([1, 1], [4, 5]) == 5.0


def test_is_orthogonal_is_exact():
    assert is_orthogonal([1, 0], [0, 1])
    assert is_orthogonal([1, 2, -1], [1, 0, 1])
    assert not is_orthogonal([1, 1], [1, 0])


def test_projections():
    assert scalar_projection([3, 4], [0, 2]) == 4.0
    assert vector_projection([3, 4], [1, 0]) == (3.0, 0.0)
    assert vector_projection([2, 2], [0, 5]) == (0.0, 2.0)


def test_projection_onto_zero_vector_is_not_finite():
    assert math.isnan(scalar_projection([1, 2], [0, 0]))
    assert all(math.isnan(v) for v in vector_projection([1, 2], [0, 0]))


def test_angle():
    assert np.isclose(angle([1, 0], [0, 1]), math.pi / 2)
    assert np.isclose(angle([1, 0], [-1, 0]), math.pi)
    assert np.isclose(angle([1, 1], [1, 0]), math.pi / 4)


def test_angle_of_vector_with_itself_stays_in_domain():
    assert angle([0.1, 0.2, 0.3], [0.1, 0.2, 0.3]) == pytest.approx(0.0, abs=1e-7)


def test_angle_with_zero_vector_is_nan():
    assert math.isnan(angle([0, 0], [1, 0]))


def test_almost_equal():
    assert almost_equal([1.0, 2.0], [1.0 + 1e-12, 2.0])
    assert not almost_equal([1.0, 2.0], [1.0, 2.1])


def test_almost_equal_rejects_mismatched_lengths():
    with pytest.raises(ShapeMismatchError):
        almost_equal([1.0, 0.0], [1.0])


def test_create_orthogonal_vector_removes_basis_components():
    assert create_orthogonal_vector([1, 1], [[1, 0]]) == (0.0, 1.0)
    assert create_orthogonal_vector([3, 4, 5], []) == (3, 4, 5)


def test_create_orthogonal_vector_projects_the_running_result():
    # Against a non-orthogonal basis the classical variant would give (-0.5, -0.5).
    assert create_orthogonal_vector([1, 0], [[1, 0], [1, 1]]) == (0.0, 0.0)
    assert create_orthogonal_vector([2, 3, 4], [[1, 0, 0], [0, 1, 0]]) == (0.0, 0.0, 4.0)


def test_create_orthogonal_basis_known_values():
    basis = create_orthogonal_basis([[1, 1, 1], [2, 1, 0], [5, 1, 3]])
    assert basis == ((1, 1, 1), (1.0, 0.0, -1.0), (1.0, -2.0, 1.0))


def test_orthogonal_basis_is_pairwise_orthogonal():
    vectors = [[3, 1, 0, 2], [1, 4, 1, 0], [0, 2, 5, 1], [2, 0, 1, 6]]
    basis = create_orthogonal_basis(vectors)
    assert len(basis) == 4
    for i in range(len(basis)):
        for j in range(i + 1, len(basis)):
            assert np.isclose(dot(basis[i], basis[j]), 0.0, atol=1e-9)


def test_orthonormal_basis_has_unit_pairwise_orthogonal_vectors():
    basis = create_orthonormal_basis([[1, 1, 1], [2, 1, 0], [5, 1, 3]])
    assert len(basis) == 3
    for vec in basis:
        assert np.isclose(magnitude(vec), 1.0)
    for i in range(3):
        for j in range(i + 1, 3):
            assert np.isclose(dot(basis[i], basis[j]), 0.0, atol=1e-12)
    assert np.allclose(basis[0], np.ones(3) / math.sqrt(3))


def test_orthogonal_basis_rejects_empty_set():
    with pytest.raises(ShapeMismatchError):
        create_orthogonal_basis([])


def test_orthogonal_basis_rejects_mixed_dimensions():
    with pytest.raises(ShapeMismatchError):
        create_orthogonal_basis([[1, 0, 0], [0, 1]])


def test_is_linearly_independent():
    assert is_linearly_independent([[1, 1, 1], [2, 1, 0], [5, 1, 3]])
    assert not is_linearly_independent([[1, 2], [2, 4]])
    assert not is_linearly_independent([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.mark.parametrize(
    "vectors",
    [
        [[1, 0], [0, 1]],
        [[2, 4], [1, 2]],
        [[6, 1, 1], [4, -2, 5], [2, 8, 7]],
        [[1, 2, 3], [2, 4, 6], [0, 1, 1]],
    ],
)
def test_linear_independence_matches_determinant(vectors):
    assert is_linearly_independent(vectors) == (det(vectors) != 0)


def test_linear_independence_requires_square_set():
    with pytest.raises(NotSquareError):
        is_linearly_independent([[1, 2, 3], [4, 5, 6]])


def test_numpy_arrays_are_accepted():
    assert is_linearly_independent(np.eye(3))
    assert not is_linearly_independent(np.array([[1.0, 2.0], [2.0, 4.0]]))
    assert dot(np.array([1, 2, 3]), np.array([4, 5, 6])) == 32
