# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from fractions import Fraction

import numpy as np
import pytest

from densematrix import ContractViolation, Matrix


def test_filled_construction():
    A = Matrix(2, 3, 7)
    assert A.shape == (2, 3)
    assert A.to_list() == [[7, 7, 7], [7, 7, 7]]


def test_default_is_empty():
    A = Matrix()
    assert A.shape == (0, 0)
    assert A.to_list() == []


def test_negative_dimensions_fault():
    with pytest.raises(ContractViolation):
        Matrix(-1, 2)
    with pytest.raises(ContractViolation):
        Matrix.from_flat([], 0, -3)


def test_from_rows_is_row_major():
    A = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert A.shape == (2, 3)
    assert A.to_numpy().ravel().tolist() == [1, 2, 3, 4, 5, 6]
    assert A[1, 0] == 4


def test_from_rows_ragged_faults():
    with pytest.raises(ContractViolation):
        Matrix.from_rows([[1, 2], [3]])


def test_from_rows_empty_outer():
    assert Matrix.from_rows([]).shape == (0, 0)
    assert Matrix.from_rows([[]]).shape == (1, 0)


def test_from_rows_copies_input():
    rows = [[1, 2], [3, 4]]
    A = Matrix.from_rows(rows)
    rows[0][0] = 100
    assert A[0, 0] == 1


def test_from_flat():
    data = [1, 2, 3, 4, 5, 6]
    A = Matrix.from_flat(data, 3, 2)
    assert A.to_list() == [[1, 2], [3, 4], [5, 6]]
    data[0] = -1
    assert A[0, 0] == 1


def test_from_flat_length_mismatch_faults():
    with pytest.raises(ContractViolation):
        Matrix.from_flat([1, 2, 3], 2, 2)


def test_identity():
    assert Matrix.identity(3).to_list() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    eye = Matrix.identity(2, one=Fraction(1), zero=Fraction(0))
    assert eye[1, 1] == Fraction(1)


def test_numpy_interop():
    arr = np.arange(12, dtype=float).reshape(3, 4)
    A = Matrix.from_numpy(arr)
    assert A.shape == (3, 4)
    assert A[2, 1] == 9.0
    np.testing.assert_array_equal(A.to_numpy(), arr)


def test_from_numpy_rejects_vectors():
    with pytest.raises(ContractViolation):
        Matrix.from_numpy(np.arange(3))


def test_equality_and_hash():
    A = Matrix.from_rows([[1, 2], [3, 4]])
    assert A == Matrix.from_rows([[1, 2], [3, 4]])
    assert A != Matrix.from_rows([[1, 2, 3, 4]])
    assert A != 1
    with pytest.raises(TypeError):
        hash(A)


def test_repr_shows_shape_and_rows():
    text = repr(Matrix.from_rows([[1, 2]]))
    assert text == "Matrix(rows=1, cols=2, data=[[1, 2]])"


@pytest.mark.parametrize("rows,cols", [(2.7, 3), (2, 3.0), ("2", 3)])
def test_non_integer_dimensions_fault(rows, cols):
    with pytest.raises(ContractViolation):
        Matrix(rows, cols)
    with pytest.raises(ContractViolation):
        Matrix.random(rows, cols, 1.0)


def test_from_flat_non_integer_dimensions_fault():
    with pytest.raises(ContractViolation):
        Matrix.from_flat([1, 2, 3, 4, 5, 6], 2.0, 3)


def test_numpy_integer_dimensions():
    assert Matrix(np.int64(2), np.int32(3)).shape == (2, 3)


def test_filled_cells_do_not_share_initial():
    A = Matrix(2, 2, [])
    A[0, 0].append(1)
    assert A[0, 0] == [1]
    assert A[1, 1] == []


def test_zeros():
    Z = Matrix.zeros(2, 3)
    assert Z == Matrix(2, 3, 0)
    assert Matrix.zeros(1, 2, zero=0.0).to_list() == [[0.0, 0.0]]
