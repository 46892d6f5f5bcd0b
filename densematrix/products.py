# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix products, transpose and the main diagonal
"""

from typing import TYPE_CHECKING, Any, List, Sequence

import numpy as np

from .utils import require, zero_of

if TYPE_CHECKING:
    from .matrix import Matrix


def matmul(A: "Matrix", B: "Matrix") -> "Matrix":
    """
    Matrix product C = A B using plain triple-loop summation.

    The loops run i -> k -> j rather than the textbook i -> j -> k. With
    (i, k) fixed, a[i, k] is hoisted out and the inner loop walks row k of
    B and row i of C front to back, so both streams are contiguous in the
    row-major storage.

    Parameters
    ----------
    A : (m, n) Matrix
    B : (n, p) Matrix

    Returns
    -------
    C : (m, p) Matrix

    Raises
    ------
    ContractViolation : if A.cols != B.rows
    """
    require(
        A.cols == B.rows,
        f"matmul: inner dimensions differ, {A.shape} x {B.shape}",
    )
    m, n = A.shape
    p = B.cols
    a, b = A._data, B._data
    out = [zero_of(a, b)] * (m * p)

    for i in range(m):
        a_off = i * n
        out_off = i * p
        for k in range(n):
            aik = a[a_off + k]
            # raw offsets, this is the hot loop
            b_off = k * p
            for j in range(p):
                out[out_off + j] += aik * b[b_off + j]

    return A._adopt(out, m, p)


def matvec(A: "Matrix", x: Sequence[Any]) -> List[Any]:
    """
    Matrix-vector product y = A x.

    Returns
    -------
    y : list of length A.rows

    Raises
    ------
    ContractViolation : if x is not flat or its length differs from A.cols
    """
    require(
        getattr(x, "ndim", 1) == 1
        and not any(isinstance(v, (Sequence, np.ndarray)) for v in x),
        f"matvec: expected a flat vector, got {type(x).__name__} "
        f"with ndim={getattr(x, 'ndim', 'n/a')}",
    )
    require(
        len(x) == A.cols,
        f"matvec: vector has length {len(x)}, expected {A.cols}",
    )
    m, n = A.shape
    a = A._data
    zero = zero_of(a, x)
    y = []
    for i in range(m):
        off = i * n
        acc = zero
        for j in range(n):
            acc += a[off + j] * x[j]
        y.append(acc)
    return y


def transpose(A: "Matrix") -> "Matrix":
    """Return a new (cols, rows) matrix with T[j, i] = A[i, j]."""
    m, n = A.shape
    a = A._data
    return A._adopt([a[i * n + j] for j in range(n) for i in range(m)], n, m)


def diag_vec(A: "Matrix") -> List[Any]:
    m, n = A.shape
    return [A._data[i * n + i] for i in range(min(m, n))]
