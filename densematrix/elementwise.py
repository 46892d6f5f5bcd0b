# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise operations: sums, differences, Hadamard products,
broadcasting addition and scalar/functional maps.
"""

from typing import TYPE_CHECKING, Any, Callable

from .exceptions import ContractViolation
from .utils import require

if TYPE_CHECKING:
    from .matrix import Matrix


def _check_same_shape(A: "Matrix", B: "Matrix", op: str) -> None:
    require(
        A.shape == B.shape,
        f"{op}: shape mismatch {A.shape} vs {B.shape}",
    )


def add(A: "Matrix", B: "Matrix") -> "Matrix":
    _check_same_shape(A, B, "add")
    return A._adopt([a + b for a, b in zip(A._data, B._data)], A.rows, A.cols)


def subtract(A: "Matrix", B: "Matrix") -> "Matrix":
    _check_same_shape(A, B, "subtract")
    return A._adopt([a - b for a, b in zip(A._data, B._data)], A.rows, A.cols)


def hadamard(A: "Matrix", B: "Matrix") -> "Matrix":
    """Elementwise product of two equally shaped matrices."""
    _check_same_shape(A, B, "hadamard")
    return A._adopt([a * b for a, b in zip(A._data, B._data)], A.rows, A.cols)


def add_in_place(A: "Matrix", B: "Matrix") -> "Matrix":
    _check_same_shape(A, B, "add_in_place")
    A._data[:] = [a + b for a, b in zip(A._data, B._data)]
    return A


def subtract_in_place(A: "Matrix", B: "Matrix") -> "Matrix":
    _check_same_shape(A, B, "subtract_in_place")
    A._data[:] = [a - b for a, b in zip(A._data, B._data)]
    return A


def hadamard_in_place(A: "Matrix", B: "Matrix") -> "Matrix":
    _check_same_shape(A, B, "hadamard_in_place")
    A._data[:] = [a * b for a, b in zip(A._data, B._data)]
    return A


def broadcast_add(A: "Matrix", B: "Matrix") -> "Matrix":
    """
    A + B with single-row broadcasting.

    The shape cases are tried in this order:

    1. equal shapes          -> plain elementwise sum
    2. B is (1, A.cols)      -> B's row is added to every row of A
    3. A is (1, B.cols)      -> A's row is added to every row of B

    Operand order is kept in every case (left + right), which matters for
    element types whose addition does not commute. Column-vector
    broadcasting is not supported.

    Raises
    ------
    ContractViolation : if none of the three cases applies.
    """
    if A.shape == B.shape:
        return add(A, B)

    if B.rows == 1 and B.cols == A.cols:
        m, n = A.shape
        row = B._data
        out = []
        for i in range(m):
            off = i * n
            out.extend([a + b for a, b in zip(A._data[off : off + n], row)])
        return A._adopt(out, m, n)

    if A.rows == 1 and A.cols == B.cols:
        m, n = B.shape
        row = A._data
        out = []
        for i in range(m):
            off = i * n
            out.extend([a + b for a, b in zip(row, B._data[off : off + n])])
        return A._adopt(out, m, n)

    raise ContractViolation(
        f"add: shapes {A.shape} and {B.shape} are incompatible "
        "(no broadcasting available)"
    )


def scalar_op(
    A: "Matrix", s: Any, op: Callable[[Any, Any], Any], reflected: bool = False
) -> "Matrix":
    """
    Apply ``op(element, s)`` to every element (``op(s, element)`` when
    `reflected`) and return the result as a new matrix of A's shape.
    """
    if reflected:
        data = [op(s, v) for v in A._data]
    else:
        data = [op(v, s) for v in A._data]
    return A._adopt(data, A.rows, A.cols)


def scalar_op_in_place(A: "Matrix", s: Any, op: Callable[[Any, Any], Any]) -> "Matrix":
    A._data[:] = [op(v, s) for v in A._data]
    return A


def apply(A: "Matrix", fn: Callable[[Any], Any]) -> "Matrix":
    return A._adopt([fn(v) for v in A._data], A.rows, A.cols)


def apply_in_place(A: "Matrix", fn: Callable[[Any], Any]) -> "Matrix":
    A._data[:] = [fn(v) for v in A._data]
    return A
