# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense row-major matrix over a generic numeric element type.
"""

import logging
import operator
from copy import copy as copy_value
from copy import deepcopy
from numbers import Integral
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from . import elementwise, products
from .rng import resolve_rng
from .utils import T, require, require_shape

logger = logging.getLogger(__name__)


def _is_vector(obj: Any) -> bool:
    if isinstance(obj, np.ndarray):
        # 0-d arrays are scalars; matvec rejects anything but 1-D
        return obj.ndim > 0
    return isinstance(obj, Sequence) and not isinstance(obj, str)


def _as_scalar(obj: Any) -> Any:
    if isinstance(obj, np.ndarray) and obj.ndim == 0:
        return obj.item()
    return obj


class Matrix(Generic[T]):
    """
    Dense matrix of ``rows * cols`` elements stored as one flat list in
    row-major order: element (i, j) lives at offset ``i * cols + j``.

    Each Matrix owns its list outright. Binary operators read their inputs
    and return a fresh Matrix; the in-place operators and the ``*_in_place``
    methods mutate ``self`` and return it so calls can be chained.

    Operators
    ---------
    A + B      broadcasting addition (see elementwise.broadcast_add)
    A - B      elementwise difference
    A * B      matrix product (also A @ B)
    A * v      matrix-vector product, v a flat sequence -> list
    A op s     scalar + - * / applied to every element

    Precondition failures raise ContractViolation.
    """

    # make NumPy scalars/arrays defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, rows: int = 0, cols: int = 0, initial: Any = 0) -> None:
        require_shape(rows, cols)
        self._rows = int(rows)
        self._cols = int(cols)
        # one copy per cell so mutable elements are not shared
        self._data: List[T] = [
            copy_value(initial) for _ in range(self._rows * self._cols)
        ]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _adopt(cls, data: List[Any], rows: int, cols: int) -> "Matrix":
        """Wrap `data` without copying. The caller must give up `data`."""
        obj = cls.__new__(cls)
        obj._rows = rows
        obj._cols = cols
        obj._data = data
        return obj

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[T]]) -> "Matrix[T]":
        """
        Build a matrix from a sequence of equally long rows.

        An empty outer sequence gives a 0x0 matrix.

        Raises
        ------
        ContractViolation : if the rows differ in length.
        """
        nested = [list(r) for r in rows]
        if not nested:
            return cls()
        n = len(nested[0])
        data: List[T] = []
        for i, row in enumerate(nested):
            require(
                len(row) == n,
                f"row {i} has {len(row)} columns, expected {n}",
            )
            data.extend(row)
        return cls._adopt(data, len(nested), n)

    @classmethod
    def from_flat(cls, data: Iterable[T], rows: int, cols: int) -> "Matrix[T]":
        """Copy an already row-major flat sequence into a (rows, cols) matrix."""
        flat = list(data)
        require_shape(rows, cols)
        require(
            len(flat) == rows * cols,
            f"flat data has {len(flat)} elements, expected {rows} * {cols}",
        )
        return cls._adopt(flat, rows, cols)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        max_weight: float,
        rng: Optional[np.random.Generator] = None,
    ) -> "Matrix[float]":
        """
        Matrix of i.i.d. draws from U[-max_weight, max_weight].

        Parameters
        ----------
        rows, cols : int
            Shape of the result.
        max_weight : float
            Bound of the symmetric interval, must be >= 0.
        rng : np.random.Generator | None
            Source of randomness. None uses the process-wide generator
            from densematrix.rng, which is seeded once and keeps
            advancing across calls (no per-call reseed).

        Returns
        -------
        Matrix with Python float elements
        """
        require_shape(rows, cols)
        require(max_weight >= 0, f"max_weight must be >= 0, got {max_weight}")
        gen = resolve_rng(rng)
        logger.debug(
            "random init %dx%d in [-%s, %s] (%s generator)",
            rows,
            cols,
            max_weight,
            max_weight,
            "default" if rng is None else "injected",
        )
        draws = gen.uniform(-max_weight, max_weight, size=rows * cols)
        return cls._adopt(draws.tolist(), rows, cols)

    @classmethod
    def identity(cls, n: int, one: Any = 1, zero: Any = 0) -> "Matrix":
        eye = cls(n, n, zero)
        for i in range(n):
            eye._data[i * n + i] = one
        return eye

    @classmethod
    def zeros(cls, rows: int, cols: int, zero: Any = 0) -> "Matrix":
        return cls(rows, cols, zero)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        """Copy a 2-D array; elements become Python scalars."""
        arr = np.asarray(array)
        require(arr.ndim == 2, f"expected a 2-D array, got ndim={arr.ndim}")
        m, n = arr.shape
        return cls._adopt(arr.ravel(order="C").tolist(), m, n)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------
    def copy(self) -> "Matrix[T]":
        return self._adopt(list(self._data), self._rows, self._cols)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix[T]":
        return self._adopt(deepcopy(self._data, memo), self._rows, self._cols)

    def assign(self, other: "Matrix[T]") -> "Matrix[T]":
        """Copy-assign `other` into self. Assigning a matrix to itself does nothing."""
        if other is not self:
            self._rows = other._rows
            self._cols = other._cols
            self._data = list(other._data)
        return self

    def take(self) -> "Matrix[T]":
        """
        Move this matrix's storage into a new Matrix and leave self as 0x0.
        """
        moved = self._adopt(self._data, self._rows, self._cols)
        logger.debug("moved %dx%d storage out", self._rows, self._cols)
        self._rows, self._cols, self._data = 0, 0, []
        return moved

    def move_from(self, other: "Matrix[T]") -> "Matrix[T]":
        """
        Take over `other`'s storage, leaving `other` as 0x0.
        Moving a matrix into itself does nothing.
        """
        if other is not self:
            logger.debug("moving %dx%d storage in", other._rows, other._cols)
            self._rows, self._cols, self._data = other._rows, other._cols, other._data
            other._rows, other._cols, other._data = 0, 0, []
        return self

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def get_rows(self) -> int:
        return self._rows

    def get_cols(self) -> int:
        return self._cols

    def _offset(self, key: Any) -> int:
        require(
            isinstance(key, tuple) and len(key) == 2,
            f"matrix index must be a (row, col) pair, got {key!r}",
        )
        row, col = key
        require(
            isinstance(row, Integral) and isinstance(col, Integral),
            f"matrix indices must be integers, got {key!r}",
        )
        require(
            0 <= row < self._rows and 0 <= col < self._cols,
            f"index ({row}, {col}) out of bounds for shape {self.shape}",
        )
        return int(row) * self._cols + int(col)

    def __getitem__(self, key: Tuple[int, int]) -> T:
        return self._data[self._offset(key)]

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        self._data[self._offset(key)] = value

    def diag_vec(self) -> List[T]:
        """Main diagonal, length min(rows, cols)."""
        return products.diag_vec(self)

    def to_list(self) -> List[List[T]]:
        n = self._cols
        return [self._data[i * n : (i + 1) * n] for i in range(self._rows)]

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._cols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(rows={self._rows}, cols={self._cols}, "
            f"data={self.to_list()!r})"
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other):
        if isinstance(other, Matrix):
            return elementwise.broadcast_add(self, other)
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(self, _as_scalar(other), operator.add)

    def __radd__(self, other):
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(
            self, _as_scalar(other), operator.add, reflected=True
        )

    def __iadd__(self, other):
        if isinstance(other, Matrix):
            return elementwise.add_in_place(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return elementwise.subtract(self, other)
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(self, _as_scalar(other), operator.sub)

    def __rsub__(self, other):
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(
            self, _as_scalar(other), operator.sub, reflected=True
        )

    def __isub__(self, other):
        if isinstance(other, Matrix):
            return elementwise.subtract_in_place(self, other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return products.matmul(self, other)
        if isinstance(other, str):
            return NotImplemented
        if _is_vector(other):
            return products.matvec(self, other)
        return elementwise.scalar_op(self, _as_scalar(other), operator.mul)

    def __rmul__(self, other):
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(
            self, _as_scalar(other), operator.mul, reflected=True
        )

    def __imul__(self, other):
        if isinstance(other, Matrix):
            return self.move_from(products.matmul(self, other))
        if _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op_in_place(self, _as_scalar(other), operator.mul)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return products.matmul(self, other)
        if _is_vector(other):
            return products.matvec(self, other)
        return NotImplemented

    def __imatmul__(self, other):
        if isinstance(other, Matrix):
            return self.move_from(products.matmul(self, other))
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Matrix) or _is_vector(other):
            return NotImplemented
        return elementwise.scalar_op(self, _as_scalar(other), operator.truediv)

    def hadamard(self, other: "Matrix[T]") -> "Matrix[T]":
        return elementwise.hadamard(self, other)

    def hadamard_in_place(self, other: "Matrix[T]") -> "Matrix[T]":
        return elementwise.hadamard_in_place(self, other)

    # ------------------------------------------------------------------
    # Transpose and transforms
    # ------------------------------------------------------------------
    def transpose(self) -> "Matrix[T]":
        return products.transpose(self)

    def transpose_in_place(self) -> "Matrix[T]":
        # shape usually changes, so compute then move
        return self.move_from(products.transpose(self))

    def component_wise_transformation(self, fn: Callable[[T], T]) -> "Matrix[T]":
        """
        Return a new matrix with `fn` applied to every element.

        `fn` only sees the element value, never its position.
        """
        return elementwise.apply(self, fn)

    def component_wise_transformation_in_place(
        self, fn: Callable[[T], T]
    ) -> "Matrix[T]":
        return elementwise.apply_in_place(self, fn)
