# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from numbers import Integral
from typing import Any, Protocol, Sequence, TypeVar

from .exceptions import ContractViolation

DEFAULT_SEED: int = 42


class SupportsArithmetic(Protocol):
    """Element types usable in a Matrix: closed under + - * /."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=SupportsArithmetic)


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation with `message` unless `condition` holds."""
    if not condition:
        raise ContractViolation(message)


def zero_of(*samples: Sequence[Any]) -> Any:
    """
    Default-constructed value of the element type found in `samples`.

    int() -> 0, float() -> 0.0, Fraction() -> Fraction(0), ...
    Falls back to the integer 0 when every sequence is empty.
    """
    for seq in samples:
        if len(seq):
            return type(seq[0])()
    return 0


def require_shape(rows: Any, cols: Any) -> None:
    """Dimensions must be non-negative integers."""
    require(
        isinstance(rows, Integral) and isinstance(cols, Integral),
        f"matrix dimensions must be integers, got ({rows!r}, {cols!r})",
    )
    require(
        rows >= 0 and cols >= 0,
        f"matrix dimensions must be non-negative, got ({rows}, {cols})",
    )
