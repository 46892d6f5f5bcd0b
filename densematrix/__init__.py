# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense-matrix type for weight matrices and other ML-adjacent
scratch work: row-major storage, broadcasting addition, an i-k-j matrix
product and reproducible random initialisation.

Public API
~~~~~~~~~~
- `Matrix`
    - construction: `Matrix(rows, cols, initial)`, `zeros`, `from_rows`,
      `from_flat`, `random`, `identity`, `from_numpy`
    - arithmetic: `+ - * / @`, `hadamard`, in-place variants
    - `transpose`, `component_wise_transformation`, `diag_vec`
- Free functions
    - `matmul`, `matvec`, `transpose`, `diag_vec`
    - `broadcast_add`, `hadamard`
- Random source
    - `default_rng`, `reset_default_rng`
- Errors
    - `ContractViolation`

Example
-------
>>> from densematrix import Matrix
>>> A = Matrix.from_rows([[1, 2], [3, 4]])
>>> B = Matrix.from_rows([[5, 6], [7, 8]])
>>> (A * B).to_list()
[[19, 22], [43, 50]]
"""

from importlib.metadata import version as _pkg_version

from .elementwise import broadcast_add, hadamard
from .exceptions import ContractViolation
from .matrix import Matrix
from .products import diag_vec, matmul, matvec, transpose
from .rng import default_rng, reset_default_rng
from .utils import DEFAULT_SEED, SupportsArithmetic

__all__ = [
    "Matrix",
    "matmul",
    "matvec",
    "transpose",
    "diag_vec",
    "broadcast_add",
    "hadamard",
    "default_rng",
    "reset_default_rng",
    "DEFAULT_SEED",
    "SupportsArithmetic",
    "ContractViolation",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densematrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the host application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
