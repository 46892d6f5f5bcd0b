#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the i-k-j matrix product against the textbook i-j-k order and NumPy.
"""

import logging
import time
from typing import Iterable, Tuple

import numpy as np
import pandas as pd

from densematrix import Matrix

logger = logging.getLogger(__name__)

REPEATS = 5  # best of 5 runs
SIZES = [(32, 32), (64, 64), (128, 128)]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def matmul_ijk(A: Matrix, B: Matrix) -> Matrix:
    """Reference product with the inner loop running down a column of B."""
    m, n = A.shape
    p = B.cols
    out = Matrix(m, p, 0.0)
    for i in range(m):
        for j in range(p):
            acc = 0.0
            for k in range(n):
                acc += A[i, k] * B[k, j]
            out[i, j] = acc
    return out


def run_benchmark(
    sizes: Iterable[Tuple[int, int]] = SIZES, repeats: int = REPEATS, seed: int = 0
) -> pd.DataFrame:
    """
    Returns
    -------
    DataFrame with one row per (kernel, size) and columns
    kernel, size, sec, sec/NumPy, max_abs_err
    """
    rng = np.random.default_rng(seed)
    records = []
    for m, n in sizes:
        A = Matrix.random(m, n, 1.0, rng=rng)
        B = Matrix.random(n, m, 1.0, rng=rng)
        A_np, B_np = A.to_numpy(), B.to_numpy()
        ref = A_np @ B_np

        t_np = min(wall(np.matmul, A_np, B_np) for _ in range(repeats))
        label = f"{m}x{n}"

        for kernel, fn in (("ikj", Matrix.__mul__), ("ijk", matmul_ijk)):
            t = min(wall(fn, A, B) for _ in range(repeats))
            err = float(np.max(np.abs(fn(A, B).to_numpy() - ref), initial=0.0))
            logger.debug("%s %s: %.6fs (numpy %.6fs)", kernel, label, t, t_np)
            records.append((kernel, label, t, t / t_np if t_np else np.inf, err))

        records.append(("numpy", label, t_np, 1.0, 0.0))

    return pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "max_abs_err"],
    )


if __name__ == "__main__":
    df = run_benchmark()
    print(df.to_string(index=False))
    df.to_csv("bench_matmul.csv", index=False)
