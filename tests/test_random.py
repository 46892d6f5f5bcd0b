# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from densematrix import DEFAULT_SEED, ContractViolation, Matrix, reset_default_rng


def test_values_within_bounds():
    W = Matrix.random(20, 30, 0.25)
    values = W.to_numpy()
    assert W.shape == (20, 30)
    assert np.all(values >= -0.25)
    assert np.all(values <= 0.25)


def test_successive_calls_continue_the_stream():
    A = Matrix.random(3, 4, 1.0)
    B = Matrix.random(3, 4, 1.0)
    assert A != B


def test_call_sequence_is_reproducible():
    first = [Matrix.random(2, 3, 1.0) for _ in range(3)]
    reset_default_rng()
    second = [Matrix.random(2, 3, 1.0) for _ in range(3)]
    assert first == second


def test_draws_come_from_seeded_uniform():
    W = Matrix.random(2, 3, 2.0)
    expected = np.random.default_rng(DEFAULT_SEED).uniform(-2.0, 2.0, size=6)
    assert W.to_numpy().ravel().tolist() == expected.tolist()


def test_injected_generator_is_independent():
    A = Matrix.random(4, 4, 1.0, rng=np.random.default_rng(7))
    B = Matrix.random(4, 4, 1.0, rng=np.random.default_rng(7))
    assert A == B
    # the default stream was not touched
    C = Matrix.random(4, 4, 1.0)
    reset_default_rng()
    assert C == Matrix.random(4, 4, 1.0)


def test_zero_weight_gives_zeros():
    assert Matrix.random(2, 2, 0.0) == Matrix(2, 2, 0.0)


def test_negative_weight_faults():
    with pytest.raises(ContractViolation):
        Matrix.random(2, 2, -1.0)
