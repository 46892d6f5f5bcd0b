# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from densematrix import reset_default_rng
from densematrix.utils import DEFAULT_SEED


@pytest.fixture(autouse=True)
def fresh_default_rng():
    """Every test starts from a freshly seeded process-wide generator."""
    return reset_default_rng(DEFAULT_SEED)


@pytest.fixture
def rng():
    """Seeded generator for building test inputs."""
    return np.random.default_rng(0)
