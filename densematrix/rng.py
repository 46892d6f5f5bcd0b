# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Random source for Matrix.random

One generator is shared by the whole process and seeded once with
DEFAULT_SEED. Successive random matrices continue that stream instead of
re-seeding, so a full sequence of calls is reproducible run-to-run while a
single call in isolation is not. Pass an explicit ``np.random.Generator``
to Matrix.random when per-call reproducibility is wanted.

The shared generator is not synchronized; serialize concurrent callers.
"""

import logging
from typing import Optional

import numpy as np

from .utils import DEFAULT_SEED

logger = logging.getLogger(__name__)

_default_rng: np.random.Generator = np.random.default_rng(DEFAULT_SEED)


def default_rng() -> np.random.Generator:
    """Return the process-wide generator."""
    return _default_rng


def reset_default_rng(seed: Optional[int] = DEFAULT_SEED) -> np.random.Generator:
    """Replace the process-wide generator with a freshly seeded one."""
    global _default_rng
    logger.debug("reseeding default generator with seed=%s", seed)
    _default_rng = np.random.default_rng(seed)
    return _default_rng


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    return _default_rng if rng is None else rng
