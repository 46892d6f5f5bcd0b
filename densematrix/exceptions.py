# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Errors raised by densematrix.
"""


class ContractViolation(AssertionError):
    """
    A caller broke an operation's precondition.

    Shape mismatches, bad multiplication dimensions, out-of-bounds
    indices and ragged input all land here. These are bugs at the call
    site, not runtime conditions, so nothing inside the package catches
    them. Subclassing AssertionError keeps them out of the way of
    ``except Exception``-style recovery that targets ValueError/TypeError.
    """
