# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix addition, subtraction and multiplication.

Operands are never modified; each result owns new storage.
"""

from .errors import DimensionMismatch
from .matrix import Matrix, require_non_empty


def add(A: Matrix, B: Matrix, subtract: bool = False) -> Matrix:
    """Return A + B, or A - B when `subtract` is set."""
    require_non_empty(A, "add")
    require_non_empty(B, "add")
    if A.shape != B.shape:
        raise DimensionMismatch(
            f"add: cannot combine {A.num_rows}x{A.num_cols} "
            f"with {B.num_rows}x{B.num_cols}"
        )
    sign = -1.0 if subtract else 1.0
    return Matrix(A.data + sign * B.data)


def subtract(A: Matrix, B: Matrix) -> Matrix:
    return add(A, B, subtract=True)


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """Matrix product A @ B; needs A.num_cols == B.num_rows."""
    require_non_empty(A, "multiply")
    require_non_empty(B, "multiply")
    if A.num_cols != B.num_rows:
        raise DimensionMismatch(
            f"multiply: {A.num_rows}x{A.num_cols} @ {B.num_rows}x{B.num_cols} "
            "has mismatched inner dimensions"
        )
    return Matrix(A.data @ B.data)
