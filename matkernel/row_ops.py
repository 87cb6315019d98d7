# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementary row operations.

These three mutators are the only primitives the elimination routines use
to change a matrix.
"""

from .errors import DivisionByZero, IndexOutOfRange
from .matrix import Matrix


def _check_row(matrix: Matrix, row: int) -> None:
    if not 0 <= row < matrix.num_rows:
        raise IndexOutOfRange(f"row {row} outside a {matrix.num_rows}-row matrix")


def swap_rows(matrix: Matrix, a: int, b: int) -> None:
    """Exchange rows a and b in place."""
    _check_row(matrix, a)
    _check_row(matrix, b)
    if a == b:
        return
    A = matrix.data
    A[[a, b]] = A[[b, a]]


def scale_row(matrix: Matrix, row: int, divisor: float) -> None:
    """Divide every entry of `row` by `divisor`."""
    _check_row(matrix, row)
    if divisor == 0:
        raise DivisionByZero(f"cannot scale row {row} by a zero divisor")
    matrix.data[row] /= divisor


def add_scaled_row(matrix: Matrix, target: int, source: int, scalar: float) -> None:
    """target <- target + scalar * source"""
    _check_row(matrix, target)
    _check_row(matrix, source)
    A = matrix.data
    A[target] += scalar * A[source]
