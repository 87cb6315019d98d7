# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .elimination import rref_with_pivots
from .matrix import Matrix, require_non_empty, require_square

logger = logging.getLogger(__name__)

COFACTOR_WARN_SIZE = 8


def determinant(matrix: Matrix, tol: float = 0.0) -> float:
    """
    Calculate the determinant of an n-by-n matrix by reducing it to RREF.

    The reduction happens in place, so `matrix` is left in RREF afterwards;
    pass ``matrix.copy()`` to keep the original.

    det(A) = scale * prod(diag(R)), where R is the RREF and `scale` the
    factor returned by `rref`. Fewer than n pivots means A is singular and
    the determinant is exactly 0; `tol` decides which pivots count (see
    `rref_with_pivots`), so round-off left in a dependent row is not
    mistaken for a pivot.
    """
    require_square(matrix, "determinant")
    scale, pivots = rref_with_pivots(matrix, tol=tol)
    if len(pivots) < matrix.num_rows:
        logger.debug("determinant: rank %d < %d", len(pivots), matrix.num_rows)
        return 0.0
    diag_prod = float(np.prod(np.diag(matrix.data)))
    return diag_prod * scale


def is_linearly_independent(matrix: Matrix, tol: float = 0.0) -> bool:
    """Rows (equivalently columns) are independent iff det != 0."""
    require_square(matrix, "is_linearly_independent")
    return determinant(matrix.copy(), tol=tol) != 0


def cofactor_determinant(matrix: Matrix) -> float:
    """
    Determinant by Laplace expansion along the first row.

    O(n!) and non-destructive; a reference for checking `determinant`.
    """
    require_square(matrix, "cofactor_determinant")
    n = matrix.num_rows
    if n > COFACTOR_WARN_SIZE:
        logger.warning("cofactor_determinant(): %dx%d matrix – O(n!)", n, n)
    return _laplace(matrix.data)


def _laplace(A: np.ndarray) -> float:
    n = A.shape[0]
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])
    total = 0.0
    rows = np.arange(n) != 0
    for j in range(n):
        if A[0, j] == 0:
            continue
        minor = A[rows][:, np.arange(n) != j]
        total += ((-1) ** j) * A[0, j] * _laplace(minor)
    return total


# ---------------------------------------------------------------------
# Transpose & rotation
# ---------------------------------------------------------------------
def transpose(matrix: Matrix) -> Matrix:
    """Transpose a square matrix in place and return it."""
    require_square(matrix, "transpose")
    A = matrix.data
    A[...] = A.T.copy()
    return matrix


def transposed(matrix: Matrix) -> Matrix:
    """Return a new Matrix holding the transpose; any shape."""
    require_non_empty(matrix, "transposed")
    return Matrix(matrix.data.T.copy())


def _mirror_columns(matrix: Matrix) -> None:
    A = matrix.data
    A[...] = A[:, ::-1].copy()


def rotate_clockwise(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90° clockwise in place: transpose, then mirror."""
    require_square(matrix, "rotate_clockwise")
    transpose(matrix)
    _mirror_columns(matrix)
    return matrix


def rotate_counter_clockwise(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90° counter-clockwise in place: mirror, then transpose."""
    require_square(matrix, "rotate_counter_clockwise")
    _mirror_columns(matrix)
    transpose(matrix)
    return matrix
