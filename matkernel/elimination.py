# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .errors import InfiniteSolutions, NoSolution, NotAugmented
from .matrix import Matrix, augment, require_non_empty
from .row_ops import add_scaled_row, scale_row, swap_rows

logger = logging.getLogger(__name__)


def _check_tol(tol: float) -> None:
    if not tol >= 0:
        raise ValueError(f"tol must be a non-negative number, got {tol!r}")


def rref_with_pivots(matrix: Matrix, tol: float = 0.0) -> Tuple[float, List[int]]:
    """
    Reduce `matrix` to reduced row-echelon form in place.

    Pivots are chosen as the first entry (scanning down from the current
    row) whose magnitude exceeds `tol`; with the default ``tol=0.0`` that is
    the first non-zero entry.

    Parameters
    ----------
    matrix : Matrix      (m, n)
        Overwritten with its RREF.
    tol : float
        Entries with ``abs(v) <= tol`` are treated as zero when searching
        for a pivot. Must be non-negative.

    Returns
    -------
    scale  : float
        Determinant scale factor: the product of the pivot values before
        they were normalised to 1, negated once for every row exchange.
        For a square matrix, det(A) = scale * prod(diag(RREF(A))).
    pivots : list[int]
        Column index of each pivot, in row order; len = rank.
    """
    require_non_empty(matrix, "rref")
    _check_tol(tol)
    A = matrix.data
    m, n = matrix.shape

    scale = 1.0
    pivots: List[int] = []
    pivot_col = 0

    for row in range(m):
        if pivot_col > n - 1:
            logger.debug("rref: out of columns at row %d, rank %d", row, len(pivots))
            break

        # First usable pivot at or below `row`. The scan includes the
        # last row; an exhausted column is skipped without consuming a row.
        i = row
        while abs(A[i, pivot_col]) <= tol:
            i += 1
            if i == m:
                i = row
                pivot_col += 1
                if pivot_col > n - 1:
                    logger.debug("rref: no pivot left for rows %d..%d", row, m - 1)
                    return scale, pivots

        if i != row:
            logger.debug("rref: swap rows %d and %d", row, i)
            swap_rows(matrix, i, row)
            scale = -scale

        pivot = float(A[row, pivot_col])
        logger.debug("rref: pivot %g at (%d, %d)", pivot, row, pivot_col)
        scale *= pivot
        scale_row(matrix, row, pivot)

        # Clear the pivot column above and below
        for k in range(m):
            if k == row:
                continue
            factor = A[k, pivot_col]
            if factor != 0:
                add_scaled_row(matrix, k, row, -factor)

        pivots.append(pivot_col)
        pivot_col += 1

    return scale, pivots


def rref(matrix: Matrix, tol: float = 0.0) -> float:
    """Reduce `matrix` in place; return the determinant scale factor."""
    scale, _pivots = rref_with_pivots(matrix, tol=tol)
    return scale


def rank(matrix: Matrix, tol: float = 0.0) -> int:
    """Matrix rank is the number of pivot columns"""
    _scale, pivots = rref_with_pivots(matrix.copy(), tol=tol)
    return len(pivots)


def back_substitute(R: Matrix, tol: float = 0.0) -> np.ndarray:
    """
    Solve an augmented system that is already in RREF.

    Works bottom-up over the n = num_cols - 1 unknowns. Each row only
    reads result slots that were solved on an earlier (lower) step.

    Parameters
    ----------
    R : Matrix   (m, n + 1), m >= n
        Reduced augmented matrix.

    Returns
    -------
    x : (n,) ndarray

    Raises
    ------
    NoSolution        : a pivot is zero but its constant is not.
    InfiniteSolutions : a pivot and its constant are both zero.
    ValueError        : negative `tol`.
    """
    _check_tol(tol)
    A = R.data
    n = R.num_cols - 1
    x = np.zeros(n, dtype=float)

    for i in reversed(range(n)):
        pivot = A[i, i]
        if abs(pivot) <= tol:
            if abs(A[i, n]) > tol:
                raise NoSolution(f"inconsistent system (row {i})")
            raise InfiniteSolutions(f"x[{i}] is a free variable")

        s = A[i, n] - A[i, i + 1 : n] @ x[i + 1 :]
        x[i] = s / pivot

    return x


def solve_system(augmented: Matrix, tol: float = 0.0) -> Matrix:
    """
    Solve the linear system held in an augmented matrix [A | b].

    The argument is reduced in place; pass a copy to keep it.

    Returns
    -------
    x : Matrix  (n, 1)
        Column vector of the n = num_cols - 1 unknowns.
    """
    require_non_empty(augmented, "solve_system")
    m, cols = augmented.shape
    if cols < m or cols < 2:
        raise NotAugmented(
            f"solve_system: a {m}x{cols} matrix has no constant column; "
            "augment it with a constant vector"
        )

    rref(augmented, tol=tol)
    A = augmented.data
    n = cols - 1

    # 0 = c with c != 0 anywhere makes the system inconsistent, whatever
    # the shape.
    for i in range(m):
        if np.all(np.abs(A[i, :n]) <= tol) and abs(A[i, n]) > tol:
            logger.debug("solve_system: row %d reads 0 = %g", i, A[i, n])
            raise NoSolution(f"inconsistent system (row {i} reads 0 = {A[i, n]:g})")

    if n > m:
        raise InfiniteSolutions(
            f"{n} unknowns but only {m} equations; the system is underdetermined"
        )

    x = back_substitute(augmented, tol=tol)
    logger.debug("solve_system: solved %d unknowns", n)
    return Matrix(x[:, None])


def gaussian_solve(A: Matrix, b, tol: float = 0.0) -> Matrix:
    """Solve A x = b without touching A; b is a vector or a column Matrix."""
    return solve_system(augment(A, b), tol=tol)
