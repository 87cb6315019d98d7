# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np

from .errors import NotPositiveDefinite
from .matrix import Matrix, create_matrix, require_square
from .utils import scale_tol

logger = logging.getLogger(__name__)


def cholesky(matrix: Matrix, check_symmetric: bool = True) -> Matrix:
    """
    Cholesky factorisation A = L Lᵀ of a symmetric positive-definite matrix.

    Row-by-row (Cholesky–Banachiewicz) order:

        L[i, j] = (A[i, j] - sum_{k<j} L[i, k] L[j, k]) / L[j, j]     j < i
        L[i, i] = sqrt(A[i, i] - sum_{k<i} L[i, k]^2)

    Parameters
    ----------
    matrix : Matrix   (n, n)
        Left untouched; only its lower triangle is read.
    check_symmetric : bool
        Reject inputs that are not symmetric (to within `scale_tol`).

    Returns
    -------
    L : Matrix   (n, n), lower-triangular with a positive diagonal.

    Raises
    ------
    NotPositiveDefinite : asymmetric input, or a non-positive radicand.
    """
    require_square(matrix, "cholesky")
    A = matrix.data
    n = matrix.num_rows

    if check_symmetric and not np.allclose(A, A.T, rtol=0.0, atol=scale_tol(matrix)):
        raise NotPositiveDefinite("cholesky: matrix is not symmetric")

    result = create_matrix(n, n)
    L = result.data

    for i in range(n):
        for j in range(i):
            s = L[i, :j] @ L[j, :j]
            # L[j, j] > 0 was established when row j was finished
            L[i, j] = (A[i, j] - s) / L[j, j]

        radicand = A[i, i] - L[i, :i] @ L[i, :i]
        if not radicand > 0 or not math.isfinite(radicand):
            logger.debug("cholesky: radicand %g at row %d", radicand, i)
            raise NotPositiveDefinite(
                f"cholesky: leading minor {i + 1} is not positive (radicand {radicand:g})"
            )
        L[i, i] = math.sqrt(radicand)

    return result
