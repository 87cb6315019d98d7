# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from matkernel.cholesky import cholesky
from matkernel.errors import (
    EmptyMatrixError,
    NotPositiveDefinite,
    SquareMatrixRequired,
)
from matkernel.matrix import Matrix, create_matrix
from matkernel.utils import random_spd


@pytest.mark.parametrize("n", [1, 2, 5, 10, 30])
def test_cholesky_reconstruction(n):
    A = random_spd(n, seed=n)
    L = cholesky(A).data

    # lower-triangular with a positive diagonal
    assert np.allclose(np.triu(L, 1), 0.0)
    assert np.all(np.diag(L) > 0)

    np.testing.assert_allclose(L @ L.T, A.data, rtol=1e-10, atol=1e-10)


def test_cholesky_matches_numpy():
    A = random_spd(8, seed=42)
    np.testing.assert_allclose(
        cholesky(A).data, np.linalg.cholesky(A.data), rtol=1e-10, atol=1e-12
    )


def test_cholesky_known_factor():
    A = Matrix.from_rows([[4, 12, -16], [12, 37, -43], [-16, -43, 98]])
    before = A.copy()
    L = cholesky(A)
    assert L.tolist() == [[2.0, 0.0, 0.0], [6.0, 1.0, 0.0], [-8.0, 5.0, 3.0]]
    assert A == before


@pytest.mark.parametrize(
    "rows",
    [
        [[1, 2], [2, 1]],  # indefinite
        [[0, 0], [0, 0]],  # zero pivot
        [[-4]],
        [[1, 1], [1, 1]],  # semi-definite
    ],
)
def test_cholesky_not_positive_definite(rows):
    with pytest.raises(NotPositiveDefinite):
        cholesky(Matrix.from_rows(rows))


def test_cholesky_rejects_asymmetric():
    A = Matrix.from_rows([[4, 1], [0, 3]])
    with pytest.raises(NotPositiveDefinite):
        cholesky(A)
    # only the lower triangle is read when the check is off
    L = cholesky(A, check_symmetric=False)
    np.testing.assert_allclose(L.data @ L.data.T, [[4, 0], [0, 3]])


def test_cholesky_shape_guards():
    with pytest.raises(SquareMatrixRequired):
        cholesky(create_matrix(2, 3))
    with pytest.raises(EmptyMatrixError):
        cholesky(None)
