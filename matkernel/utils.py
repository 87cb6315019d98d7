# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from .matrix import Matrix

EPS: float = 1e-12


def scale_tol(matrix: Matrix) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    return EPS * max(1.0, float(np.linalg.norm(matrix.data, ord=np.inf)))


def identity(n: int) -> Matrix:
    return Matrix(np.eye(n, dtype=float))


def random_matrix(rows: int, cols: int, low=-10, high=10, seed=None) -> Matrix:
    """Uniformly random dense matrix."""
    rng = np.random.default_rng(seed)
    return Matrix(rng.uniform(low, high, size=(rows, cols)))


def random_spd(n: int, seed=None) -> Matrix:
    """
    Build a symmetric positive-definite matrix B Bᵀ + n I.

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    B = rng.standard_normal((n, n))
    A = B @ B.T + n * np.eye(n)
    # force exact symmetry
    A = 0.5 * (A + A.T)
    return Matrix(A)
