# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from matkernel.elimination import (
    back_substitute,
    gaussian_solve,
    rank,
    rref,
    rref_with_pivots,
    solve_system,
)
from matkernel.errors import (
    EmptyMatrixError,
    InfiniteSolutions,
    NoSolution,
    NotAugmented,
)
from matkernel.matrix import Matrix, create_matrix, release_matrix
from matkernel.utils import random_matrix

TEST_ITERATIONS = 20
logger = logging.getLogger(__name__)


def test_rref_idempotent():
    R1 = random_matrix(6, 8, seed=1)
    rref(R1)
    logger.debug(f"RREF\n{R1}\n")
    R2 = R1.copy()
    scale = rref(R2)  # RREF of an RREF is itself
    assert R1.allclose(R2, atol=1e-10)
    assert scale == pytest.approx(1.0)


def test_rref_pivot_structure():
    R = random_matrix(5, 7, seed=2)
    _scale, pivots = rref_with_pivots(R)
    assert pivots == [0, 1, 2, 3, 4]
    # each pivot column should be e_i
    for r, c in enumerate(pivots):
        ei = np.zeros(R.num_rows)
        ei[r] = 1
        assert np.allclose(R.data[:, c], ei, atol=1e-10)


def test_rref_skips_zero_column():
    M = Matrix.from_rows([[0, 1], [0, 2]])
    scale, pivots = rref_with_pivots(M)
    assert pivots == [1]
    assert M.tolist() == [[0.0, 1.0], [0.0, 0.0]]
    assert scale == 1.0


def test_rref_tall_matrix_leaves_zero_rows():
    M = Matrix.from_rows([[1, 2], [3, 4], [5, 6], [7, 8]])
    rref(M)
    np.testing.assert_allclose(M.data[:2], np.eye(2), atol=1e-12)
    np.testing.assert_allclose(M.data[2:], 0.0, atol=1e-12)


def test_rref_scans_last_row_for_pivot():
    # The only non-zero entry of column 0 sits in the last row
    M = Matrix.from_rows([[0, 1, 0], [0, 0, 1], [2, 0, 0]])
    scale, pivots = rref_with_pivots(M)
    assert pivots == [0, 1, 2]
    assert M.tolist() == np.eye(3).tolist()
    # two row exchanges, pivot values 2, 1, 1
    assert scale == 2.0


def test_rref_scale_factor_tracks_swaps():
    M = Matrix.from_rows([[0, 3], [2, 0]])
    assert rref(M) == -6.0


def test_rref_rank_deficient():
    M = Matrix.from_rows([[1, 2, 3], [2, 4, 6], [1, 0, 1]])
    _scale, pivots = rref_with_pivots(M)
    assert pivots == [0, 1]
    assert M.tolist() == [[1.0, 0.0, 1.0], [0.0, 1.0, 1.0], [0.0, 0.0, 0.0]]


def test_rref_empty_matrix():
    M = create_matrix(2, 2)
    release_matrix(M)
    with pytest.raises(EmptyMatrixError):
        rref(M)
    with pytest.raises(EmptyMatrixError):
        rref(None)


def test_rank_agreement():
    for seed in range(TEST_ITERATIONS):
        A = random_matrix(8, 6, seed=seed)
        assert rank(A) == np.linalg.matrix_rank(A.data)
    assert rank(Matrix.from_rows([[1, 2, 3], [2, 4, 6], [1, 0, 1]])) == 2


def test_rank_leaves_input_untouched():
    A = random_matrix(4, 4, seed=3)
    before = A.copy()
    rank(A)
    assert A == before


def test_solve_two_by_two():
    x = solve_system(Matrix.from_rows([[1, 1, 2], [1, -1, 0]]))
    assert x.shape == (2, 1)
    np.testing.assert_allclose(x.data.ravel(), [1.0, 1.0])


def test_solve_no_solution():
    with pytest.raises(NoSolution):
        solve_system(Matrix.from_rows([[0, 0, 5]]))


def test_solve_infinite_solutions():
    with pytest.raises(InfiniteSolutions):
        solve_system(Matrix.from_rows([[1, 1, 2], [2, 2, 4]]))


def test_solve_inconsistent_square_system():
    with pytest.raises(NoSolution):
        solve_system(Matrix.from_rows([[1, 1, 2], [1, 1, 3]]))


def test_solve_more_unknowns_than_equations():
    with pytest.raises(InfiniteSolutions):
        solve_system(Matrix.from_rows([[1, 1, 2]]))


def test_solve_overdetermined_consistent():
    x = solve_system(Matrix.from_rows([[1, 0, 1], [0, 1, 1], [1, 1, 2]]))
    np.testing.assert_allclose(x.data.ravel(), [1.0, 1.0])


def test_solve_overdetermined_inconsistent():
    with pytest.raises(NoSolution):
        solve_system(Matrix.from_rows([[1, 0, 1], [0, 1, 1], [1, 1, 3]]))


def test_solve_not_augmented():
    with pytest.raises(NotAugmented):
        solve_system(Matrix.from_rows([[1, 2], [3, 4], [5, 6]]))
    with pytest.raises(NotAugmented):
        solve_system(Matrix.from_rows([[1]]))


def test_solve_empty():
    with pytest.raises(EmptyMatrixError):
        solve_system(None)


def test_back_substitute_upper_triangular():
    # Only solved slots below the current row feed each step
    U = Matrix.from_rows([[2, 1, -1, 1], [0, 1, 2, 5], [0, 0, 4, 8]])
    x = back_substitute(U)
    np.testing.assert_allclose(x, [1.0, 1.0, 2.0])


def test_gaussian_solve_random():
    for seed in range(TEST_ITERATIONS):
        A = random_matrix(10, 10, seed=seed)
        x_true = np.random.default_rng(seed).random(10)
        b = A.data @ x_true
        before = A.copy()

        x = gaussian_solve(A, b)
        logger.debug(f"\n==== Results ====\nOurs:\n{x}\nTrue:\n{x_true}")

        np.testing.assert_allclose(x.data.ravel(), x_true, rtol=1e-8, atol=1e-10)
        assert A == before


def test_solve_with_tolerance_detects_numerical_singularity():
    # second row is 3x the first up to round-off
    A = Matrix.from_rows([[0.1, 0.2, 1.0], [0.3, 0.6000000000000001, 3.0]])
    with pytest.raises(InfiniteSolutions):
        solve_system(A, tol=1e-9)


def test_rref_logs_pivots_and_swaps(caplog):
    M = Matrix.from_rows([[0, 3], [2, 0]])
    with caplog.at_level(logging.DEBUG, logger="matkernel.elimination"):
        rref(M)
    messages = [r.getMessage() for r in caplog.records]
    assert "rref: swap rows 0 and 1" in messages
    assert "rref: pivot 2 at (0, 0)" in messages
    assert "rref: pivot 3 at (1, 1)" in messages


def test_negative_tolerance_rejected():
    M = Matrix.from_rows([[0, 1], [1, 0]])
    before = M.copy()
    with pytest.raises(ValueError, match="tol"):
        rref(M, tol=-1e-12)
    assert M == before
    with pytest.raises(ValueError, match="tol"):
        rank(M, tol=-1.0)
    with pytest.raises(ValueError, match="tol"):
        solve_system(Matrix.from_rows([[1, 1, 2], [1, -1, 0]]), tol=-1.0)
    with pytest.raises(ValueError, match="tol"):
        back_substitute(Matrix.from_rows([[1, 0, 1], [0, 1, 1]]), tol=-1.0)
