#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Time the elimination and Cholesky kernels against NumPy/LAPACK.

    python -m matkernel.benchmark
"""

import time

import numpy as np
import pandas as pd

from .cholesky import cholesky
from .elimination import gaussian_solve
from .matrix import Matrix
from .matrix_functions import determinant
from .utils import random_spd

np.random.seed(0)
REPEATS = 5  # best of 5 runs
sizes = [50, 100, 200]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def main():
    records = []
    for n in sizes:
        A_np = np.random.randn(n, n)
        b = np.random.randn(n)
        A = Matrix.from_array(A_np)

        # ---------- determinant ------------------------------------
        t_np = min(wall(np.linalg.det, A_np) for _ in range(REPEATS))
        t_ours = min(wall(lambda: determinant(A.copy())) for _ in range(REPEATS))
        rel = abs(determinant(A.copy()) - np.linalg.det(A_np)) / abs(np.linalg.det(A_np))
        records.append(("det", f"{n}x{n}", t_ours, t_ours / t_np, rel))

        # ---------- solve ------------------------------------------
        t_np = min(wall(np.linalg.solve, A_np, b) for _ in range(REPEATS))
        t_ours = min(wall(gaussian_solve, A, b) for _ in range(REPEATS))
        x = gaussian_solve(A, b).data.ravel()
        r = np.linalg.norm(A_np @ x - b, np.inf)
        records.append(("solve", f"{n}x{n}", t_ours, t_ours / t_np, r))

        # ---------- cholesky ---------------------------------------
        S = random_spd(n, seed=n)
        t_np = min(wall(np.linalg.cholesky, S.data) for _ in range(REPEATS))
        t_ours = min(wall(cholesky, S) for _ in range(REPEATS))
        L = cholesky(S).data
        err = np.linalg.norm(L @ L.T - S.data, np.inf)
        records.append(("cholesky", f"{n}x{n}", t_ours, t_ours / t_np, err))

    df = pd.DataFrame(
        records,
        columns=["kernel", "size", "sec", "sec/NumPy", "error"],
    )
    print(df.to_markdown(index=False))
    df.to_csv("bench_results.csv", index=False)


if __name__ == "__main__":
    main()
