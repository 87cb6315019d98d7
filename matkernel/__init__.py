# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matkernel
=========

Dense-matrix kernels built from elementary row operations.

Public API
~~~~~~~~~~
- Storage
    - `Matrix`, `create_matrix`, `release_matrix`, `is_empty`, `is_square`,
      `augment`, `fill_matrix`
- Row operations
    - `swap_rows`, `scale_row`, `add_scaled_row`
- Elimination & linear systems
    - `rref`, `rref_with_pivots`, `rank`, `solve_system`, `gaussian_solve`
- Decompositions
    - `cholesky`
- Matrix functions
    - `determinant`, `is_linearly_independent`, `cofactor_determinant`,
      `transpose`, `transposed`, `rotate_clockwise`,
      `rotate_counter_clockwise`
- Arithmetic
    - `add`, `subtract`, `multiply`
- Text I/O
    - `format_matrix`, `print_matrix`, `parse_matrix`, `read_matrix`

Errors live in `matkernel.errors`; all derive from `MatrixError`.

Example
-------
>>> import matkernel as mk
>>> A = mk.Matrix.from_rows([[1, 1, 2], [1, -1, 0]])
>>> mk.solve_system(A).tolist()
[[1.0], [1.0]]
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import add, multiply, subtract
from .cholesky import cholesky
from .elimination import (
    back_substitute,
    gaussian_solve,
    rank,
    rref,
    rref_with_pivots,
    solve_system,
)
from .errors import (
    DimensionMismatch,
    DivisionByZero,
    EmptyMatrixError,
    IndexOutOfRange,
    InfiniteSolutions,
    InvalidDimension,
    MatrixError,
    NoSolution,
    NotAugmented,
    NotPositiveDefinite,
    SquareMatrixRequired,
)
from .matrix import (
    Matrix,
    augment,
    create_matrix,
    fill_matrix,
    is_empty,
    is_square,
    release_matrix,
)
from .matrix_functions import (
    cofactor_determinant,
    determinant,
    is_linearly_independent,
    rotate_clockwise,
    rotate_counter_clockwise,
    transpose,
    transposed,
)
from .row_ops import add_scaled_row, scale_row, swap_rows
from .textio import format_matrix, parse_matrix, print_matrix, read_matrix
from .utils import scale_tol

__all__ = [
    "Matrix",
    "create_matrix",
    "release_matrix",
    "is_empty",
    "is_square",
    "augment",
    "fill_matrix",
    "swap_rows",
    "scale_row",
    "add_scaled_row",
    "rref",
    "rref_with_pivots",
    "rank",
    "back_substitute",
    "solve_system",
    "gaussian_solve",
    "cholesky",
    "determinant",
    "is_linearly_independent",
    "cofactor_determinant",
    "transpose",
    "transposed",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "add",
    "subtract",
    "multiply",
    "format_matrix",
    "print_matrix",
    "parse_matrix",
    "read_matrix",
    "scale_tol",
    "MatrixError",
    "InvalidDimension",
    "EmptyMatrixError",
    "IndexOutOfRange",
    "DimensionMismatch",
    "SquareMatrixRequired",
    "NotAugmented",
    "NoSolution",
    "InfiniteSolutions",
    "NotPositiveDefinite",
    "DivisionByZero",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matkernel”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
