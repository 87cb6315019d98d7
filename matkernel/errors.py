# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by the matrix kernels.

Every failure is a subclass of `MatrixError`, which itself is a
`ValueError`, so code that already guards numerical routines with
``except ValueError`` keeps working.
"""


class MatrixError(ValueError):
    """Base class for all matkernel failures."""


class InvalidDimension(MatrixError):
    """Requested or supplied shape is not a valid matrix shape."""


class EmptyMatrixError(MatrixError):
    """Operation received an empty (or released) matrix."""


class IndexOutOfRange(MatrixError, IndexError):
    """Row or column index outside the matrix extents."""


class DimensionMismatch(MatrixError):
    """Operand shapes are incompatible for add / multiply."""


class SquareMatrixRequired(MatrixError):
    """Operation is only defined for n-by-n matrices."""


class NotAugmented(MatrixError):
    """Solver input lacks a constant column."""


class NoSolution(MatrixError):
    """Linear system is inconsistent."""


class InfiniteSolutions(MatrixError):
    """Linear system has at least one free variable."""


class NotPositiveDefinite(MatrixError):
    """Cholesky input is not symmetric positive-definite."""


class DivisionByZero(MatrixError, ZeroDivisionError):
    """Row scaled by a zero divisor."""
