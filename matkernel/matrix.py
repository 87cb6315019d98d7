# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrix storage.

A `Matrix` owns a row-major float64 NumPy buffer whose shape is fixed at
construction. The kernels in this package mutate that buffer in place, so
two `Matrix` objects never share one: `from_rows`, `from_array` and `copy`
all allocate fresh storage.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .errors import (
    DimensionMismatch,
    EmptyMatrixError,
    IndexOutOfRange,
    InvalidDimension,
    SquareMatrixRequired,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Rectangular block of float64 values.

    Use `create_matrix`, `Matrix.from_rows` or `Matrix.from_array` to build
    one. The constructor adopts a float64 array without copying and
    converts any other array-like (integer arrays, nested lists) to a new
    float64 buffer.

    Element access ``m[i, j]`` (or `get` / `set`) is bounds-checked while
    assertions are enabled and falls straight through to NumPy under
    ``python -O``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray):
        # float64 arrays are adopted as-is; anything else is converted
        data = np.asarray(data, dtype=float)
        if data.ndim != 2:
            raise InvalidDimension(f"expected a 2-D array, got {data.ndim}-D")
        self._data = data

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def from_array(cls, A) -> "Matrix":
        """Copy a 2-D array-like into a new, non-empty Matrix."""
        arr = np.array(A, dtype=float, copy=True)
        if arr.ndim != 2:
            raise InvalidDimension(f"expected a 2-D array, got {arr.ndim}-D")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidDimension(f"matrix extents must be positive, got {arr.shape}")
        return cls(arr)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a Matrix from a list of equally long rows."""
        rows = [list(r) for r in rows]
        if not rows or not rows[0]:
            raise InvalidDimension("matrix needs at least one row and one column")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise InvalidDimension(
                    f"row {i} has {len(r)} values, expected {width}"
                )
        return cls.from_array(rows)

    # -----------------------------------------------------------------
    # Shape
    # -----------------------------------------------------------------
    @property
    def num_rows(self) -> int:
        return self._data.shape[0]

    @property
    def num_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def data(self) -> np.ndarray:
        """The backing array. Writes through it mutate the matrix."""
        return self._data

    # -----------------------------------------------------------------
    # Element access
    # -----------------------------------------------------------------
    def _check_index(self, i: int, j: int) -> None:
        m, n = self._data.shape
        if not (0 <= i < m and 0 <= j < n):
            raise IndexOutOfRange(f"index ({i}, {j}) outside a {m}x{n} matrix")

    def get(self, i: int, j: int) -> float:
        if __debug__:
            self._check_index(i, j)
        return float(self._data[i, j])

    def set(self, i: int, j: int, value: float) -> None:
        if __debug__:
            self._check_index(i, j)
        self._data[i, j] = value

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        i, j = idx
        return self.get(i, j)

    def __setitem__(self, idx: Tuple[int, int], value: float) -> None:
        i, j = idx
        self.set(i, j, value)

    def row(self, i: int) -> np.ndarray:
        """Copy of row i."""
        if __debug__ and not 0 <= i < self.num_rows:
            raise IndexOutOfRange(f"row {i} outside a {self.num_rows}-row matrix")
        return self._data[i].copy()

    # -----------------------------------------------------------------
    # Copies & comparison
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        return Matrix(self._data.copy())

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def tolist(self):
        return self._data.tolist()

    def release(self) -> None:
        """Drop the storage; the matrix becomes empty."""
        self._data = np.empty((0, 0), dtype=float)

    def allclose(self, other: "Matrix", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.num_rows}x{self.num_cols}, {self.tolist()})"


def create_matrix(rows: int, cols: int) -> Matrix:
    """Allocate a zero-filled `rows` by `cols` matrix."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if rows <= 0 or cols <= 0:
        raise InvalidDimension(f"matrix extents must be positive, got {rows}x{cols}")
    return Matrix(np.zeros((int(rows), int(cols)), dtype=float))


def release_matrix(matrix: Optional[Matrix]) -> None:
    """Release a matrix's storage. Safe on None and on released matrices."""
    if matrix is None or is_empty(matrix):
        return
    matrix.release()


def is_empty(matrix: Optional[Matrix]) -> bool:
    return matrix is None or matrix.num_rows <= 0 or matrix.num_cols <= 0


def is_square(matrix: Matrix) -> bool:
    return matrix.num_rows == matrix.num_cols


def require_non_empty(matrix: Optional[Matrix], op: str) -> None:
    if is_empty(matrix):
        raise EmptyMatrixError(f"{op}: matrix is empty")


def require_square(matrix: Matrix, op: str) -> None:
    require_non_empty(matrix, op)
    if not is_square(matrix):
        raise SquareMatrixRequired(
            f"{op}: need an n x n matrix, got {matrix.num_rows}x{matrix.num_cols}"
        )


def augment(A: Matrix, b) -> Matrix:
    """
    Return the augmented matrix [A | b] as a new Matrix.

    `b` may be a Matrix with A.num_rows rows or any 1-D / 2-D array-like
    of matching height.
    """
    require_non_empty(A, "augment")
    if isinstance(b, Matrix):
        require_non_empty(b, "augment")
        rhs = b.data
    else:
        rhs = np.asarray(b, dtype=float)
        if rhs.ndim == 1:
            rhs = rhs[:, None]
    if rhs.ndim != 2 or rhs.shape[0] != A.num_rows:
        raise DimensionMismatch(
            f"augment: right-hand side of shape {rhs.shape} does not match "
            f"{A.num_rows} rows"
        )
    return Matrix(np.hstack([A.data, rhs]).astype(float))


def fill_matrix(matrix: Matrix, values: Iterable[float]) -> Matrix:
    """
    Populate `matrix` in row-major order from an iterable of numbers.

    Extra values are ignored; too few raise `InvalidDimension`.
    """
    require_non_empty(matrix, "fill_matrix")
    it = iter(values)
    for i in range(matrix.num_rows):
        for j in range(matrix.num_cols):
            try:
                matrix.data[i, j] = float(next(it))
            except StopIteration:
                raise InvalidDimension(
                    f"fill_matrix: ran out of values at [{i}, {j}]"
                ) from None
    logger.debug("filled %dx%d matrix", matrix.num_rows, matrix.num_cols)
    return matrix
