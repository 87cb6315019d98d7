# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Plain-text matrix input and output.

Format: one row per line, values separated by whitespace and/or commas,
``#`` starts a comment. Blank lines are ignored.
"""

import sys
from typing import List, Optional, TextIO

from .errors import InvalidDimension
from .matrix import Matrix, is_empty


def format_matrix(matrix: Matrix, precision: int = 3) -> str:
    if is_empty(matrix):
        return ""
    fmt = f"{{:0.{precision}f}}"
    return "\n".join(
        " ".join(fmt.format(v) for v in row) for row in matrix.data
    )


def print_matrix(matrix: Matrix, file: Optional[TextIO] = None, precision: int = 3) -> None:
    """Write `matrix` to `file` (stdout by default); nothing for an empty matrix."""
    if is_empty(matrix):
        return
    print(format_matrix(matrix, precision=precision), file=file or sys.stdout)


def parse_matrix(text: str) -> Matrix:
    rows: List[List[float]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].replace(",", " ").strip()
        if not line:
            continue
        row = []
        for token in line.split():
            try:
                row.append(float(token))
            except ValueError:
                raise InvalidDimension(
                    f"line {lineno}: {token!r} is not a number"
                ) from None
        rows.append(row)
    if not rows:
        raise InvalidDimension("no matrix values found")
    return Matrix.from_rows(rows)


def read_matrix(path: str) -> Matrix:
    """Parse a matrix from a file; ``-`` reads standard input."""
    if path == "-":
        return parse_matrix(sys.stdin.read())
    with open(path, "r") as f:
        return parse_matrix(f.read())
