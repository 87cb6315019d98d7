#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command-line driver: read matrices from text files and run one operation.

    matkernel det A.txt
    matkernel solve system.txt --tol auto
    cat A.txt | matkernel rotate cw -
"""

import argparse
import logging
import sys

from .arithmetic import add, multiply
from .cholesky import cholesky
from .elimination import rank, rref, solve_system
from .errors import MatrixError
from .matrix import Matrix
from .matrix_functions import (
    determinant,
    is_linearly_independent,
    rotate_clockwise,
    rotate_counter_clockwise,
    transposed,
)
from .textio import print_matrix, read_matrix
from .utils import scale_tol

logger = logging.getLogger(__name__)


def _tolerance(value: str, matrix: Matrix) -> float:
    if value == "auto":
        return scale_tol(matrix)
    return float(value)


def _check_tol(value: str) -> str:
    if value == "auto":
        return value
    try:
        if float(value) < 0:
            raise ValueError
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a non-negative number or 'auto', got {value!r}"
        ) from None
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matkernel",
        description="Dense matrix kernels: RREF, determinants, Cholesky, solving.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "--precision", type=int, default=3, help="decimals printed per value"
    )
    parser.add_argument(
        "--tol",
        type=_check_tol,
        default="0",
        help=(
            "zero threshold for pivots in rref, rank, det, independent and solve: "
            "a number or 'auto' (default: exact zero)"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("rref", "reduced row echelon form and determinant scale factor"),
        ("rank", "number of pivot columns"),
        ("det", "determinant of a square matrix"),
        ("independent", "whether the rows of a square matrix are independent"),
        ("cholesky", "lower-triangular Cholesky factor"),
        ("solve", "solve an augmented system [A | b]"),
        ("transpose", "transpose"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("matrix", help="matrix file, '-' for stdin")

    p = sub.add_parser("rotate", help="rotate a square matrix by 90 degrees")
    p.add_argument("direction", choices=["cw", "ccw"])
    p.add_argument("matrix", help="matrix file, '-' for stdin")

    for name in ("add", "subtract", "multiply"):
        p = sub.add_parser(name, help=f"{name} two matrices")
        p.add_argument("a", help="left operand file")
        p.add_argument("b", help="right operand file")

    return parser


def run(args: argparse.Namespace) -> None:
    out = sys.stdout
    prec = args.precision

    if args.command in ("add", "subtract", "multiply"):
        A, B = read_matrix(args.a), read_matrix(args.b)
        if args.command == "multiply":
            result = multiply(A, B)
        else:
            result = add(A, B, subtract=args.command == "subtract")
        print_matrix(result, file=out, precision=prec)
        return

    M = read_matrix(args.matrix)
    logger.debug("read %dx%d matrix from %s", M.num_rows, M.num_cols, args.matrix)

    if args.command == "rref":
        scale = rref(M, tol=_tolerance(args.tol, M))
        print_matrix(M, file=out, precision=prec)
        print(f"scale factor: {scale:.{prec}f}", file=out)
    elif args.command == "rank":
        print(rank(M, tol=_tolerance(args.tol, M)), file=out)
    elif args.command == "det":
        print(f"{determinant(M, tol=_tolerance(args.tol, M)):.{prec}f}", file=out)
    elif args.command == "independent":
        independent = is_linearly_independent(M, tol=_tolerance(args.tol, M))
        print("yes" if independent else "no", file=out)
    elif args.command == "cholesky":
        print_matrix(cholesky(M), file=out, precision=prec)
    elif args.command == "solve":
        x = solve_system(M, tol=_tolerance(args.tol, M))
        print_matrix(x, file=out, precision=prec)
    elif args.command == "transpose":
        print_matrix(transposed(M), file=out, precision=prec)
    elif args.command == "rotate":
        if args.direction == "cw":
            rotate_clockwise(M)
        else:
            rotate_counter_clockwise(M)
        print_matrix(M, file=out, precision=prec)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(args)
    except MatrixError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
