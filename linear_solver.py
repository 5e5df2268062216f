import logging
from collections.abc import Sequence

from constants import MODULUS
from errors import InvalidShapeError, SingularMatrixError
from field import multiplicative_inverse, reduce
from utils import clone_matrix

logger = logging.getLogger(__name__)


def validate_system(matrix: Sequence[Sequence[int]], results: Sequence[int]) -> None:
    n: int = len(matrix)
    if n == 0:
        raise InvalidShapeError("Cannot solve a system with an empty coefficient matrix")
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise InvalidShapeError(f"Coefficient matrix must be square, row {i} has {len(row)} entries but expected {n}")
    if len(results) != n:
        raise InvalidShapeError(f"Expected {n} results for a {n}x{n} matrix, got {len(results)}")


# https://en.wikipedia.org/wiki/Gaussian_elimination#Gauss%E2%80%93Jordan_elimination
def solve(
    matrix: list[list[int]],
    results: list[int],
    modulus: int = MODULUS,
    pivoting: bool = False,
) -> list[int]:
    """Solve matrix * x = results over GF(modulus) with Gauss-Jordan elimination.

    Both arguments are reduced in place: matrix ends up as the identity and
    results ends up holding the solution. Pass clones (or use solve_copy) if
    either is needed afterwards.

    Without pivoting, a zero on the diagonal raises SingularMatrixError even if
    the matrix could have been solved by swapping rows.
    """
    validate_system(matrix, results)
    n: int = len(matrix)

    for i in range(n):
        if reduce(matrix[i][i], modulus) == 0:
            if not pivoting or not _swap_in_pivot(matrix, results, i, modulus):
                logger.debug("Zero pivot at row %d", i)
                raise SingularMatrixError(f"Matrix is singular, zero pivot at row {i}", row=i)

        inv_pivot: int = multiplicative_inverse(matrix[i][i], modulus)
        for k in range(n):
            matrix[i][k] = reduce(matrix[i][k] * inv_pivot, modulus)
        results[i] = reduce(results[i] * inv_pivot, modulus)

        for j in range(n):
            if j == i:
                continue
            factor: int = matrix[j][i]
            if factor == 0:
                continue
            for k in range(n):
                matrix[j][k] = reduce(matrix[j][k] - factor * matrix[i][k], modulus)
            results[j] = reduce(results[j] - factor * results[i], modulus)

    return results[:]


def _swap_in_pivot(matrix: list[list[int]], results: list[int], i: int, modulus: int) -> bool:
    # Only rows below i are candidates, rows above are already reduced
    for j in range(i + 1, len(matrix)):
        if reduce(matrix[j][i], modulus) != 0:
            logger.debug("Swapping rows %d and %d to avoid a zero pivot", i, j)
            matrix[i], matrix[j] = matrix[j], matrix[i]
            results[i], results[j] = results[j], results[i]
            return True
    return False


def solve_copy(
    matrix: Sequence[Sequence[int]],
    results: Sequence[int],
    modulus: int = MODULUS,
    pivoting: bool = False,
) -> list[int]:
    return solve(clone_matrix(matrix), list(results), modulus, pivoting)


def is_invertible(matrix: Sequence[Sequence[int]], modulus: int = MODULUS, pivoting: bool = False) -> bool:
    try:
        _ = solve_copy(matrix, [0] * len(matrix), modulus, pivoting)
    except SingularMatrixError:
        return False
    return True
