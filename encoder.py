import random
from collections.abc import Sequence

from constants import DIM, MODULUS
from errors import InvalidShapeError
from field import reduce

_rng: random.Random = random.Random()


def encode_symbol(coefficients: Sequence[int], message: Sequence[int], modulus: int = MODULUS) -> int:
    if len(coefficients) != len(message):
        raise InvalidShapeError(
            f"Cannot encode a message of length {len(message)} with {len(coefficients)} coefficients"
        )

    encoded: int = 0
    for coefficient, value in zip(coefficients, message):
        # Reduce on every step so the accumulator never grows past modulus^2
        encoded = reduce(encoded + coefficient * value, modulus)
    return encoded


def encode_message(matrix: Sequence[Sequence[int]], message: Sequence[int], modulus: int = MODULUS) -> list[int]:
    return [encode_symbol(row, message, modulus) for row in matrix]


def generate_coefficients(dim: int = DIM, modulus: int = MODULUS, rng: random.Random | None = None) -> list[int]:
    if rng is None:
        rng = _rng
    return [rng.randrange(modulus) for _ in range(dim)]


def generate_coefficient_matrix(
    dim: int = DIM,
    modulus: int = MODULUS,
    rng: random.Random | None = None,
) -> list[list[int]]:
    return [generate_coefficients(dim, modulus, rng) for _ in range(dim)]
