import logging
import random
from collections.abc import Sequence

from constants import DIM, MAX_ATTEMPTS, MODULUS
from encoder import encode_message, generate_coefficient_matrix
from errors import DecodingFailedError, SingularMatrixError
from field import is_prime
from linear_solver import solve_copy

logger = logging.getLogger(__name__)


class EncodedBlock:
    matrix: list[list[int]]
    symbols: list[int]
    attempts: int

    def __init__(self, matrix: list[list[int]], symbols: list[int], attempts: int):
        self.matrix = matrix
        self.symbols = symbols
        self.attempts = attempts


class SessionResult:
    message: list[int]
    block: EncodedBlock
    decoded: list[int]

    def __init__(self, message: list[int], block: EncodedBlock, decoded: list[int]):
        self.message = message
        self.block = block
        self.decoded = decoded

    @property
    def succeeded(self) -> bool:
        return self.decoded == self.message


class CodingSession:
    _message: tuple[int, ...]
    modulus: int
    dim: int
    _max_attempts: int
    pivoting: bool
    rng: random.Random

    def __init__(
        self,
        message: Sequence[int],
        modulus: int = MODULUS,
        dim: int = DIM,
        max_attempts: int = MAX_ATTEMPTS,
        seed: int | None = None,
        pivoting: bool = False,
    ):
        if not is_prime(modulus):
            raise ValueError(f"Cannot code over GF({modulus}). The modulus must be prime.")
        self.modulus = modulus
        self.dim = dim
        self.message = message
        self.max_attempts = max_attempts
        self.pivoting = pivoting
        self.rng = random.Random(seed)

    @property
    def message(self) -> list[int]:
        return list(self._message)

    @message.setter
    def message(self, message: Sequence[int]) -> None:
        if len(message) != self.dim:
            raise ValueError(f"Cannot use a message of length {len(message)}. Expected exactly {self.dim} values.")
        for value in message:
            if not 0 <= value < self.modulus:
                raise ValueError(f"Message value {value} is outside of GF({self.modulus})")
        self._message = tuple(message)

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @max_attempts.setter
    def max_attempts(self, max_attempts: int) -> None:
        if max_attempts < 1:
            raise ValueError(f"Cannot set max attempts to {max_attempts}. At least one attempt is required.")
        self._max_attempts = max_attempts

    def encode(self) -> EncodedBlock:
        last_error: SingularMatrixError | None = None

        for attempt in range(1, self.max_attempts + 1):
            matrix = generate_coefficient_matrix(self.dim, self.modulus, self.rng)
            symbols = encode_message(matrix, self._message, self.modulus)

            try:
                _ = solve_copy(matrix, symbols, self.modulus, self.pivoting)
            except SingularMatrixError as e:
                logger.info("Attempt %d of %d produced a singular matrix: %s", attempt, self.max_attempts, e)
                last_error = e
                continue

            logger.debug("Found an invertible coefficient matrix on attempt %d", attempt)
            return EncodedBlock(matrix, symbols, attempt)

        raise DecodingFailedError(self.max_attempts, last_error)

    def decode(self, block: EncodedBlock) -> list[int]:
        # solve_copy leaves the block untouched so it can be decoded again
        return solve_copy(block.matrix, block.symbols, self.modulus, self.pivoting)

    def run(self) -> SessionResult:
        block = self.encode()
        decoded = self.decode(block)
        result = SessionResult(self.message, block, decoded)
        if not result.succeeded:
            logger.warning("Decoded message %s does not match the original %s", decoded, result.message)
        return result
