# Size of the prime field every symbol lives in. Must be prime.
MODULUS: int = 127

# Length of a message, and so the number of rows/columns in a coefficient matrix
DIM: int = 11

# Number of random coefficient matrices tried before giving up on a message
MAX_ATTEMPTS: int = 10

DEFAULT_MESSAGE: tuple[int, ...] = (2, 4, 1, 123, 12, 5, 1, 23, 5, 6, 1)
