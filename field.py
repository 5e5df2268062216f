from constants import MODULUS


def reduce(x: int, modulus: int = MODULUS) -> int:
    # Negative intermediates from subtraction must still land in [0, modulus)
    x %= modulus
    if x < 0:
        x += modulus
    return x


def add(a: int, b: int, modulus: int = MODULUS) -> int:
    return reduce(a + b, modulus)


def sub(a: int, b: int, modulus: int = MODULUS) -> int:
    return reduce(a - b, modulus)


def mul(a: int, b: int, modulus: int = MODULUS) -> int:
    return reduce(a * b, modulus)


# https://en.wikipedia.org/wiki/Extended_Euclidean_algorithm#Modular_integers
def multiplicative_inverse(a: int, modulus: int = MODULUS) -> int:
    if modulus == 1:
        return 0

    value: int = reduce(a, modulus)
    if value == 0:
        raise ZeroDivisionError(f"0 has no multiplicative inverse modulo {modulus}")

    m: int = modulus
    x0, x1 = 0, 1
    while value > 1:
        if m == 0:
            raise ValueError(f"{a} is not invertible modulo {modulus}")
        q: int = value // m
        m, value = value % m, m
        x0, x1 = x1 - q * x0, x0

    return reduce(x1, modulus)


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    i: int = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True
