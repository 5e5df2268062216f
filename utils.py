from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def clone_matrix(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    return [list(row) for row in matrix]


def format_vector(vector: Sequence[int]) -> str:
    return "[" + " ".join(str(v) for v in vector) + "]"


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    # Pad every entry to the widest value so columns line up
    width: int = max((len(str(v)) for row in matrix for v in row), default=1)
    return "\n".join(" ".join(str(v).rjust(width) for v in row) for row in matrix)
