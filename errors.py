class SingularMatrixError(Exception):
    row: int | None

    def __init__(self, message: str = "Matrix is singular", row: int | None = None):
        super().__init__(message)
        self.row = row


class DecodingFailedError(Exception):
    attempts: int
    last_error: SingularMatrixError | None

    def __init__(self, attempts: int, last_error: SingularMatrixError | None = None):
        super().__init__(f"Failed to find an invertible coefficient matrix after {attempts} attempts")
        self.attempts = attempts
        self.last_error = last_error


class InvalidShapeError(ValueError):
    pass
