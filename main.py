import argparse
import logging
import os
import sys

from constants import DEFAULT_MESSAGE, MAX_ATTEMPTS
from errors import DecodingFailedError
from matrix_drawer import write_matrix_to_png
from session import CodingSession
from utils import format_matrix, format_vector


def parse_message(text: str) -> list[int]:
    try:
        return [int(v) for v in text.replace(" ", "").split(",") if v != ""]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a comma separated list of integers, got '{text}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-coding",
        description="Encode a message with random linear combinations over a prime field and decode it again.",
    )
    parser.add_argument("-m", "--message", type=parse_message, default=list(DEFAULT_MESSAGE), help="comma separated field elements to encode")
    parser.add_argument("-s", "--seed", type=int, default=None, help="seed for the coefficient generator")
    parser.add_argument("-a", "--max-attempts", type=int, default=MAX_ATTEMPTS, help="how many random matrices to try before giving up")
    parser.add_argument("--pivoting", action="store_true", help="swap rows instead of failing on a zero pivot")
    parser.add_argument("--png", default=None, metavar="PATH", help="also write the coefficient matrix to a PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every attempt")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        session = CodingSession(
            args.message,
            max_attempts=args.max_attempts,
            seed=args.seed,
            pivoting=args.pivoting,
        )
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    print("Original Message:", format_vector(session.message))

    try:
        result = session.run()
    except DecodingFailedError as e:
        print(f"Failed to decode message after multiple attempts: {e}", file=sys.stderr)
        return 1

    print("Encoded Symbols:", format_vector(result.block.symbols))
    print("Coefficient Matrix:")
    print(format_matrix(result.block.matrix))
    print("Decoded Message:", format_vector(result.decoded))

    if args.png:
        destination_folder, file_name = os.path.split(args.png)
        try:
            path = write_matrix_to_png(
                result.block.matrix,
                file_name=file_name or None,
                destination_folder=destination_folder or ".",
                modulus=session.modulus,
            )
        except (ValueError, OSError) as e:
            print(f"[error] {e}", file=sys.stderr)
            return 2
        print(f"Wrote coefficient matrix to {path}")

    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
