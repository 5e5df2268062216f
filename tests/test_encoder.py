import random
import unittest

from encoder import encode_message, encode_symbol, generate_coefficient_matrix, generate_coefficients
from errors import InvalidShapeError


class TestEncoderMethods(unittest.TestCase):
    def test_encode_symbol(self):
        self.assertEqual(17, encode_symbol([1, 2], [5, 6]))
        self.assertEqual(39, encode_symbol([3, 4], [5, 6]))
        self.assertEqual(0, encode_symbol([0, 0, 0], [1, 2, 3]))
        self.assertEqual(0, encode_symbol([], []))

    def test_encode_symbol_reduces(self):
        # 126 is -1, so each term is 1
        self.assertEqual(2, encode_symbol([126, 126], [126, 126]))
        self.assertEqual(4, encode_symbol([3, 4], [5, 6], modulus=7))
        # 36 + 36 = 72, which wraps past 7 many times
        self.assertEqual(2, encode_symbol([6, 6], [6, 6], modulus=7))

    def test_encode_symbol_linearity(self):
        rng = random.Random(7)
        for _ in range(50):
            c = generate_coefficients(rng=rng)
            m1 = generate_coefficients(rng=rng)
            m2 = generate_coefficients(rng=rng)
            m_sum = [(a + b) % 127 for a, b in zip(m1, m2)]
            self.assertEqual(
                encode_symbol(c, m_sum),
                (encode_symbol(c, m1) + encode_symbol(c, m2)) % 127,
            )

    def test_encode_symbol_mismatched_lengths(self):
        self.assertRaises(InvalidShapeError, lambda: encode_symbol([1, 2, 3], [1, 2]))
        self.assertRaises(ValueError, lambda: encode_symbol([1], [1, 2]))

    def test_encode_message(self):
        self.assertEqual([17, 39], encode_message([[1, 2], [3, 4]], [5, 6]))

    def test_generate_coefficients(self):
        coefficients = generate_coefficients()
        self.assertEqual(11, len(coefficients))
        self.assertTrue(all(0 <= c < 127 for c in coefficients))

        coefficients = generate_coefficients(dim=500, modulus=5, rng=random.Random(0))
        self.assertEqual(500, len(coefficients))
        self.assertEqual({0, 1, 2, 3, 4}, set(coefficients))

    def test_generate_coefficients_seeded(self):
        self.assertEqual(
            generate_coefficients(rng=random.Random(42)),
            generate_coefficients(rng=random.Random(42)),
        )

    def test_generate_coefficient_matrix(self):
        matrix = generate_coefficient_matrix(dim=4, rng=random.Random(3))
        self.assertEqual(4, len(matrix))
        self.assertTrue(all(len(row) == 4 for row in matrix))
        self.assertTrue(all(0 <= v < 127 for row in matrix for v in row))
