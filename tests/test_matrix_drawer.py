import os
import tempfile
import unittest

from PIL import Image

from matrix_drawer import to_shade, write_matrix_to_png


class TestMatrixDrawerMethods(unittest.TestCase):
    def test_to_shade(self):
        self.assertEqual(0, to_shade(0))
        self.assertEqual(255, to_shade(126))
        self.assertEqual(127, to_shade(63))
        self.assertEqual(255, to_shade(6, 7))

    def test_write_matrix_to_png(self):
        with tempfile.TemporaryDirectory() as folder:
            path = write_matrix_to_png([[0, 126], [63, 1]], "m.png", folder, scale=2, border=1)
            self.assertEqual(os.path.join(folder, "m.png"), path)

            with Image.open(path) as img:
                self.assertEqual((8, 8), img.size)
                self.assertEqual(255, img.getpixel((0, 0)))
                self.assertEqual(0, img.getpixel((2, 2)))
                self.assertEqual(0, img.getpixel((3, 3)))
                self.assertEqual(255, img.getpixel((4, 2)))
                self.assertEqual(127, img.getpixel((2, 4)))

    def test_write_matrix_to_png_creates_folder(self):
        with tempfile.TemporaryDirectory() as folder:
            destination = os.path.join(folder, "nested")
            path = write_matrix_to_png([[1]], destination_folder=destination)
            self.assertEqual(os.path.join(destination, "matrix.png"), path)
            self.assertTrue(os.path.isfile(path))

    def test_write_matrix_to_png_bad_destination(self):
        with tempfile.TemporaryDirectory() as folder:
            file_path = os.path.join(folder, "file")
            with open(file_path, "w") as f:
                f.write("")
            self.assertRaises(ValueError, lambda: write_matrix_to_png([[1]], destination_folder=file_path))
            self.assertRaises(ValueError, lambda: write_matrix_to_png([[1]], file_name=".", destination_folder=folder))

    def test_write_matrix_to_png_invalid(self):
        self.assertRaises(ValueError, lambda: write_matrix_to_png([]))
        self.assertRaises(ValueError, lambda: write_matrix_to_png([[1]], scale=0))
        self.assertRaises(ValueError, lambda: write_matrix_to_png([[1]], border=-1))
