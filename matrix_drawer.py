import logging
import os
from collections.abc import Sequence

from PIL import Image

from constants import MODULUS

logger = logging.getLogger(__name__)

BORDER_SHADE: int = 255


def to_shade(value: int, modulus: int = MODULUS) -> int:
    if modulus <= 1:
        return 0
    # 0 is black and modulus - 1 is white
    return (value % modulus) * 255 // (modulus - 1)


def write_matrix_to_png(
    matrix: Sequence[Sequence[int]],
    file_name: str | None = None,
    destination_folder: str | None = None,
    scale: int = 8,
    border: int = 1,
    modulus: int = MODULUS,
) -> str:
    if len(matrix) == 0 or len(matrix[0]) == 0:
        raise ValueError("Cannot draw an empty matrix")
    if scale < 1:
        raise ValueError(f"Cannot draw a matrix with a scale of {scale}. Scale must be at least 1.")
    if border < 0:
        raise ValueError(f"Cannot draw a matrix with a negative border of {border}")

    destination_folder = destination_folder or "out"
    file_name = file_name or "matrix.png"
    file_path = os.path.join(destination_folder, file_name)

    rows: int = len(matrix)
    cols: int = len(matrix[0])
    width: int = (cols + 2 * border) * scale
    height: int = (rows + 2 * border) * scale

    img = Image.new(mode="L", size=(width, height), color=BORDER_SHADE)
    pixels = img.load()

    if pixels is None:
        raise Exception("Unable to create image")

    for row in range(rows):
        for col in range(cols):
            shade = to_shade(matrix[row][col], modulus)
            top = (row + border) * scale
            left = (col + border) * scale
            for y in range(top, top + scale):
                for x in range(left, left + scale):
                    pixels[x, y] = shade

    if os.path.exists(destination_folder) and not os.path.isdir(destination_folder):
        raise ValueError(f"Destination folder ({destination_folder}) appears to be a file. It must be deleted or destination_folder must be changed so a folder can be created")
    elif os.path.exists(file_path) and not os.path.isfile(file_path):
        raise ValueError(f"Destination path ({file_path}) appears to be a directory. It must be deleted or either destination_folder or file_name must be changed so a file can be created")

    os.makedirs(destination_folder, exist_ok=True)
    img.save(file_path)
    logger.info("Wrote %dx%d matrix to %s", rows, cols, file_path)

    return file_path
