"""Apply a 4x5 colour matrix to RGBA8 pixel buffers.

Each output channel is computed from the same snapshot of the input pixel:

    r' = clamp(m[0]*r  + m[1]*g  + m[2]*b  + m[3]*a  + m[4])
    g' = clamp(m[5]*r  + m[6]*g  + m[7]*b  + m[8]*a  + m[9])
    b' = clamp(m[10]*r + m[11]*g + m[12]*b + m[13]*a + m[14])
    a' = clamp(m[15]*r + m[16]*g + m[17]*b + m[18]*a + m[19])

Sums are float64. After clamping to [0, 255] values are rounded half up
(floor(v + 0.5)) and stored as uint8. A NaN result is stored as 0.
"""

import numpy as np
from PIL import Image

from colour_matrix.core.types import MATRIX_SIZE, ROW_LENGTH, PreconditionViolation


def _as_pixels(buffer) -> np.ndarray:
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    return np.asarray(buffer)


def apply_matrix(buffer, matrix) -> np.ndarray:
    """Return a new uint8 buffer of the same shape with ``matrix`` applied.

    ``buffer`` is any RGBA8 array-like whose size is a multiple of 4: flat,
    (n, 4) or (h, w, 4). The input is never modified.
    """
    pixels = _as_pixels(buffer)
    coeffs = np.asarray(matrix, dtype=np.float64).reshape(-1)

    if pixels.size % 4 != 0:
        raise PreconditionViolation(f'buffer length {pixels.size} is not a multiple of 4')
    if coeffs.size != MATRIX_SIZE:
        raise PreconditionViolation(f'matrix has {coeffs.size} values, expected {MATRIX_SIZE}')

    rows = coeffs.reshape(4, ROW_LENGTH)
    src = pixels.reshape(-1, 4).astype(np.float64)

    with np.errstate(invalid='ignore', over='ignore'):
        out = src @ rows[:, :4].T + rows[:, 4]
        out = np.clip(out, 0.0, 255.0)
        out = np.floor(out + 0.5)
    out = np.nan_to_num(out, nan=0.0)

    return out.astype(np.uint8).reshape(pixels.shape)


def apply_to_image(image: Image.Image, matrix) -> Image.Image:
    """Apply ``matrix`` to a Pillow image, returning a new RGBA image."""
    rgba = image.convert('RGBA')
    arr = np.array(rgba)
    return Image.fromarray(apply_matrix(arr, matrix))
