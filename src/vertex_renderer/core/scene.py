"""Simple scene geometry."""

from __future__ import annotations
import numpy as np

from ..utils.conversion import to_vector3

# Corner indices into box_corners(): bit 0 = x, bit 1 = y, bit 2 = z
_BOX_FACES = (
    (2, 0, 1, 1, 3, 2),  # back   (z = min)
    (6, 4, 5, 5, 7, 6),  # front  (z = max)
    (2, 6, 7, 7, 3, 2),  # top    (y = max)
    (2, 0, 4, 4, 6, 2),  # left   (x = min)
    (3, 1, 5, 5, 7, 3),  # right  (x = max)
    (4, 0, 1, 4, 5, 1),  # bottom (y = min)
)


def box_corners(minimum, maximum) -> np.ndarray:
    """
    The 8 corners of an axis-aligned box.

    Returns:
        (8, 3) float64 array; corner i has x = max if bit 0 of i is set,
        y = max for bit 1 and z = max for bit 2
    """
    lo = to_vector3(minimum, "minimum")
    hi = to_vector3(maximum, "maximum")
    return np.array([
        [hi[0] if i & 1 else lo[0],
         hi[1] if i & 2 else lo[1],
         hi[2] if i & 4 else lo[2]]
        for i in range(8)
    ], dtype=np.float64)


def box_triangles(minimum, maximum) -> np.ndarray:
    """
    Triangle list covering an axis-aligned box, two triangles per face.

    Returns:
        (36, 3) float64 array, three consecutive rows per triangle
    """
    corners = box_corners(minimum, maximum)
    indices = [i for face in _BOX_FACES for i in face]
    return corners[indices]
