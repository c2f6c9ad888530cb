"""Projection matrix construction."""

from __future__ import annotations
import math
import numpy as np

from ..errors import InvalidParameter
from ..utils.validation import validate_positive


def build_projection_matrix(
    fov: float,
    aspect: float,
    near: float,
    far: float
) -> np.ndarray:
    """
    Build OpenGL-style perspective projection matrix.

    This matrix maps camera space coordinates (camera looking down -Z) to
    homogeneous clip space. NDC are obtained by perspective division.

    Args:
        fov: Vertical field of view in degrees, strictly between 0 and 180
        aspect: Viewport width / height, > 0
        near, far: Distances to the near and far planes, > 0 and distinct

    Returns:
        4x4 projection matrix (row-major, float64)

    Raises:
        InvalidParameter: If any argument is out of range

    Notes:
        - Aspect divides the horizontal scale only, so ``fov`` is the
          vertical field of view and the horizontal one widens with aspect
        - z_cam = -near maps to z_ndc = -1, z_cam = -far to z_ndc = +1
        - clip.w = -z_cam, positive for points in front of the camera
    """
    if not (0.0 < fov < 180.0):
        raise InvalidParameter("fov", "strictly between 0 and 180 degrees", fov)
    validate_positive("aspect", aspect)
    validate_positive("near", near)
    validate_positive("far", far)
    if near == far:
        raise InvalidParameter("far", "different from near", far)

    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    depth = far - near

    P = np.zeros((4, 4), dtype=np.float64)

    # Scale factors
    P[0, 0] = f / aspect
    P[1, 1] = f

    # Depth remap [near, far] -> [-1, 1]
    P[2, 2] = -(far + near) / depth
    P[2, 3] = -2.0 * far * near / depth

    # Perspective division: clip.w = -z_cam
    P[3, 2] = -1.0

    return P


def combine(projection: np.ndarray, view: np.ndarray) -> np.ndarray:
    """Full transform world -> clip space (column vectors: P @ V @ v)."""
    return projection @ view
