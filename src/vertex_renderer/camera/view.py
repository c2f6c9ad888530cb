"""World-to-camera view transform."""

from __future__ import annotations
import numpy as np

from ..errors import DegenerateBasis
from ..utils.conversion import to_vector3

BASIS_EPSILON = 1e-9


def _normalized(v: np.ndarray, name: str) -> np.ndarray:
    norm = np.linalg.norm(v)
    if not np.isfinite(norm) or norm < BASIS_EPSILON:
        raise DegenerateBasis(f"{name} vector has zero length: {v.tolist()}")
    return v / norm


def build_view_matrix(
    position: np.ndarray,
    forward: np.ndarray,
    right: np.ndarray
) -> np.ndarray:
    """
    Build world-to-camera matrix from an explicit camera basis.

    The camera looks down -Z in its own space:
        +X = right
        +Y = up
        -Z = forward

    Rows of the rotation part are the orthonormal basis [right, up, -forward];
    the translation column is the negated projection of the camera position
    onto each row.

    Args:
        position: (3,) Camera position in world coordinates
        forward: (3,) Viewing direction
        right: (3,) Camera right direction; need not be exactly orthogonal
            to forward, it is re-orthogonalized

    Returns:
        w2c: (4,4) world-to-camera matrix (float64)

    Raises:
        DegenerateBasis: If forward or right is zero-length, or they are parallel
    """
    p = to_vector3(position, "position")
    f = _normalized(to_vector3(forward, "forward"), "forward")
    r = _normalized(to_vector3(right, "right"), "right")

    # up = right x forward keeps the basis right-handed
    up = np.cross(r, f)
    up_norm = np.linalg.norm(up)
    if up_norm < BASIS_EPSILON:
        raise DegenerateBasis("forward and right vectors are parallel")
    up = up / up_norm
    r = np.cross(f, up)

    M = np.eye(4, dtype=np.float64)
    M[0, :3] = r
    M[1, :3] = up
    M[2, :3] = -f
    M[0, 3] = -np.dot(r, p)
    M[1, 3] = -np.dot(up, p)
    M[2, 3] = np.dot(f, p)

    return M


def build_view_matrix_from_up(
    position: np.ndarray,
    forward: np.ndarray,
    up: np.ndarray
) -> np.ndarray:
    """
    Build world-to-camera matrix from forward and an up hint.

    Same as :func:`build_view_matrix` but derives ``right = forward x up``.

    Raises:
        DegenerateBasis: If forward or up is zero-length, or they are parallel
    """
    f = _normalized(to_vector3(forward, "forward"), "forward")
    u = _normalized(to_vector3(up, "up"), "up")

    right = np.cross(f, u)
    if np.linalg.norm(right) < BASIS_EPSILON:
        raise DegenerateBasis("forward and up vectors are parallel")

    return build_view_matrix(position, f, right)
