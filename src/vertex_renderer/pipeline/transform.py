"""Vertex transform pipeline: world space -> clip space -> NDC."""

from __future__ import annotations
from typing import Tuple
import warnings
import numpy as np

from ..camera.projection import combine
from ..camera.view import build_view_matrix
from ..errors import DegenerateDivision
from ..utils.conversion import to_vertex_array, ensure_4x4_matrix
from ..utils.debug import debug_print, debug_array_info

W_EPSILON = 1e-12


def homogenize(vertices, matrix: np.ndarray) -> np.ndarray:
    """
    Apply a 4x4 transform to vertices extended with w = 1.

    Vectors are treated as columns, so each output row is
    ``matrix @ [x, y, z, 1]``.

    Args:
        vertices: (N, 3) world-space positions
        matrix: (4, 4) transform (row-major)

    Returns:
        (N, 4) homogeneous clip-space coordinates
    """
    xyz = to_vertex_array(vertices)
    M = ensure_4x4_matrix(matrix, "view_projection")

    xyz_homogeneous = np.concatenate([
        xyz,
        np.ones((xyz.shape[0], 1), dtype=np.float64)
    ], axis=1)

    return xyz_homogeneous @ M.T


def perspective_divide(clip: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Divide x, y, z by w to obtain NDC.

    Vertices with ``|w| <= W_EPSILON`` are degenerate divisions: their
    inf/NaN results are propagated unchanged, they are counted, and one
    DegenerateDivision warning is emitted for the whole call. The rest of
    the batch is unaffected.

    Args:
        clip: (N, 4) homogeneous coordinates

    Returns:
        ndc: (N, 3) float64 coordinates, same order as input
        degenerate_count: Number of vertices with w ~ 0
    """
    clip = np.asarray(clip, dtype=np.float64)
    w = clip[:, 3:4]

    degenerate = np.abs(w[:, 0]) <= W_EPSILON
    degenerate_count = int(np.count_nonzero(degenerate))

    with np.errstate(divide="ignore", invalid="ignore"):
        ndc = clip[:, :3] / w

    if degenerate_count:
        warnings.warn(
            f"{degenerate_count} of {clip.shape[0]} vertices have w ~ 0; "
            "their NDC values are propagated unscaled",
            DegenerateDivision,
            stacklevel=2,
        )
        debug_print(f"[Transform] degenerate divisions: {degenerate_count}")

    return ndc, degenerate_count


def transform_to_ndc(vertices, view_projection: np.ndarray) -> Tuple[np.ndarray, int]:
    """
    Transform world-space vertices to NDC.

    No frustum clipping is done: vertices behind the camera (w < 0) or
    outside the view volume produce NDC values that flow downstream as is.

    Args:
        vertices: (N, 3) world-space positions; never modified
        view_projection: (4, 4) combined ``projection @ view``

    Returns:
        ndc: (N, 3) NDC coordinates, same length and order as input
        degenerate_count: Number of vertices with w ~ 0
    """
    clip = homogenize(vertices, view_projection)
    ndc, degenerate_count = perspective_divide(clip)
    debug_array_info("Transform ndc", ndc)
    return ndc, degenerate_count


def compute_vertex_ndcs(
    vertices,
    projection: np.ndarray,
    position,
    forward,
    right
) -> np.ndarray:
    """
    Compute the NDC buffer for vertices seen from an explicit camera basis.

    Args:
        vertices: (N, 3) world-space positions
        projection: (4, 4) projection matrix
        position, forward, right: Camera pose (see build_view_matrix)

    Returns:
        (N, 3) float32 array, one vertex per row, ready for a vertex buffer
    """
    view = build_view_matrix(position, forward, right)
    ndc, _ = transform_to_ndc(vertices, combine(ensure_4x4_matrix(projection), view))
    return ndc.astype(np.float32)
