"""Type conversion utilities."""

from __future__ import annotations
from typing import Sequence, Union
import numpy as np

from .validation import validate_vertices
from ..errors import InvalidParameter


def _as_float_array(x, name: str, expected: str) -> np.ndarray:
    try:
        return np.array(x, dtype=np.float64, copy=True)
    except (TypeError, ValueError):
        raise InvalidParameter(name, expected, x) from None


def to_vertex_array(
    x: Union[np.ndarray, Sequence[Sequence[float]]],
    name: str = "vertices"
) -> np.ndarray:
    """
    Convert input to a fresh (N, 3) float64 array.

    The result never aliases the caller's data, so callers can hand in
    arrays they keep mutating between frames.

    Args:
        x: (N, 3) array or sequence of 3-sequences; an empty sequence is
            accepted as zero vertices
        name: Argument name used in error messages

    Returns:
        (N, 3) float64 NumPy array

    Raises:
        InvalidParameter: If the input is ragged, non-numeric or not (N, 3)
    """
    arr = _as_float_array(x, name, "an (N, 3) array")
    if arr.ndim == 1 and arr.shape[0] == 0:
        return np.zeros((0, 3), dtype=np.float64)
    validate_vertices(arr, name)
    return arr


def to_vector3(x, name: str = "vector") -> np.ndarray:
    """
    Convert input to a fresh (3,) float64 array.

    Raises:
        InvalidParameter: If the input does not hold exactly 3 numbers
    """
    v = _as_float_array(x, name, "a 3-vector")
    if v.shape != (3,):
        raise InvalidParameter(name, "a 3-vector", v.shape)
    return v


def ensure_4x4_matrix(m, name: str = "matrix") -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array or flat list of 16 floats, row-major)

    Returns:
        4x4 float64 numpy array

    Raises:
        InvalidParameter: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=np.float64)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise InvalidParameter(name, "a 4x4 matrix or flat length-16 array", M.shape)

    return M


def to_ndc_buffer(ndc: np.ndarray) -> np.ndarray:
    """
    Flatten NDC vertices into a contiguous float32 buffer.

    Layout is x, y, z per vertex in input order, ready for upload to a
    native vertex buffer.
    """
    return np.ascontiguousarray(ndc, dtype=np.float32).reshape(-1)
