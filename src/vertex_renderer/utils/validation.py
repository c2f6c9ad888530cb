"""Input validation utilities."""

from __future__ import annotations
import math
import numbers

import numpy as np

from ..errors import InvalidParameter


def validate_vertices(vertices: np.ndarray, name: str = "vertices"):
    """
    Validate a vertex array.

    Args:
        vertices: Candidate (N, 3) array
        name: Argument name used in the error message

    Raises:
        InvalidParameter: If the array is not (N, 3)
    """
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise InvalidParameter(name, "an (N, 3) array", vertices.shape)


def validate_viewport(width, height):
    """
    Validate viewport dimensions.

    Raises:
        InvalidParameter: If width or height is not a positive integer
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidParameter(name, "a positive integer", value)
        if value <= 0:
            raise InvalidParameter(name, "a positive integer", value)


def validate_positive(name: str, value: float):
    """Raise InvalidParameter unless value is a finite number > 0."""
    if not (math.isfinite(value) and value > 0):
        raise InvalidParameter(name, "> 0", value)
