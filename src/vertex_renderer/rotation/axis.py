"""Rotation of vectors about the principal axes."""

from __future__ import annotations
from enum import Enum
from typing import Union
import math
import numpy as np

from ..errors import InvalidParameter
from ..utils.conversion import to_vector3, to_vertex_array


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


def _coerce(enum_cls, value, name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidParameter(name, f"one of {choices}", value) from None


def to_radians(angle: float, unit: Union[AngleUnit, str] = AngleUnit.DEGREES) -> float:
    unit = _coerce(AngleUnit, unit, "unit")
    return math.radians(angle) if unit is AngleUnit.DEGREES else float(angle)


def axis_rotation_matrix(
    axis: Union[Axis, str],
    angle: float,
    unit: Union[AngleUnit, str] = AngleUnit.DEGREES
) -> np.ndarray:
    """
    Right-handed 3x3 rotation about a principal axis.

    Args:
        axis: Axis.X, Axis.Y, Axis.Z (or 'x', 'y', 'z')
        angle: Rotation angle; positive is counter-clockwise looking down
            the axis toward the origin
        unit: AngleUnit of ``angle``

    Returns:
        (3, 3) float64 rotation matrix
    """
    axis = _coerce(Axis, axis, "axis")
    theta = to_radians(angle, unit)
    c, s = math.cos(theta), math.sin(theta)

    if axis is Axis.X:
        rows = [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]
    elif axis is Axis.Y:
        rows = [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]
    else:
        rows = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]

    return np.array(rows, dtype=np.float64)


def rotate_vector(
    vector,
    axis: Union[Axis, str],
    angle: float,
    unit: Union[AngleUnit, str] = AngleUnit.DEGREES
) -> np.ndarray:
    """
    Rotate a vector about a principal axis.

    All three input components are read before any output component is
    written; the component along the axis is passed through unchanged.

    Args:
        vector: (3,) vector; not modified
        axis: Axis to rotate about
        angle: Rotation angle
        unit: AngleUnit of ``angle`` (default degrees)

    Returns:
        New (3,) float64 array
    """
    axis = _coerce(Axis, axis, "axis")
    x, y, z = to_vector3(vector)
    theta = to_radians(angle, unit)
    c, s = math.cos(theta), math.sin(theta)

    if axis is Axis.X:
        return np.array([x, y * c - z * s, y * s + z * c], dtype=np.float64)
    if axis is Axis.Y:
        return np.array([x * c + z * s, y, -x * s + z * c], dtype=np.float64)
    return np.array([x * c - y * s, x * s + y * c, z], dtype=np.float64)


def rotate_vectors(
    vectors,
    axis: Union[Axis, str],
    angle: float,
    unit: Union[AngleUnit, str] = AngleUnit.DEGREES
) -> np.ndarray:
    """
    Rotate each vector independently about a principal axis.

    Returns:
        New (N, 3) array in input order
    """
    xyz = to_vertex_array(vectors, "vectors")
    if xyz.shape[0] == 0:
        return xyz
    return np.stack([rotate_vector(v, axis, angle, unit) for v in xyz])
