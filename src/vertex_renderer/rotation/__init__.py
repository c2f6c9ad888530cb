"""Rotation utilities."""

from .axis import (
    Axis,
    AngleUnit,
    to_radians,
    axis_rotation_matrix,
    rotate_vector,
    rotate_vectors,
)

__all__ = [
    "Axis",
    "AngleUnit",
    "to_radians",
    "axis_rotation_matrix",
    "rotate_vector",
    "rotate_vectors",
]
