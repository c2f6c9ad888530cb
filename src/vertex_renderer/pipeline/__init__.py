"""Transform pipeline from world space to normalized device coordinates."""

from .transform import (
    W_EPSILON,
    homogenize,
    perspective_divide,
    transform_to_ndc,
    compute_vertex_ndcs,
)

__all__ = [
    "W_EPSILON",
    "homogenize",
    "perspective_divide",
    "transform_to_ndc",
    "compute_vertex_ndcs",
]
