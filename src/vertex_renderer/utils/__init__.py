"""Common utilities for the vertex pipeline."""

from .conversion import (
    to_vertex_array,
    to_vector3,
    ensure_4x4_matrix,
    to_ndc_buffer,
)
from .validation import (
    validate_vertices,
    validate_viewport,
    validate_positive,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_array_info,
    get_array_stats,
)

__all__ = [
    # Conversion
    "to_vertex_array",
    "to_vector3",
    "ensure_4x4_matrix",
    "to_ndc_buffer",

    # Validation
    "validate_vertices",
    "validate_viewport",
    "validate_positive",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_array_info",
    "get_array_stats",
]
