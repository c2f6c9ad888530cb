"""
vertex_renderer - Vertex transform and screen mapping pipeline

Takes world-space vertices and a camera, and produces normalized device
coordinates (for upload to a native renderer) or a set of screen pixels
with nearest-depth resolution (for text output).

Components:
    - Camera: Projection and view matrices, immutable camera state
    - Pipeline: Homogeneous transform and perspective divide
    - Screen: NDC -> pixel mapping with depth resolution
    - Rotation: Rotation about the principal axes
    - Core: VertexRenderer with matrix caching, scene primitives

Example:
    >>> from vertex_renderer import VertexRenderer, RenderConfig, CameraState, box_corners
    >>>
    >>> renderer = VertexRenderer(RenderConfig(width=240, height=240, fov=90, near=1, far=10))
    >>> vertices = box_corners([0, 0, -5], [2, 2, -3])
    >>> pixels = renderer.render_pixels(vertices, CameraState())
"""

__version__ = "1.0.0"

# Errors
from .errors import (
    VertexRendererError,
    InvalidParameter,
    DegenerateBasis,
    DegenerateDivision,
)

# Core
from .core import RenderConfig, VertexRenderer, box_corners, box_triangles

# Camera
from .camera import (
    build_projection_matrix,
    combine,
    build_view_matrix,
    build_view_matrix_from_up,
    CameraState,
    camera_state_from_dict,
)

# Pipeline
from .pipeline import (
    homogenize,
    perspective_divide,
    transform_to_ndc,
    compute_vertex_ndcs,
)

# Screen
from .screen import (
    Pixel,
    DepthMap,
    ndc_to_pixel,
    build_depth_map,
    map_to_screen,
    format_pixels,
    write_pixels,
)

# Rotation
from .rotation import (
    Axis,
    AngleUnit,
    axis_rotation_matrix,
    rotate_vector,
    rotate_vectors,
)

# Utils
from .utils import to_ndc_buffer, debug_print, is_debug_enabled

__all__ = [
    "__version__",

    # Errors
    "VertexRendererError",
    "InvalidParameter",
    "DegenerateBasis",
    "DegenerateDivision",

    # Core
    "RenderConfig",
    "VertexRenderer",
    "box_corners",
    "box_triangles",

    # Camera
    "build_projection_matrix",
    "combine",
    "build_view_matrix",
    "build_view_matrix_from_up",
    "CameraState",
    "camera_state_from_dict",

    # Pipeline
    "homogenize",
    "perspective_divide",
    "transform_to_ndc",
    "compute_vertex_ndcs",

    # Screen
    "Pixel",
    "DepthMap",
    "ndc_to_pixel",
    "build_depth_map",
    "map_to_screen",
    "format_pixels",
    "write_pixels",

    # Rotation
    "Axis",
    "AngleUnit",
    "axis_rotation_matrix",
    "rotate_vector",
    "rotate_vectors",

    # Utils
    "to_ndc_buffer",
    "debug_print",
    "is_debug_enabled",
]
