"""Core rendering engine."""

from .config import RenderConfig
from .renderer import VertexRenderer
from .scene import box_corners, box_triangles

__all__ = [
    "RenderConfig",
    "VertexRenderer",
    "box_corners",
    "box_triangles",
]
