"""Screen mapping from NDC to pixels."""

from .depth import Pixel, DepthMap
from .mapper import ndc_to_pixel, build_depth_map, map_to_screen
from .output import format_pixel, format_pixels, write_pixels

__all__ = [
    # Types
    "Pixel",
    "DepthMap",

    # Mapping
    "ndc_to_pixel",
    "build_depth_map",
    "map_to_screen",

    # Output
    "format_pixel",
    "format_pixels",
    "write_pixels",
]
