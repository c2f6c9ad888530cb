"""Mapping from NDC to discrete screen pixels."""

from __future__ import annotations
from typing import Set
import numpy as np

from .depth import DepthMap, Pixel
from ..utils.conversion import to_vertex_array
from ..utils.validation import validate_viewport
from ..utils.debug import debug_print


def ndc_to_pixel(x: float, y: float, width: int, height: int) -> Pixel:
    """
    Discretize one NDC position onto a width x height viewport.

    Coordinates are truncated toward zero, not floored, so slightly
    negative positions land on pixel 0 rather than -1.
    """
    return Pixel(int((x + 1.0) / 2.0 * width), int((y + 1.0) / 2.0 * height))


def build_depth_map(
    ndc,
    width: int,
    height: int,
    clip_to_viewport: bool = False
) -> DepthMap:
    """
    Discretize NDC vertices, keeping the nearest vertex per pixel.

    Args:
        ndc: (N, 3) NDC coordinates; z is the depth key
        width, height: Viewport size in pixels
        clip_to_viewport: Drop pixels outside [0, width) x [0, height).
            Off by default; out-of-viewport pixels are reported as is.

    Returns:
        A fresh DepthMap

    Raises:
        InvalidParameter: If width/height are not positive integers or
            ndc is not (N, 3)

    Notes:
        - Non-finite vertices (e.g. from a degenerate divide) are skipped
          and counted in ``DepthMap.skipped``
        - Exact depth ties go to the later vertex
    """
    validate_viewport(width, height)
    ndc = to_vertex_array(ndc, "ndc")

    depth_map = DepthMap()
    finite = np.isfinite(ndc).all(axis=1)

    for index in range(ndc.shape[0]):
        if not finite[index]:
            depth_map.skipped += 1
            continue

        x, y, z = ndc[index]
        pixel = ndc_to_pixel(x, y, width, height)

        if clip_to_viewport and not (0 <= pixel.x < width and 0 <= pixel.y < height):
            depth_map.clipped += 1
            continue

        depth_map.offer(pixel, float(z), index)

    if depth_map.skipped or depth_map.clipped:
        debug_print(f"[Screen] skipped={depth_map.skipped} clipped={depth_map.clipped}")

    return depth_map


def map_to_screen(
    ndc,
    width: int,
    height: int,
    clip_to_viewport: bool = False
) -> Set[Pixel]:
    """
    Map NDC vertices to the set of surviving pixels.

    The set has no defined order; sort before comparing.
    """
    return build_depth_map(ndc, width, height, clip_to_viewport).pixels()
