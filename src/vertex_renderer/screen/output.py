"""Plain-text pixel output."""

from __future__ import annotations
from typing import Iterable, List, TextIO

from .depth import Pixel


def format_pixel(pixel: Pixel) -> str:
    return f"({pixel.x}, {pixel.y})"


def format_pixels(pixels: Iterable[Pixel]) -> List[str]:
    """One ``(x, y)`` line per pixel, sorted for stable output."""
    return [format_pixel(p) for p in sorted(pixels)]


def write_pixels(pixels: Iterable[Pixel], stream: TextIO) -> int:
    """
    Write pixels to a text stream, one per line.

    Returns:
        Number of lines written
    """
    lines = format_pixels(pixels)
    for line in lines:
        stream.write(line + "\n")
    return len(lines)
