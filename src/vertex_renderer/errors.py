"""Error types raised by the vertex pipeline."""

from __future__ import annotations
from typing import Any


class VertexRendererError(Exception):
    """Base class for all vertex_renderer errors."""


class InvalidParameter(VertexRendererError, ValueError):
    """
    A construction argument violates its documented range.

    Attributes:
        parameter: Name of the offending argument
        constraint: Human-readable constraint that was violated
        value: The rejected value
    """

    def __init__(self, parameter: str, constraint: str, value: Any = None):
        self.parameter = parameter
        self.constraint = constraint
        self.value = value
        super().__init__(f"{parameter} must be {constraint}, got {value!r}")


class DegenerateBasis(VertexRendererError, ValueError):
    """Camera basis vectors are zero-length or parallel."""


class DegenerateDivision(RuntimeWarning):
    """Vertices with homogeneous w ~ 0 reached the perspective divide."""
