"""Rendering configuration."""

from __future__ import annotations
from dataclasses import dataclass, fields
from collections.abc import Mapping
from typing import Any, Dict, Optional
import numbers

from ..errors import InvalidParameter

DEFAULT_WIDTH = 240
DEFAULT_HEIGHT = 240
DEFAULT_FOV = 90.0
DEFAULT_NEAR = 1.0
DEFAULT_FAR = 10.0


def _int_value(cfg: Mapping[str, Any], key: str, default: int) -> int:
    value = cfg.get(key, default)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"render.{key}", "an integer", value)
    return int(value)


def _float_value(cfg: Mapping[str, Any], key: str, default: Optional[float]) -> float:
    value = cfg.get(key, default)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"render.{key}", "a number", value)
    return float(value)


def _bool_value(cfg: Mapping[str, Any], key: str, default: bool) -> bool:
    value = cfg.get(key, default)
    if not isinstance(value, bool):
        raise InvalidParameter(f"render.{key}", "true or false", value)
    return value


@dataclass
class RenderConfig:
    """
    Configuration for rendering operations.

    Attributes:
        width, height: Viewport size in pixels
        fov: Vertical field of view in degrees
        aspect: Width / height ratio; None derives it from the viewport
        near, far: Clipping plane distances
        clip_to_viewport: Drop pixels outside the viewport when mapping
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fov: float = DEFAULT_FOV
    aspect: Optional[float] = None
    near: float = DEFAULT_NEAR
    far: float = DEFAULT_FAR
    clip_to_viewport: bool = False

    @property
    def effective_aspect(self) -> float:
        if self.aspect is not None:
            return float(self.aspect)
        return float(self.width) / float(self.height)

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> 'RenderConfig':
        """
        Create RenderConfig from dictionary; unknown keys are ignored.

        Raises:
            InvalidParameter: If a value has the wrong type; widths and
                heights must be integers, not truncated floats
        """
        if not isinstance(cfg, Mapping):
            raise InvalidParameter("render", "a mapping", cfg)

        aspect = cfg.get('aspect')
        return cls(
            width=_int_value(cfg, 'width', DEFAULT_WIDTH),
            height=_int_value(cfg, 'height', DEFAULT_HEIGHT),
            fov=_float_value(cfg, 'fov', DEFAULT_FOV),
            aspect=None if aspect is None else _float_value(cfg, 'aspect', None),
            near=_float_value(cfg, 'near', DEFAULT_NEAR),
            far=_float_value(cfg, 'far', DEFAULT_FAR),
            clip_to_viewport=_bool_value(cfg, 'clip_to_viewport', False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
