"""Camera configuration parser."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict
import numbers

from .state import CameraState, DEFAULT_YAW, DEFAULT_PITCH
from ..errors import InvalidParameter
from ..utils.conversion import to_vector3


def camera_state_from_dict(camera_cfg: Mapping[str, Any]) -> CameraState:
    """
    Build a camera state from a configuration dictionary.

    Args:
        camera_cfg: Camera configuration with optional keys:
            - position: Camera position [x, y, z] (default: origin)
            - yaw: Degrees about world up (default: -90, looking down -Z)
            - pitch: Degrees of elevation (default: 0)
            - world_up: World up direction (default: [0, 1, 0])

    Returns:
        CameraState

    Raises:
        InvalidParameter: If position or world_up is not a 3-vector, or an
            angle is not a number

    Example:
        >>> camera_state_from_dict({"position": [0, 1, 4], "pitch": -10})
    """
    if not isinstance(camera_cfg, Mapping):
        raise InvalidParameter("camera", "a mapping", camera_cfg)

    position = to_vector3(camera_cfg.get("position", [0.0, 0.0, 0.0]), "camera.position")
    world_up = to_vector3(camera_cfg.get("world_up", [0.0, 1.0, 0.0]), "camera.world_up")

    angles = {}
    for name, default in (("yaw", DEFAULT_YAW), ("pitch", DEFAULT_PITCH)):
        value = camera_cfg.get(name, default)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidParameter(f"camera.{name}", "a number of degrees", value)
        angles[name] = float(value)

    return CameraState(
        position=tuple(position),
        yaw=angles["yaw"],
        pitch=angles["pitch"],
        world_up=tuple(world_up),
    )


def camera_state_to_dict(camera: CameraState) -> Dict[str, Any]:
    """Convert to dictionary."""
    return {
        "position": list(camera.position),
        "yaw": camera.yaw,
        "pitch": camera.pitch,
        "world_up": list(camera.world_up),
    }
