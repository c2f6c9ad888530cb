"""Immutable per-frame camera state."""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple
import math
import numpy as np

from .view import build_view_matrix
from ..errors import DegenerateBasis

DEFAULT_YAW = -90.0
DEFAULT_PITCH = 0.0
PITCH_LIMIT = 89.0
TRIG_EPSILON = 1e-15

Vec3Tuple = Tuple[float, float, float]


def _as_tuple(v) -> Vec3Tuple:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


def _snap(value: float) -> float:
    # cos(90 deg) is 6e-17 in floating point; axis-aligned cameras must be exact
    return 0.0 if abs(value) < TRIG_EPSILON else value


@dataclass(frozen=True)
class CameraState:
    """
    Camera pose as position plus yaw/pitch angles (degrees).

    Instances are frozen and hashable so they can key a matrix cache;
    every update returns a new state.

    Attributes:
        position: Camera position in world space
        yaw: Rotation about world up; -90 looks down -Z
        pitch: Elevation above the horizontal plane
        world_up: World up direction used to derive the right vector
    """
    position: Vec3Tuple = (0.0, 0.0, 0.0)
    yaw: float = DEFAULT_YAW
    pitch: float = DEFAULT_PITCH
    world_up: Vec3Tuple = (0.0, 1.0, 0.0)

    def __post_init__(self):
        # Accept any 3-sequence but store plain tuples so hashing works
        object.__setattr__(self, "position", _as_tuple(self.position))
        object.__setattr__(self, "world_up", _as_tuple(self.world_up))
        object.__setattr__(self, "yaw", float(self.yaw))
        object.__setattr__(self, "pitch", float(self.pitch))

    @property
    def forward(self) -> np.ndarray:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        cos_yaw, sin_yaw = _snap(math.cos(yaw)), _snap(math.sin(yaw))
        cos_pitch, sin_pitch = _snap(math.cos(pitch)), _snap(math.sin(pitch))
        front = np.array([
            cos_yaw * cos_pitch,
            sin_pitch,
            sin_yaw * cos_pitch,
        ], dtype=np.float64)
        return front / np.linalg.norm(front)

    @property
    def right(self) -> np.ndarray:
        right = np.cross(self.forward, np.asarray(self.world_up, dtype=np.float64))
        norm = np.linalg.norm(right)
        if norm < 1e-9:
            raise DegenerateBasis(
                f"pitch {self.pitch} aligns the view direction with world up"
            )
        return right / norm

    @property
    def up(self) -> np.ndarray:
        return np.cross(self.right, self.forward)

    def view_matrix(self) -> np.ndarray:
        """World-to-camera matrix for this pose."""
        return build_view_matrix(self.position, self.forward, self.right)

    def moved(self, offset) -> "CameraState":
        """Return a copy translated by a world-space offset."""
        ox, oy, oz = _as_tuple(offset)
        x, y, z = self.position
        return replace(self, position=(x + ox, y + oy, z + oz))

    def walked(
        self,
        forward: float = 0.0,
        right: float = 0.0,
        up: float = 0.0
    ) -> "CameraState":
        """
        Return a copy moved along the camera's forward/right axes.

        Vertical movement follows world up, not the camera's tilted up.
        """
        offset = (
            self.forward * forward
            + self.right * right
            + np.asarray(self.world_up, dtype=np.float64) * up
        )
        return self.moved(offset)

    def turned(self, d_yaw: float = 0.0, d_pitch: float = 0.0) -> "CameraState":
        """Return a copy rotated by the given deltas, pitch clamped to +-89."""
        pitch = min(max(self.pitch + d_pitch, -PITCH_LIMIT), PITCH_LIMIT)
        return replace(self, yaw=self.yaw + d_yaw, pitch=pitch)
