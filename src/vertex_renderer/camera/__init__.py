"""Camera system: projection, view transform and camera state."""

from .projection import build_projection_matrix, combine
from .view import build_view_matrix, build_view_matrix_from_up
from .state import CameraState
from .config import camera_state_from_dict, camera_state_to_dict

__all__ = [
    "build_projection_matrix",
    "combine",
    "build_view_matrix",
    "build_view_matrix_from_up",
    "CameraState",
    "camera_state_from_dict",
    "camera_state_to_dict",
]
