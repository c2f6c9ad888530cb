"""
Frame-level vertex renderer.

This module provides the VertexRenderer class, which owns the projection
matrix and a view-matrix cache and runs the transform pipeline and screen
mapper for one scene snapshot per call.
"""

from __future__ import annotations
from typing import Optional, Set, Tuple
import numpy as np

from .config import RenderConfig
from ..camera.projection import build_projection_matrix, combine
from ..camera.state import CameraState
from ..pipeline.transform import transform_to_ndc
from ..screen.depth import DepthMap, Pixel
from ..screen.mapper import build_depth_map
from ..utils.conversion import to_ndc_buffer
from ..utils.validation import validate_viewport
from ..utils.debug import debug_print


class VertexRenderer:
    """
    Vertex renderer for a fixed viewport.

    Matrices are rebuilt only when their inputs change: the projection in
    :meth:`update_projection`, the view when a different CameraState is
    passed in. Vertices are never retained between calls.

    Example:
        >>> renderer = VertexRenderer(RenderConfig(width=240, height=240))
        >>> camera = CameraState()
        >>> pixels = renderer.render_pixels(vertices, camera)
        >>> camera = camera.walked(forward=0.5)
        >>> buffer = renderer.render_buffer(vertices, camera)
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()
        validate_viewport(self.config.width, self.config.height)

        self._projection = self._build_projection()
        self._camera: Optional[CameraState] = None
        self._view_projection: Optional[np.ndarray] = None

    # ------------------------------------------------------------------
    # Matrices
    # ------------------------------------------------------------------

    def _build_projection(self) -> np.ndarray:
        cfg = self.config
        debug_print(f"[Render] projection fov={cfg.fov} aspect={cfg.effective_aspect:.4f} "
                    f"near={cfg.near} far={cfg.far}")
        return build_projection_matrix(cfg.fov, cfg.effective_aspect, cfg.near, cfg.far)

    @property
    def projection(self) -> np.ndarray:
        return self._projection.copy()

    def update_projection(
        self,
        fov: Optional[float] = None,
        aspect: Optional[float] = None,
        near: Optional[float] = None,
        far: Optional[float] = None
    ) -> bool:
        """
        Change projection parameters.

        The new parameters are validated before anything is replaced, so a
        rejected update leaves the renderer untouched.

        Returns:
            True if the projection matrix was rebuilt
        """
        cfg = self.config
        updated = RenderConfig(
            width=cfg.width,
            height=cfg.height,
            fov=cfg.fov if fov is None else fov,
            aspect=cfg.aspect if aspect is None else aspect,
            near=cfg.near if near is None else near,
            far=cfg.far if far is None else far,
            clip_to_viewport=cfg.clip_to_viewport,
        )
        if updated == cfg:
            return False

        projection = build_projection_matrix(
            updated.fov, updated.effective_aspect, updated.near, updated.far
        )
        self.config = updated
        self._projection = projection
        self._view_projection = None
        return True

    def view_projection(self, camera: CameraState) -> np.ndarray:
        """
        Combined ``projection @ view`` for a camera, cached per camera state.

        The returned array is shared with the cache and read-only.
        """
        if self._view_projection is None or camera != self._camera:
            view_projection = combine(self._projection, camera.view_matrix())
            view_projection.setflags(write=False)
            self._view_projection = view_projection
            self._camera = camera
            debug_print(f"[Render] view rebuilt for {camera}")
        return self._view_projection

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_ndc(self, vertices, camera: CameraState) -> Tuple[np.ndarray, int]:
        """
        Transform world vertices to NDC.

        Returns:
            ndc: (N, 3) NDC coordinates in input order
            degenerate_count: Vertices with w ~ 0 (see perspective_divide)
        """
        return transform_to_ndc(vertices, self.view_projection(camera))

    def render_buffer(self, vertices, camera: CameraState) -> np.ndarray:
        """Flat float32 NDC buffer, 3 values per vertex, for a native backend."""
        ndc, _ = self.render_ndc(vertices, camera)
        return to_ndc_buffer(ndc)

    def render_depth_map(self, vertices, camera: CameraState) -> DepthMap:
        ndc, _ = self.render_ndc(vertices, camera)
        return build_depth_map(
            ndc,
            self.config.width,
            self.config.height,
            clip_to_viewport=self.config.clip_to_viewport,
        )

    def render_pixels(self, vertices, camera: CameraState) -> Set[Pixel]:
        """Set of surviving pixels after nearest-depth resolution."""
        return self.render_depth_map(vertices, camera).pixels()
