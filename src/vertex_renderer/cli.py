"""
Command-line entry point for the vertex renderer.

Loads a scene from YAML, runs the vertex pipeline once and prints either
one ``(x, y)`` line per surviving pixel or the NDC buffer.

Usage:
    python run.py --config configs/scene_config.yaml
    python run.py --config configs/scene_config.yaml --width 320 --height 240 --clip
    python run.py --config configs/scene_config.yaml --ndc
"""

from __future__ import annotations
import argparse
import numbers
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
from omegaconf import OmegaConf, DictConfig

from .camera.config import camera_state_from_dict
from .core.config import RenderConfig
from .core.renderer import VertexRenderer
from .core.scene import box_corners, box_triangles
from .errors import InvalidParameter, VertexRendererError
from .rotation.axis import rotate_vectors
from .screen.output import write_pixels
from .utils.conversion import to_vector3, to_vertex_array


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Project world-space vertices to screen pixels",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/scene_config.yaml
  python run.py --config configs/scene_config.yaml --fov 60 --clip
  python run.py --config configs/scene_config.yaml --ndc --output ndc.txt
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default="configs/scene_config.yaml",
        help="Path to YAML scene configuration"
    )

    parser.add_argument("--width", type=int, default=None, help="Override viewport width")
    parser.add_argument("--height", type=int, default=None, help="Override viewport height")
    parser.add_argument("--fov", type=float, default=None, help="Override vertical FOV (degrees)")

    parser.add_argument(
        "--clip",
        action="store_true",
        help="Drop pixels that fall outside the viewport"
    )

    parser.add_argument(
        "--ndc",
        action="store_true",
        help="Print NDC coordinates (one vertex per line) instead of pixels"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write output to a file instead of stdout"
    )

    return parser.parse_args(argv)


def load_config(config_path: str) -> DictConfig:
    """
    Load and validate YAML scene configuration

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf configuration object
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    if "scene" not in config:
        raise InvalidParameter("scene", "a config section", None)

    for section in ("render", "camera"):
        if config.get(section) is None:
            config[section] = {}

    _log(f"[Config] Loaded configuration from: {config_path}")
    return config


def apply_cli_overrides(config: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    if args.width is not None:
        config.render.width = args.width
        _log(f"[Config] Override width: {args.width}")

    if args.height is not None:
        config.render.height = args.height
        _log(f"[Config] Override height: {args.height}")

    if args.fov is not None:
        config.render.fov = args.fov
        _log(f"[Config] Override fov: {args.fov}")

    if args.clip:
        config.render.clip_to_viewport = True

    return config


def _log(message: str):
    # stdout carries the pixel listing
    print(message, file=sys.stderr)


# ============================================================================
# Scene
# ============================================================================

def load_scene_vertices(scene_cfg: Dict[str, Any]) -> np.ndarray:
    """
    Build the vertex list described by a ``scene`` section.

    Either ``vertices: [[x, y, z], ...]`` or
    ``box: {min: [...], max: [...], mode: corners|triangles}``.

    Raises:
        InvalidParameter: If the section is malformed
    """
    if not isinstance(scene_cfg, Mapping):
        raise InvalidParameter("scene", "a mapping", scene_cfg)

    if "vertices" in scene_cfg:
        return to_vertex_array(scene_cfg["vertices"], "scene.vertices")

    box = scene_cfg.get("box")
    if box is None:
        raise InvalidParameter("scene", "a 'vertices' list or a 'box' section", sorted(scene_cfg))
    if not isinstance(box, Mapping):
        raise InvalidParameter("scene.box", "a mapping", box)

    for key in ("min", "max"):
        if key not in box:
            raise InvalidParameter(f"scene.box.{key}", "a 3-vector", None)
    minimum = to_vector3(box["min"], "scene.box.min")
    maximum = to_vector3(box["max"], "scene.box.max")

    mode = box.get("mode", "corners")
    if mode == "corners":
        return box_corners(minimum, maximum)
    if mode == "triangles":
        return box_triangles(minimum, maximum)
    raise InvalidParameter("scene.box.mode", "'corners' or 'triangles'", mode)


def apply_scene_rotation(vertices: np.ndarray, rotation_cfg: Optional[Dict[str, Any]]) -> np.ndarray:
    """Rotate the scene about a principal axis if a ``rotation`` section is given."""
    if not rotation_cfg:
        return vertices
    if not isinstance(rotation_cfg, Mapping):
        raise InvalidParameter("rotation", "a mapping", rotation_cfg)

    axis = rotation_cfg.get("axis", "y")
    angle = rotation_cfg.get("angle", 0.0)
    if isinstance(angle, bool) or not isinstance(angle, numbers.Real):
        raise InvalidParameter("rotation.angle", "a number", angle)
    unit = rotation_cfg.get("unit", "degrees")
    _log(f"[Scene] Rotating {vertices.shape[0]} vertices about {axis} by {angle} {unit}")
    return rotate_vectors(vertices, axis, float(angle), unit)


# ============================================================================
# Main
# ============================================================================

def run(config: DictConfig, ndc_only: bool, stream) -> int:
    """Render one frame described by ``config`` into ``stream``."""
    cfg = OmegaConf.to_container(config, resolve=True)

    render_cfg = RenderConfig.from_dict(cfg["render"])
    camera = camera_state_from_dict(cfg["camera"])
    vertices = load_scene_vertices(cfg["scene"])
    vertices = apply_scene_rotation(vertices, cfg.get("rotation"))

    renderer = VertexRenderer(render_cfg)

    _log(f"[Render] {vertices.shape[0]} vertices, "
         f"viewport {render_cfg.width}x{render_cfg.height}, fov {render_cfg.fov}")

    if ndc_only:
        ndc, degenerate = renderer.render_ndc(vertices, camera)
        for x, y, z in ndc:
            stream.write(f"{x:.6f} {y:.6f} {z:.6f}\n")
        _log(f"[Render] degenerate divisions: {degenerate}")
        return 0

    depth_map = renderer.render_depth_map(vertices, camera)
    count = write_pixels(depth_map.pixels(), stream)
    _log(f"[Screen] {count} pixels "
         f"(skipped {depth_map.skipped}, clipped {depth_map.clipped})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)

        if args.output is not None:
            with open(args.output, "w", encoding="utf-8") as stream:
                return run(config, args.ndc, stream)
        return run(config, args.ndc, sys.stdout)

    except (VertexRendererError, FileNotFoundError) as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
