"""
Main Entry Point for the vertex renderer

Loads a scene configuration, projects its vertices through the camera and
prints the surviving screen pixels.

Usage:
    python run.py --config configs/scene_config.yaml
    python run.py --config configs/scene_config.yaml --ndc
"""

import sys

from vertex_renderer.cli import main


if __name__ == "__main__":
    sys.exit(main())
