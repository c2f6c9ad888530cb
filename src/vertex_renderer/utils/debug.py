"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os
import sys

import numpy as np

DEBUG_ENV_VAR = "VR_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message to stderr if debug mode is enabled."""
    if is_debug_enabled():
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)


def get_array_stats(values: np.ndarray) -> Tuple[float, float, float]:
    """
    Get min, max, mean statistics over the finite entries of an array.

    Returns:
        (min, max, mean) as floats, NaN for each if nothing is finite
    """
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return float("nan"), float("nan"), float("nan")
    return float(finite.min()), float(finite.max()), float(finite.mean())


def debug_array_info(name: str, values: np.ndarray):
    """Print debug information about an array."""
    if is_debug_enabled():
        mn, mx, mean = get_array_stats(values)
        print(f"[{name}] shape={tuple(values.shape)} dtype={values.dtype} "
              f"min={mn:.4f} max={mx:.4f} mean={mean:.4f}", file=sys.stderr)
