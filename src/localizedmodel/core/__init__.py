"""Core utilities shared by the Locale Store and the model layer.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    get_by_path / set_by_path: Path accessor over nested containers
    normalize_path: Split dotted/bracketed paths into segments

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp
from .paths import get_by_path, is_scalar, normalize_path, set_by_path

__all__ = [
    "DepthGuard",
    "depth_clamp",
    "get_by_path",
    "is_scalar",
    "normalize_path",
    "set_by_path",
]
