"""
Visualization Tools

Persists detector output for external viewers:
- Segment mask rendering
- PLY mesh export
- Per-image output saving
"""

from .mask_renderer import render_mask
from .mesh_exporter import export_mesh, build_mesh_lines, pixel_to_plane
from .save_outputs import (
    save_all_outputs,
    save_edge_map,
    save_segment_mask,
    save_mesh,
)

__all__ = [
    "render_mask",
    "export_mesh",
    "build_mesh_lines",
    "pixel_to_plane",
    "save_all_outputs",
    "save_edge_map",
    "save_segment_mask",
    "save_mesh",
]
