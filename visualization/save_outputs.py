"""
Centralized output-saving utilities for the edge segment pipeline.

This module provides:
    • save_edge_map(path, model)
    • save_segment_mask(path, model)
    • save_mesh(path, model)
    • save_all_outputs(...)

Uses mask_renderer / mesh_exporter and utils.image_io for filesystem handling.
Every function only borrows the model; releasing it stays with the caller.
"""

import os

from models.result import CodecResult
from models.segment import SegmentModel
from utils.image_io import ensure_output_dir, save_image
from visualization.mask_renderer import render_mask
from visualization.mesh_exporter import export_mesh


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_edge_map(path: str, model: SegmentModel) -> CodecResult:
    """
    Saves the mask exactly as the detector left it (soft edge map).
    """
    return save_image(path, model.mask)


def save_segment_mask(path: str, model: SegmentModel) -> CodecResult:
    """
    Renders the segments into the mask, then saves it.
    """
    render_mask(model)
    return save_image(path, model.mask)


def save_mesh(path: str, model: SegmentModel) -> CodecResult:
    """
    Writes the segments as a PLY mesh.
    """
    ensure_output_dir(os.path.dirname(path))
    return export_mesh(path, model)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    model: SegmentModel,
    render: bool = True,
    mesh: bool = False,
) -> bool:
    """
    Saves every output artifact for one processed image.

    Example output:
        <id>_edges.pgm      mask (rendered from segments if render=True)
        <id>_segments.ply   mesh (only if mesh=True)

    Returns True if every file was written.
    """

    ensure_output_dir(output_dir)

    mask_path = f"{output_dir}/{image_id}_edges.pgm"
    if render:
        results = [save_segment_mask(mask_path, model)]
    else:
        results = [save_edge_map(mask_path, model)]

    if mesh:
        results.append(save_mesh(f"{output_dir}/{image_id}_segments.ply", model))

    return all(r.ok for r in results)
