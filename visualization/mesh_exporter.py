"""
Exports a SegmentModel as an ASCII PLY point/polyline mesh.

This module provides:
    • pixel_to_plane(r, c, width, height)
    • build_mesh_lines(model)
    • export_mesh(path, model)

Layout:

    ply
    format ascii 1.0
    comment <MESH_COMMENT>
    element vertex <total pixels>
    property float x
    property float y
    property float z
    element face <segments>
    property list uchar int vertex_indices
    end_header
    x 0 z                      one per pixel, segment-then-pixel order
    n i0 i1 ... i(n-1)         one per segment

Pixels lie on the y = 0 plane, centered on the image. Vertex indices are
global: they run over all segments without resetting.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from config import MESH_COMMENT
from models.result import CodecResult, ErrorKind
from models.segment import SegmentModel
from utils.netpbm import report_failure

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#  GEOMETRY
# -------------------------------------------------------------------------

def pixel_to_plane(r: int, c: int, width: int, height: int) -> Tuple[float, float, float]:
    """
    (row, col) → (x, y, z) on the y = 0 plane.

    The center offsets use integer division truncated toward zero,
    not a rounded center: for an odd width 5, column 0 maps to x = -1.5.
    """
    x = c - int(width / 2) + 0.5
    z = r - int(height / 2) + 0.5
    return x, 0.0, z


# -------------------------------------------------------------------------
#  SERIALIZATION
# -------------------------------------------------------------------------

def _header_lines(no_vertices: int, no_faces: int) -> List[str]:
    return [
        "ply",
        "format ascii 1.0",
        f"comment {MESH_COMMENT}",
        f"element vertex {no_vertices}",
        "property float x",
        "property float y",
        "property float z",
        f"element face {no_faces}",
        "property list uchar int vertex_indices",
        "end_header",
    ]


def build_mesh_lines(model: SegmentModel) -> List[str]:
    """
    Builds the complete PLY text as a list of lines (no newlines).

    The vertex and face blocks are produced first; the header counts are
    then taken from them, so header, vertices and faces always agree.
    """
    vertex_lines = []
    face_lines = []

    next_index = 0
    for seg in model.segments:
        indices = []
        for r, c in seg:
            x, _, z = pixel_to_plane(r, c, model.width, model.height)
            vertex_lines.append(f"{x:f} 0 {z:f}")
            indices.append(str(next_index))
            next_index += 1

        face_lines.append(" ".join([str(len(seg))] + indices))

    header = _header_lines(len(vertex_lines), len(face_lines))
    return header + vertex_lines + face_lines


def export_mesh(path, model: SegmentModel) -> CodecResult:
    """
    Writes the model as PLY to `path`, overwriting it.

    The model is only borrowed; it is neither modified nor released.
    """
    lines = build_mesh_lines(model)

    try:
        with open(path, "w", encoding="ascii", newline="\n") as fp:
            fp.write("\n".join(lines))
            fp.write("\n")
    except OSError as exc:
        return report_failure(logger, ErrorKind.FILE_NOT_FOUND,
                              f"Cannot open file for writing: {exc.strerror}", path)

    logger.debug("Exported %d segments to %s", model.no_segments, Path(path).name)
    return CodecResult.success()
