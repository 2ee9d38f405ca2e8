"""
Detectors Package

Adapters satisfying the detection boundary
    detect(raster, width, height, threshold[, second_threshold]) -> SegmentModel
- Contour detection (Canny + tracing)
- Linking of an existing binary edge map
"""

from .contour_detector import detect
from .edge_linker import link_edge_map, trace_chains

__all__ = [
    "detect",
    "link_edge_map",
    "trace_chains",
]
