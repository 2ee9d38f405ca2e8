"""
Edge Segment I/O Package

Image I/O and edge-geometry persistence for contour / edge detectors:

- Grayscale PGM (P2 / P5) reading and P5 writing
- Color PPM (P3 / P6) reading
- Segment model (ordered pixel chains + mask)
- Mask rendering and PLY mesh export
- OpenCV-backed detection adapters and a batch driver
"""
__all__ = [
    "config",
    "main",
    "logging_config",
    "detectors",
    "models",
    "utils",
    "visualization",
]
