"""
Data Models

Defines the core data structures:
- Raster
- Pixel, Segment, SegmentModel
- CodecResult / CodecError / ErrorKind
"""

from .raster import Raster
from .segment import Pixel, Segment, SegmentModel
from .result import CodecError, CodecFailure, CodecResult, ErrorKind

__all__ = [
    "Raster",
    "Pixel",
    "Segment",
    "SegmentModel",
    "CodecError",
    "CodecFailure",
    "CodecResult",
    "ErrorKind",
]
