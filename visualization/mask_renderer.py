"""
Rasterizes a SegmentModel into its own mask raster.

This module provides:
    • render_mask(model)

Used by:
    - main.py (BW and linking modes)
    - save_outputs.py
"""

from models.segment import SegmentModel
from config import MASK_BACKGROUND, MASK_FOREGROUND


def render_mask(model: SegmentModel):
    """
    Clears model.mask, then marks every segment pixel as foreground.

    The clear is mandatory: the mask initially holds whatever the detector
    left in it. Nothing else renders implicitly, so a mask written without
    calling this first keeps that stale content.

    Segments are visited in order and pixels in order; overlapping pixels
    are simply written again with the same value.
    """
    mask = model.mask.pixels
    mask.fill(MASK_BACKGROUND)

    for seg in model.segments:
        for r, c in seg:
            mask[r, c] = MASK_FOREGROUND

    return model.mask
