import cv2
import numpy as np

from models.raster import Raster
from models.segment import SegmentModel


def trace_chains(edge_map, min_length=1):
    """
    Traces the connected edge pixels of a binary map into ordered chains.

    Uses cv2.findContours with CHAIN_APPROX_NONE so every boundary pixel is
    kept. A contour around a one-pixel-wide edge walks out and back over the
    same pixels, and a closed outline yields both an outer and a hole
    contour over the same pixels; every pixel is kept only in the first
    chain that visits it, in first-visit order.

    Parameters
    ----------
    edge_map : np.ndarray
        2D uint8 map, non-zero = edge.
    min_length : int
        Chains with fewer pixels are discarded.

    Returns
    -------
    list[list[tuple[int, int]]]
        (row, col) chains, in OpenCV's contour order.
    """
    binary = np.where(edge_map > 0, 255, 0).astype(np.uint8)

    # [-2] works for both the 2-tuple (OpenCV 4) and 3-tuple (OpenCV 3) API
    contours = cv2.findContours(binary, cv2.RETR_LIST, cv2.CHAIN_APPROX_NONE)[-2]

    chains = []
    seen = set()
    for cnt in contours:
        pts = cnt.reshape(-1, 2)
        chain = [p for p in dict.fromkeys((int(y), int(x)) for x, y in pts) if p not in seen]
        if len(chain) >= min_length:
            chains.append(chain)
            seen.update(chain)

    return chains


def link_edge_map(raster: Raster, width: int, height: int, min_segment_length: int) -> SegmentModel:
    """
    Links an already-binary edge map into edge segments.

    The input edge map (binarized to 0 / 255) becomes the model's initial
    mask; segments shorter than min_segment_length pixels are dropped.

    Parameters
    ----------
    raster : Raster
        Binary edge map, non-zero = edge.
    width, height : int
        Image size, must match the raster.
    min_segment_length : int
        Minimum number of pixels per kept segment.

    Returns
    -------
    SegmentModel
        New model owned by the caller.
    """
    edges = np.where(raster.pixels > 0, 255, 0).astype(np.uint8)

    model = SegmentModel(width, height, mask=Raster(width, height, edges))
    for chain in trace_chains(edges, min_length=max(1, int(min_segment_length))):
        model.add_segment(chain)

    return model
