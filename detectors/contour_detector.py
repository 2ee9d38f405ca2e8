import cv2

from models.raster import Raster
from models.segment import SegmentModel
from detectors.edge_linker import trace_chains


def detect(raster: Raster, width: int, height: int, threshold, second_threshold=None) -> SegmentModel:
    """
    Detects edge segments in a grayscale raster.

    Canny hysteresis on the raw samples (no smoothing beyond Canny's own
    Sobel aperture), then the edge map is traced into pixel chains.

    Parameters
    ----------
    raster : Raster
        Grayscale input image (only borrowed).
    width, height : int
        Image size, must match the raster.
    threshold : float
        High hysteresis threshold.
    second_threshold : float, optional
        Low hysteresis threshold, defaults to threshold / 3.

    Returns
    -------
    SegmentModel
        New model owned by the caller. Its mask holds the Canny edge map
        until render_mask() replaces it.
    """
    low = threshold / 3 if second_threshold is None else second_threshold

    edges = cv2.Canny(raster.pixels, low, threshold)

    model = SegmentModel(width, height, mask=Raster(width, height, edges))
    for chain in trace_chains(edges):
        model.add_segment(chain)

    return model
