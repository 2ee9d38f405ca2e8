"""
Color raster reader (PPM), read-only.

This module provides:
    • read_color(path) → (red, green, blue) Rasters

Header handling is deliberately simple:
    • "P6" on line 1 selects the binary variant, anything else is read as
      ASCII (the "P3" token itself is not checked)
    • at most ONE comment line before the dimensions is skipped
    • exactly ONE line after the dimensions (normally maxval) is skipped

Known limitation: a file with more than one comment / header line around
the dimensions desynchronizes the parser; it is then rejected as
FORMAT_ERROR or TRUNCATED_DATA rather than decoded.

Samples are interleaved R, G, B per pixel. Data after the last needed
sample is ignored.
"""

import logging
from typing import Tuple

from models.raster import Raster
from models.result import CodecResult, ErrorKind
from utils.netpbm import (
    allocate_samples,
    fill_binary_samples,
    fill_text_samples,
    parse_dimensions,
    read_line,
    report_failure,
)

logger = logging.getLogger(__name__)

MAGIC_BINARY = b"P6"
CHANNELS = 3


def read_color(path) -> CodecResult:
    """
    Decodes a P3 / P6 file into three Rasters owned by the caller.

    The value of a successful result is the tuple (red, green, blue).
    On failure no channel is returned.
    """
    try:
        fp = open(path, "rb")
    except OSError as exc:
        return report_failure(logger, ErrorKind.FILE_NOT_FOUND,
                              f"Error reading the file: {exc.strerror}", path)

    with fp:
        binary = read_line(fp)[:2] == MAGIC_BINARY

        line = read_line(fp)
        if line.startswith(b"#"):
            line = read_line(fp)

        dims = parse_dimensions(line)
        if dims is None or dims[0] <= 0 or dims[1] <= 0:
            return report_failure(logger, ErrorKind.FORMAT_ERROR,
                                  "Missing or invalid image dimensions", path)
        width, height = dims

        read_line(fp)  # presumed max value

        needed = width * height * CHANNELS
        try:
            samples = allocate_samples(needed)
        except MemoryError:
            return report_failure(logger, ErrorKind.ALLOCATION_FAILURE,
                                  f"Memory allocation failure for {width}x{height} image", path)

        body = fp.read()

    if binary:
        read = fill_binary_samples(body, samples)
    else:
        read = fill_text_samples(body, samples)

    if read < needed:
        return report_failure(
            logger, ErrorKind.TRUNCATED_DATA,
            f"Error reading the image data: expected {needed} samples, got {read}",
            path,
        )

    channels = split_channels(samples, width, height)
    logger.debug("Read %dx%d %s image from %s", width, height, "P6" if binary else "P3", path)
    return CodecResult.success(channels)


def split_channels(samples, width: int, height: int) -> Tuple[Raster, Raster, Raster]:
    """
    De-interleaves R,G,B samples into three independent Rasters.
    """
    planes = samples.reshape(height, width, CHANNELS)
    return tuple(Raster(width, height, planes[:, :, k].copy()) for k in range(CHANNELS))
