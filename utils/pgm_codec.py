"""
Grayscale raster codec (PGM).

This module provides:
    • read_grayscale(path)         P2 (ASCII) or P5 (binary) → Raster
    • write_grayscale(path, raster)  Raster → P5

Header grammar shared by both variants:

    P2 | P5                 magic, first two characters of line 1
    # ...                   any number of comment lines
    <width> <height>
    <maxval>                consumed, not validated
    <samples>               exactly width*height of them

Decoding is all-or-nothing: every failure returns a failed CodecResult and
no partially filled Raster ever reaches the caller.
"""

import logging
from pathlib import Path

from config import PGM_COMMENT, PGM_MAX_VALUE
from models.raster import Raster
from models.result import CodecResult, ErrorKind
from utils.netpbm import (
    allocate_samples,
    fill_binary_samples,
    fill_text_samples,
    parse_dimensions,
    read_line,
    report_failure,
    skip_comment_lines,
)

logger = logging.getLogger(__name__)

MAGIC_TEXT = b"P2"
MAGIC_BINARY = b"P5"


# -------------------------------------------------------------------------
#  READING
# -------------------------------------------------------------------------

def read_grayscale(path) -> CodecResult:
    """
    Decodes a P2 or P5 file into a new Raster owned by the caller.

    Failure kinds:
        FILE_NOT_FOUND      path missing or unopenable
        FORMAT_ERROR        magic is neither P2 nor P5, or bad dimensions
        TRUNCATED_DATA      sample count differs from width*height
        ALLOCATION_FAILURE  sample buffer could not be allocated
    """
    try:
        fp = open(path, "rb")
    except OSError as exc:
        return report_failure(logger, ErrorKind.FILE_NOT_FOUND,
                              f"Error reading the file: {exc.strerror}", path)

    with fp:
        magic = read_line(fp)[:2]
        if magic not in (MAGIC_TEXT, MAGIC_BINARY):
            return report_failure(logger, ErrorKind.FORMAT_ERROR,
                                  "The file is not in PGM format", path)

        dims = parse_dimensions(skip_comment_lines(fp))
        if dims is None or dims[0] <= 0 or dims[1] <= 0:
            return report_failure(logger, ErrorKind.FORMAT_ERROR,
                                  "Missing or invalid image dimensions", path)
        width, height = dims

        read_line(fp)  # max value, not validated

        try:
            samples = allocate_samples(width * height)
        except MemoryError:
            return report_failure(logger, ErrorKind.ALLOCATION_FAILURE,
                                  f"Memory allocation failure for {width}x{height} image", path)

        body = fp.read()

    if magic == MAGIC_TEXT:
        read = fill_text_samples(body, samples)
    else:
        read = fill_binary_samples(body, samples)

    if read != width * height:
        return report_failure(
            logger, ErrorKind.TRUNCATED_DATA,
            f"Error reading the image data: expected {width * height} samples, got {read}",
            path,
        )

    logger.debug("Read %dx%d %s image from %s", width, height, magic.decode(), path)
    return CodecResult.success(Raster(width, height, samples))


# -------------------------------------------------------------------------
#  WRITING
# -------------------------------------------------------------------------

def encode_grayscale(raster: Raster, comment: str = PGM_COMMENT) -> bytes:
    """
    Binary P5 encoding with the fixed header.
    """
    header = (
        "P5\n"
        f"{comment}\n"
        f"{raster.width} {raster.height}\n"
        f"{PGM_MAX_VALUE}\n"
    )
    return header.encode("ascii") + raster.tobytes()


def write_grayscale(path, raster: Raster) -> CodecResult:
    """
    Writes `raster` as P5, overwriting `path`.

    The raster is written as is: nothing is checked or rendered first.
    """
    data = encode_grayscale(raster)

    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        return report_failure(logger, ErrorKind.FILE_NOT_FOUND,
                              f"Cannot open file for writing: {exc.strerror}", path)

    logger.debug("Wrote %dx%d image to %s", raster.width, raster.height, path)
    return CodecResult.success()
