"""
Utility Functions

Provides the Netpbm codecs (grayscale read/write, color read) and the
filesystem helpers used by the batch driver.
"""

from .pgm_codec import read_grayscale, write_grayscale, encode_grayscale
from .ppm_reader import read_color
from .image_io import (
    find_images,
    load_images,
    extract_numeric_id,
    ensure_output_dir,
    save_image,
)

__all__ = [
    "read_grayscale",
    "write_grayscale",
    "encode_grayscale",
    "read_color",
    "find_images",
    "load_images",
    "extract_numeric_id",
    "ensure_output_dir",
    "save_image",
]
