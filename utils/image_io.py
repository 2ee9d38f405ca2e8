"""
Image I/O utilities for the batch driver.

This module provides:
    • find_images(path_pattern)
    • load_images(path_pattern)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, raster)

Handles all filesystem interaction in a consistent, testable way.
"""

import glob
import logging
import os
import re
from typing import List, Tuple

from models.raster import Raster
from models.result import CodecResult
from utils.pgm_codec import read_grayscale, write_grayscale

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file name (not the directory).

    Example:
        'images/038.pgm' → '038'
    """
    m = re.search(r'\d+', os.path.basename(filename))
    return m.group(0) if m else "0"


def find_images(path_pattern: str) -> List[str]:
    """
    Sorted list of files matching the glob pattern.
    """
    return sorted(glob.glob(path_pattern))


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_pattern: str) -> Tuple[List[Raster], List[str]]:
    """
    Decodes all grayscale images matching the given glob pattern.

    Files that fail to decode are logged and skipped.

    Returns:
        images:  list of Raster
        names:   list of numeric identifiers extracted from filenames
    """
    images = []
    names = []

    for fname in find_images(path_pattern):
        result = read_grayscale(fname)
        if not result.ok:
            logger.warning("Skipping %s (%s)", fname, result.error.kind.name)
            continue
        images.append(result.value)
        names.append(extract_numeric_id(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, raster: Raster) -> CodecResult:
    """
    Save a raster as binary PGM, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    return write_grayscale(path, raster)
