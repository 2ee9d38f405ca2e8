"""
Configuration file for the edge segment I/O pipeline.

Holds file-format constants, detector thresholds and the batch driver
settings. Modules should read tunable values using get_active_params().
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

MODE_SOFT = 0   # write the detector's own edge map
MODE_BW = 1     # render segments into a black/white mask
MODE_LINK = 2   # link a binary edge map, write mask + mesh

MODE = MODE_BW


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_IMAGE_PATTERN = "images/*.pgm"
OUTPUT_FOLDER = "output"

LOG_FILE = None


# ---------------------------------------------------------------
# FILE FORMATS
# ---------------------------------------------------------------

PGM_COMMENT = "# Created by edgeseg"
PGM_MAX_VALUE = 255

MESH_COMMENT = "created by edgeseg"

MASK_FOREGROUND = 255
MASK_BACKGROUND = 0


# ===============================================================
# DETECTOR PARAMETERS
# ===============================================================

GRADIENT_THRESHOLD = 36        # high hysteresis threshold
CUTOFF_THRESHOLD = None        # low threshold, None -> GRADIENT_THRESHOLD / 3
MIN_SEGMENT_LENGTH = 10        # linking mode: shorter chains are dropped


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters for the batch driver.
    """

    params = {
        "MODE": MODE,
        "GRADIENT_THRESHOLD": GRADIENT_THRESHOLD,
        "CUTOFF_THRESHOLD": CUTOFF_THRESHOLD,
        "MIN_SEGMENT_LENGTH": MIN_SEGMENT_LENGTH,
    }

    if params["CUTOFF_THRESHOLD"] is None:
        params["CUTOFF_THRESHOLD"] = params["GRADIENT_THRESHOLD"] / 3

    return params
