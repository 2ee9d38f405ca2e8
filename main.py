import logging

from detectors.contour_detector import detect
from detectors.edge_linker import link_edge_map
from logging_config import setup_logging
from utils.image_io import ensure_output_dir, extract_numeric_id, find_images
from utils.pgm_codec import read_grayscale
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_IMAGE_PATTERN,
    LOG_FILE,
    MODE_BW,
    MODE_LINK,
    MODE_SOFT,
    OUTPUT_FOLDER,
    get_active_params,
)

# not __name__, which is "__main__" when run as a script
logger = logging.getLogger("main")


def process_image(path: str, image_id: str, params=None, output_dir: str = OUTPUT_FOLDER) -> bool:
    """
    Runs the complete pipeline for one image:
      1. Decode the grayscale raster
      2. Detect (soft / BW modes) or link the edge map (linking mode)
      3. Save outputs: mask always, PLY mesh in linking mode
      4. Release the model and the raster

    Returns False if the image could not be read or an output failed.
    """
    params = params or get_active_params()
    mode = params["MODE"]

    logger.info("Processing image %s (%s)", image_id, path)

    # ------------------------------
    # STEP 1 — READ
    # ------------------------------
    result = read_grayscale(path)
    if not result.ok:
        logger.error("Failed opening <%s>, skipping", path)
        return False
    raster = result.value

    logger.info("Working on %dx%d image", raster.width, raster.height)

    try:
        # ------------------------------
        # STEP 2 — DETECTION
        # ------------------------------
        model = run_detection(raster, mode, params)
        logger.info("Detected <%d> edge segments", model.no_segments)

        # ------------------------------
        # STEP 3 — SAVE OUTPUTS
        # ------------------------------
        try:
            ok = save_all_outputs(
                output_dir=output_dir,
                image_id=image_id,
                model=model,
                render=mode != MODE_SOFT,
                mesh=mode == MODE_LINK,
            )
        finally:
            model.release()
    finally:
        raster.release()

    if ok:
        logger.info("Finished %s", image_id)
    return ok


def run_detection(raster, mode, params):
    """
    Builds the SegmentModel for one raster according to the mode.
    """
    if mode == MODE_LINK:
        return link_edge_map(raster, raster.width, raster.height, params["MIN_SEGMENT_LENGTH"])
    if mode in (MODE_SOFT, MODE_BW):
        return detect(
            raster, raster.width, raster.height,
            params["GRADIENT_THRESHOLD"], params["CUTOFF_THRESHOLD"],
        )
    raise ValueError(f"Unknown mode: {mode}")


def main():
    """
    Main entry point:
      - Finds input images
      - Processes each one independently
      - Saves output files
    """
    setup_logging(log_file=LOG_FILE)
    ensure_output_dir(OUTPUT_FOLDER)

    files = find_images(INPUT_IMAGE_PATTERN)
    if not files:
        logger.error("No images matched pattern: %s", INPUT_IMAGE_PATTERN)
        return

    params = get_active_params()
    for path in files:
        process_image(path, extract_numeric_id(path), params)

    logger.info("All images processed")


if __name__ == "__main__":
    main()
