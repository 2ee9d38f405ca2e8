"""
Tests — batch driver (main.process_image / main.main) and output saving.
"""

import logging
import runpy
from pathlib import Path

import numpy as np
import pytest

import config
import main
from logging_config import LOGGER_NAMESPACES, setup_logging
from models.raster import Raster
from utils.image_io import extract_numeric_id, load_images
from utils.pgm_codec import read_grayscale, write_grayscale
from visualization.save_outputs import save_all_outputs


def _write_square(path: Path, size: int = 24) -> Path:
    img = np.zeros((size, size), dtype=np.uint8)
    img[6:18, 6:18] = 220
    write_grayscale(path, Raster(size, size, img))
    return path


def _reset_loggers():
    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def _params(mode):
    params = config.get_active_params()
    params["MODE"] = mode
    params["MIN_SEGMENT_LENGTH"] = 2
    return params


class TestProcessImage:
    def test_bw_mode_writes_binary_mask(self, tmp_path: Path) -> None:
        src = _write_square(tmp_path / "007.pgm")
        out = tmp_path / "out"

        assert main.process_image(str(src), "007", _params(config.MODE_BW), str(out))

        mask = read_grayscale(out / "007_edges.pgm").unwrap()
        assert (mask.width, mask.height) == (24, 24)
        assert set(mask.buffer.tolist()) == {0, 255}
        assert not (out / "007_segments.ply").exists()

    def test_soft_mode_writes_detector_map(self, tmp_path: Path) -> None:
        src = _write_square(tmp_path / "1.pgm")
        out = tmp_path / "out"

        assert main.process_image(str(src), "1", _params(config.MODE_SOFT), str(out))
        assert read_grayscale(out / "1_edges.pgm").unwrap().buffer.any()

    def test_link_mode_writes_mask_and_mesh(self, tmp_path: Path) -> None:
        edge_map = np.zeros((8, 8), dtype=np.uint8)
        edge_map[2, 1:7] = 255
        src = tmp_path / "2.pgm"
        write_grayscale(src, Raster(8, 8, edge_map))
        out = tmp_path / "out"

        assert main.process_image(str(src), "2", _params(config.MODE_LINK), str(out))

        mask = read_grayscale(out / "2_edges.pgm").unwrap()
        assert np.array_equal(mask.pixels, edge_map)
        lines = (out / "2_segments.ply").read_text().splitlines()
        assert "element vertex 6" in lines
        assert "element face 1" in lines
        assert lines[-1] == "6 0 1 2 3 4 5"

    def test_unreadable_image_is_skipped(self, tmp_path: Path, caplog) -> None:
        bad = tmp_path / "bad.pgm"
        bad.write_bytes(b"P5\n4 4\n255\n\x00")

        with caplog.at_level(logging.ERROR):
            ok = main.process_image(str(bad), "bad", _params(config.MODE_BW), str(tmp_path / "out"))

        assert ok is False
        assert "Failed opening" in caplog.text
        assert not (tmp_path / "out").exists()

    def test_unknown_mode(self, tmp_path: Path) -> None:
        src = _write_square(tmp_path / "3.pgm")

        with pytest.raises(ValueError):
            main.process_image(str(src), "3", _params(99), str(tmp_path / "out"))

    def test_handles_released_when_saving_raises(self, tmp_path: Path, monkeypatch) -> None:
        src = _write_square(tmp_path / "4.pgm")
        owned = {}
        real_run_detection = main.run_detection

        def tracking_run_detection(raster, mode, params):
            owned["raster"] = raster
            owned["model"] = real_run_detection(raster, mode, params)
            return owned["model"]

        def failing_save(**kwargs):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(main, "run_detection", tracking_run_detection)
        monkeypatch.setattr(main, "save_all_outputs", failing_save)

        with pytest.raises(RuntimeError):
            main.process_image(str(src), "4", _params(config.MODE_BW), str(tmp_path / "out"))

        assert owned["model"].released
        assert owned["raster"].released

    def test_raster_released_when_detection_raises(self, tmp_path: Path, monkeypatch) -> None:
        src = _write_square(tmp_path / "5.pgm")
        owned = {}

        def failing_run_detection(raster, mode, params):
            owned["raster"] = raster
            raise RuntimeError("detector crashed")

        monkeypatch.setattr(main, "run_detection", failing_run_detection)

        with pytest.raises(RuntimeError):
            main.process_image(str(src), "5", _params(config.MODE_BW), str(tmp_path / "out"))

        assert owned["raster"].released


class TestMain:
    def test_script_run_logs_driver_messages(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "001.pgm").write_bytes(b"XX\n")
        log_file = tmp_path / "run.log"

        monkeypatch.setattr(config, "INPUT_IMAGE_PATTERN", str(tmp_path / "*.pgm"))
        monkeypatch.setattr(config, "OUTPUT_FOLDER", str(tmp_path / "out"))
        monkeypatch.setattr(config, "LOG_FILE", str(log_file))

        try:
            runpy.run_path(main.__file__, run_name="__main__")
        finally:
            _reset_loggers()

        text = log_file.read_text()
        assert " - main - INFO - Processing image 001" in text
        assert " - main - ERROR - Failed opening" in text
        assert "All images processed" in text

    def test_processes_every_matching_file(self, tmp_path: Path, monkeypatch) -> None:
        _write_square(tmp_path / "img_01.pgm")
        _write_square(tmp_path / "img_02.pgm")
        out = tmp_path / "out"
        calls = []

        monkeypatch.setattr(main, "INPUT_IMAGE_PATTERN", str(tmp_path / "*.pgm"))
        monkeypatch.setattr(main, "OUTPUT_FOLDER", str(out))
        monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(main, "process_image",
                            lambda path, image_id, params: calls.append(image_id) or True)

        main.main()

        assert calls == ["01", "02"]
        assert out.is_dir()


class TestHelpers:
    def test_extract_numeric_id_uses_file_name(self) -> None:
        assert extract_numeric_id("images2/038.pgm") == "038"
        assert extract_numeric_id("dir/none.pgm") == "0"

    def test_load_images_skips_failures(self, tmp_path: Path) -> None:
        _write_square(tmp_path / "10.pgm", size=8)
        (tmp_path / "11.pgm").write_bytes(b"JUNK")

        images, names = load_images(str(tmp_path / "*.pgm"))

        assert names == ["10"]
        assert images[0].pixels.shape == (8, 8)

    def test_save_all_outputs_reports_failure(self, make_model, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        model = make_model(2, 2, [[(0, 0)]])

        assert save_all_outputs(str(blocker), "x", model, mesh=True) is False

    def test_setup_logging_installs_handlers(self, tmp_path: Path) -> None:
        log_file = tmp_path / "run.log"

        setup_logging(logging.DEBUG, str(log_file))
        try:
            logging.getLogger("utils.pgm_codec").debug("hello")
        finally:
            _reset_loggers()

        assert "hello" in log_file.read_text()
