"""Shared fixtures: tiny Netpbm files and segment models."""

from pathlib import Path

import pytest

from models.raster import Raster
from models.segment import SegmentModel


def write_bytes(path: Path, data: bytes) -> Path:
    path.write_bytes(data)
    return path


@pytest.fixture
def p5_2x2(tmp_path: Path) -> Path:
    """2x2 binary PGM with samples [10, 20, 30, 40]."""
    return write_bytes(tmp_path / "tiny.pgm", b"P5\n2 2\n255\n" + bytes([10, 20, 30, 40]))


@pytest.fixture
def make_model():
    """Factory: SegmentModel of the given size with the given chains."""

    def _make(width, height, chains, mask_fill=0):
        mask = Raster(width, height)
        mask.fill(mask_fill)
        model = SegmentModel(width, height, mask=mask)
        for chain in chains:
            model.add_segment(chain)
        return model

    return _make
