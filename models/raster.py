from typing import Optional

import numpy as np


class Raster:
    """
    Single-channel 8-bit raster, row-major with the origin at top-left.

    A Raster is an owned buffer handle:
      • decoders allocate it and hand it to the caller
      • renderers / exporters only borrow it
      • the caller releases it exactly once with release()

    Samples live in `pixels` (shape (height, width), dtype uint8);
    `buffer` is the flat length width*height view of the same memory.
    """

    def __init__(self, width: int, height: int, pixels: Optional[np.ndarray] = None):
        self.width = int(width)
        self.height = int(height)

        if pixels is None:
            pixels = np.zeros((self.height, self.width), dtype=np.uint8)
        else:
            pixels = np.asarray(pixels, dtype=np.uint8).reshape(self.height, self.width)

        self._pixels: Optional[np.ndarray] = pixels

    # ------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------
    @classmethod
    def from_buffer(cls, width: int, height: int, buffer) -> "Raster":
        """
        Wrap a flat sample sequence of length width*height.
        """
        if isinstance(buffer, (bytes, bytearray, memoryview)):
            data = np.frombuffer(buffer, dtype=np.uint8)
        else:
            data = np.asarray(buffer, dtype=np.uint8)
        return cls(width, height, data.copy())

    # ------------------------------------------------------------
    # Buffer access
    # ------------------------------------------------------------
    @property
    def pixels(self) -> np.ndarray:
        if self._pixels is None:
            raise RuntimeError("Raster buffer has already been released")
        return self._pixels

    @property
    def buffer(self) -> np.ndarray:
        return self.pixels.reshape(-1)

    @property
    def released(self) -> bool:
        return self._pixels is None

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def fill(self, value: int):
        self.pixels.fill(value)

    def release(self):
        """
        Drop the sample buffer. Releasing twice is a caller bug.
        """
        if self._pixels is None:
            raise RuntimeError("Raster released twice")
        self._pixels = None

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __len__(self):
        return self.width * self.height

    def __repr__(self):
        state = "released" if self.released else "owned"
        return f"Raster({self.width}x{self.height}, {state})"
