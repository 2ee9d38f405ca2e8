from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from models.raster import Raster


class Pixel(NamedTuple):
    """(row, col) image coordinate."""
    r: int
    c: int


class Segment:
    """
    One traced edge chain: an ordered sequence of pixels.

    Adjacency between consecutive pixels is conventional and not validated.
    """

    def __init__(self, pixels: Iterable[Tuple[int, int]] = ()):
        self.pixels: List[Pixel] = [Pixel(int(r), int(c)) for r, c in pixels]

    @property
    def no_pixels(self) -> int:
        return len(self.pixels)

    def __len__(self):
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    def __getitem__(self, idx):
        return self.pixels[idx]

    def __repr__(self):
        if not self.pixels:
            return "Segment(empty)"
        return f"Segment(n={len(self.pixels)}, start={tuple(self.pixels[0])}, end={tuple(self.pixels[-1])})"


class SegmentModel:
    """
    Output of one detection pass: ordered segments plus a mask raster.

    Iteration contract:
      • segments are visited in insertion order
      • pixels inside a segment are visited in insertion order
      • iter_pixels() yields the flattened segment-then-pixel order

    Both the mask renderer and the mesh exporter rely on this order; vertex
    indices in the exported mesh are positions in iter_pixels().

    Every pixel must lie inside [0, height) x [0, width); add_segment()
    rejects anything outside with ValueError.
    """

    def __init__(self, width: int, height: int, mask: Optional[Raster] = None):
        self.width = int(width)
        self.height = int(height)

        if mask is None:
            mask = Raster(self.width, self.height)
        elif (mask.width, mask.height) != (self.width, self.height):
            raise ValueError(
                f"Mask is {mask.width}x{mask.height}, model is {self.width}x{self.height}"
            )

        self.mask: Optional[Raster] = mask
        self.segments: List[Segment] = []

    # ------------------------------------------------------------
    # Building
    # ------------------------------------------------------------
    def add_segment(self, pixels: Iterable[Tuple[int, int]]) -> Segment:
        segment = pixels if isinstance(pixels, Segment) else Segment(pixels)

        for r, c in segment:
            if not (0 <= r < self.height and 0 <= c < self.width):
                raise ValueError(
                    f"Pixel ({r}, {c}) outside {self.width}x{self.height} image"
                )

        self.segments.append(segment)
        return segment

    # ------------------------------------------------------------
    # Read contract
    # ------------------------------------------------------------
    @property
    def no_segments(self) -> int:
        return len(self.segments)

    @property
    def no_pixels(self) -> int:
        """Total pixel count over all segments."""
        return sum(len(seg) for seg in self.segments)

    def __len__(self):
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def iter_pixels(self) -> Iterator[Pixel]:
        for seg in self.segments:
            yield from seg

    # ------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------
    @property
    def released(self) -> bool:
        return self.mask is None

    def release(self):
        """
        Drop the mask buffer and all segments. Call once, after every
        render / export step for this model is done.
        """
        if self.mask is None:
            raise RuntimeError("SegmentModel released twice")
        self.mask.release()
        self.mask = None
        self.segments = []

    def __repr__(self):
        return f"SegmentModel({self.width}x{self.height}, segments={len(self.segments)})"
