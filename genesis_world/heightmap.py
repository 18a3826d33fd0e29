"""Greyscale RGBA previews of height grids."""

from __future__ import annotations

from typing import Sequence

import numpy as np

_MIN_RANGE = np.float32(0.001)


def _check_size(width: int, height: int) -> tuple[int, int]:
    width, height = int(width), int(height)
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    return width, height


def heightmap_to_rgba(height_data: Sequence[float], width, height,
                      min_height, max_height) -> bytes:
    """Map heights to opaque grey RGBA pixels, row-major.

    Heights are scaled from ``[min_height, max_height]`` to ``[0, 255]`` and
    clamped. A range under 0.001 is treated as 1. Cells beyond the end of
    ``height_data`` read as height 0.
    """
    width, height = _check_size(width, height)
    count = width * height

    heights = np.zeros(count, dtype=np.float32)
    given = np.asarray(height_data, dtype=np.float32).reshape(-1)[:count]
    heights[: given.size] = given

    low = np.float32(min_height)
    span = np.float32(max_height) - low
    if span < _MIN_RANGE:
        span = np.float32(1.0)

    normalized = np.clip((heights - low) / span, np.float32(0.0), np.float32(1.0))
    gray = (normalized * np.float32(255.0)).astype(np.uint8)

    pixels = np.empty((count, 4), dtype=np.uint8)
    pixels[:, 0] = gray
    pixels[:, 1] = gray
    pixels[:, 2] = gray
    pixels[:, 3] = 255
    return pixels.tobytes()


class HeightmapImage:
    """A fixed-size RGBA8 image refreshed from height data or raw pixels."""

    def __init__(self, width, height):
        self._width, self._height = _check_size(width, height)
        self._pixels = bytes(self.byte_size)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def byte_size(self) -> int:
        return self._width * self._height * 4

    @property
    def pixels(self) -> bytes:
        return self._pixels

    def as_array(self) -> np.ndarray:
        """Pixels as a ``(height, width, 4)`` uint8 array."""
        return np.frombuffer(self._pixels, dtype=np.uint8).reshape(
            self._height, self._width, 4).copy()

    def update(self, height_data, min_height, max_height):
        """Replace the pixels with a greyscale rendering of ``height_data``."""
        self._pixels = heightmap_to_rgba(
            height_data, self._width, self._height, min_height, max_height)

    def update_rgba(self, rgba_data):
        """Replace the pixels with raw RGBA bytes; extra bytes are ignored."""
        data = bytes(rgba_data)
        expected = self.byte_size
        if len(data) < expected:
            raise ValueError(
                f"RGBA data size {len(data)} is less than expected {expected}")
        self._pixels = data[:expected]