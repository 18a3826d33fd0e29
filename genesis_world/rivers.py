"""River network data: water classification, segments, paths and per-cell grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class WaterType(IntEnum):
    NONE = 0
    STREAM = 1
    RIVER = 2
    LAKE = 3
    OCEAN = 4


@dataclass
class RiverSettings:
    """Thresholds and shape parameters for river generation."""

    stream_threshold: int = 50
    major_river_threshold: int = 500
    river_width_scale: float = 0.1
    min_river_width: float = 1.0
    max_river_width: float = 20.0
    channel_depth: float = 2.0
    bank_slope: float = 0.5
    bed_flatness: float = 0.8
    erosion_multiplier: float = 2.0
    deposition_rate: float = 0.3


@dataclass
class RiverSegment:
    cell: tuple[int, int]
    width: float
    depth: float
    surface_height: float
    type: WaterType
    flow_accum: int
    downstream_index: int = -1  # -1 marks a terminus


@dataclass
class RiverPath:
    segment_indices: list[int] = field(default_factory=list)
    source: tuple[int, int] = (0, 0)
    terminus: tuple[int, int] = (0, 0)
    terminus_type: WaterType = WaterType.NONE
    total_length: float = 0.0
    max_accumulation: int = 0


def _resized(values: list, size: int, fill) -> list:
    if len(values) >= size:
        return values[:size]
    return values + [fill] * (size - len(values))


@dataclass
class RiverNetwork:
    """All rivers of a region plus row-major per-cell grids."""

    segments: list[RiverSegment] = field(default_factory=list)
    rivers: list[RiverPath] = field(default_factory=list)
    cell_water_type: list[WaterType] = field(default_factory=list)
    cell_river_width: list[float] = field(default_factory=list)
    cell_surface_height: list[float] = field(default_factory=list)
    width: int = 0
    depth: int = 0

    def resize(self, width, depth):
        """Set grid size, keeping existing cells and filling new ones with defaults."""
        self.width = width
        self.depth = depth
        size = width * depth
        self.cell_water_type = _resized(self.cell_water_type, size, WaterType.NONE)
        self.cell_river_width = _resized(self.cell_river_width, size, 0.0)
        self.cell_surface_height = _resized(self.cell_surface_height, size, 0.0)

    def clear(self):
        """Drop segments and rivers and reset every cell, keeping the grid size."""
        self.segments.clear()
        self.rivers.clear()
        size = len(self.cell_water_type)
        self.cell_water_type = [WaterType.NONE] * size
        self.cell_river_width = [0.0] * len(self.cell_river_width)
        self.cell_surface_height = [0.0] * len(self.cell_surface_height)

    def index(self, x, z) -> int:
        return z * self.width + x

    def in_bounds(self, x, z) -> bool:
        return 0 <= x < self.width and 0 <= z < self.depth