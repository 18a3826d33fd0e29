"""Drainage grid data: per-cell flow direction, accumulation, slope and lake flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class FlowDirection(IntEnum):
    """Neighbour a cell drains to (clockwise from east), or a special terminus."""

    EAST = 0
    SOUTH_EAST = 1
    SOUTH = 2
    SOUTH_WEST = 3
    WEST = 4
    NORTH_WEST = 5
    NORTH = 6
    NORTH_EAST = 7

    PIT = 8
    FLAT = 9
    BOUNDARY = 10
    OCEAN = 11

    @property
    def is_neighbor(self) -> bool:
        return self.value < 8


FLOW_OFFSET_X = (1, 1, 0, -1, -1, -1, 0, 1)
FLOW_OFFSET_Z = (0, 1, 1, 1, 0, -1, -1, -1)
FLOW_DISTANCE = (1.0, 1.414, 1.0, 1.414, 1.0, 1.414, 1.0, 1.414)


def neighbor_offset(direction) -> tuple[int, int]:
    """Grid offset (dx, dz) of the neighbour that ``direction`` points to."""
    direction = FlowDirection(direction)
    if not direction.is_neighbor:
        raise ValueError(f"{direction.name} does not point to a neighbour")
    return FLOW_OFFSET_X[direction], FLOW_OFFSET_Z[direction]


def _resized(values: list, size: int, fill) -> list:
    if len(values) >= size:
        return values[:size]
    return values + [fill] * (size - len(values))


@dataclass
class DrainageData:
    """Row-major drainage grids of ``width * depth`` cells."""

    width: int = 0
    depth: int = 0
    flow_direction: list[FlowDirection] = field(default_factory=list)
    flow_accumulation: list[int] = field(default_factory=list)
    slope: list[float] = field(default_factory=list)
    is_lake: list[bool] = field(default_factory=list)

    def resize(self, width, depth):
        """Set grid size, keeping existing cells and filling new ones with defaults."""
        self.width = width
        self.depth = depth
        size = width * depth
        self.flow_direction = _resized(self.flow_direction, size, FlowDirection.PIT)
        self.flow_accumulation = _resized(self.flow_accumulation, size, 0)
        self.slope = _resized(self.slope, size, 0.0)
        self.is_lake = _resized(self.is_lake, size, False)

    def clear(self):
        """Reset every cell to its default, keeping the grid size."""
        self.flow_direction = [FlowDirection.PIT] * len(self.flow_direction)
        self.flow_accumulation = [0] * len(self.flow_accumulation)
        self.slope = [0.0] * len(self.slope)
        self.is_lake = [False] * len(self.is_lake)

    def index(self, x, z) -> int:
        return z * self.width + x

    def in_bounds(self, x, z) -> bool:
        return 0 <= x < self.width and 0 <= z < self.depth