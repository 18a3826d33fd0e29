"""Batching of per-instance transforms and seeded vegetation placement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

import numpy as np

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

TWO_PI = 6.28318530717958647692

INITIAL_INSTANCE_CAPACITY = 10000
MAX_INSTANCES = 100000

# GPU layout of one instance: two vec4 attributes in vertex binding 1.
INSTANCE_BINDING = 1
INSTANCE_STRIDE = 32
INSTANCE_ATTRIBUTES = (
    # (location, byte offset)
    (4, 0),
    (5, 16),
)


@dataclass(frozen=True)
class InstanceData:
    """xyz position with uniform scale in w; Euler rotation with tint in w."""

    position_and_scale: Vec4 = (0.0, 0.0, 0.0, 1.0)
    rotation_and_tint: Vec4 = (0.0, 0.0, 0.0, 1.0)

    @property
    def position(self) -> Vec3:
        x, y, z, _ = self.position_and_scale
        return (x, y, z)

    @property
    def scale(self) -> float:
        return self.position_and_scale[3]

    def as_floats(self) -> tuple[float, ...]:
        return tuple(self.position_and_scale) + tuple(self.rotation_and_tint)


@dataclass
class InstanceBatch:
    """All instances that share one mesh."""

    mesh: Any
    instances: list[InstanceData] = field(default_factory=list)

    @property
    def instance_count(self) -> int:
        return len(self.instances)


class InstanceBatcher:
    """Groups instances by mesh for one frame and flattens them for upload."""

    def __init__(self):
        self._batches: list[InstanceBatch] = []

    @property
    def batches(self) -> tuple[InstanceBatch, ...]:
        return tuple(self._batches)

    def begin_frame(self):
        """Drop every batch gathered for the previous frame."""
        self._batches.clear()

    def _batch_for(self, mesh) -> InstanceBatch:
        for batch in self._batches:
            if batch.mesh is mesh:
                return batch
        batch = InstanceBatch(mesh)
        self._batches.append(batch)
        return batch

    def add_positions(self, mesh, positions: Iterable[Sequence[float]], scale=1.0):
        """Add unrotated, untinted instances at ``positions`` with one scale."""
        positions = list(positions)
        if mesh is None or not positions:
            return
        batch = self._batch_for(mesh)
        for p in positions:
            x, y, z = (float(c) for c in p)
            batch.instances.append(
                InstanceData((x, y, z, float(scale)), (0.0, 0.0, 0.0, 1.0))
            )

    def add_instances(self, mesh, instances: Iterable[InstanceData]):
        """Append prepared instances to the batch of ``mesh``."""
        instances = list(instances)
        if mesh is None or not instances:
            return
        self._batch_for(mesh).instances.extend(instances)

    def collect(self) -> list[InstanceData]:
        """Every instance, batch after batch, in insertion order."""
        return [inst for batch in self._batches for inst in batch.instances]

    def collect_array(self) -> np.ndarray:
        """Instances packed as an ``(n, 8)`` float32 array ready for upload."""
        rows = [inst.as_floats() for inst in self.collect()]
        return np.array(rows, dtype=np.float32).reshape(-1, 8)

    def total_instance_count(self) -> int:
        return sum(batch.instance_count for batch in self._batches)

    def draw_call_count(self) -> int:
        return len(self._batches)


@dataclass(frozen=True)
class VegetationInstance:
    position: Vec3
    scale: float
    rotation: float  # about the Y axis, radians
    mesh_type: int  # 0 = tree, 1 = rock


TREE = 0
ROCK = 1


@dataclass
class SpawnSettings:
    """Densities are instances per unit area."""

    forest_tree_density: float = 0.02
    grassland_tree_density: float = 0.002
    desert_rock_density: float = 0.01
    mountain_rock_density: float = 0.015
    tree_scale_range: tuple[float, float] = (0.8, 1.2)
    rock_scale_range: tuple[float, float] = (0.5, 1.5)
    min_spacing: float = 2.0
    max_slope_for_trees: float = 0.5
    min_height_above_water: float = 1.0


class _MersenneTwister:
    """32-bit MT19937 seeded with a single integer."""

    _N = 624
    _M = 397

    def __init__(self, seed: int):
        state = [seed & 0xFFFFFFFF]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF)
        self._state = state
        self._index = self._N

    def _twist(self):
        mt = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (mt[i] & 0x80000000) | (mt[(i + 1) % n] & 0x7FFFFFFF)
            value = mt[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            mt[i] = value
        self._index = 0

    def next_u32(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y

    def uniform(self, low: float, high: float) -> float:
        """Single-precision uniform value in ``[low, high)``."""
        canonical = np.float32(self.next_u32()) / np.float32(4294967296.0)
        if canonical >= np.float32(1.0):
            canonical = np.nextafter(np.float32(1.0), np.float32(0.0))
        lo, hi = np.float32(low), np.float32(high)
        return float(lo + (hi - lo) * canonical)


class VegetationSpawner:
    """Scatters trees and rocks over a height grid, reproducibly per seed."""

    def __init__(self, settings=None):
        self.settings = settings if settings is not None else SpawnSettings()

    def spawn(self, heightmap, slope_map, width, depth, cell_size,
              chunk_offset, sea_level, seed) -> list[VegetationInstance]:
        """Place at most one tree and one rock per dry cell.

        Cells below ``sea_level + min_height_above_water`` are skipped; trees
        need a slope below ``max_slope_for_trees``. ``slope_map`` may be None.
        """
        s = self.settings
        rng = _MersenneTwister(int(seed))
        ox, oy, oz = (float(c) for c in chunk_offset)
        cell_area = cell_size * cell_size
        tree_chance = s.forest_tree_density * cell_area
        rock_chance = s.mountain_rock_density * cell_area
        threshold = sea_level + s.min_height_above_water
        instances: list[VegetationInstance] = []

        def place(x: int, z: int, height: float, scale_range, mesh_type):
            px = (x + 0.5 + rng.uniform(-0.4, 0.4)) * cell_size
            pz = (z + 0.5 + rng.uniform(-0.4, 0.4)) * cell_size
            t = rng.uniform(0.0, 1.0)
            lo, hi = scale_range
            scale = lo + (hi - lo) * t
            rotation = rng.uniform(0.0, TWO_PI)
            instances.append(VegetationInstance(
                (ox + px, oy + height, oz + pz), scale, rotation, mesh_type))

        for z in range(depth):
            for x in range(width):
                idx = z * width + x
                height = float(heightmap[idx])
                if height < threshold:
                    continue
                slope = 0.0
                if slope_map is not None and idx < len(slope_map):
                    slope = float(slope_map[idx])

                if slope < s.max_slope_for_trees:
                    if rng.uniform(0.0, 1.0) < tree_chance:
                        place(x, z, height, s.tree_scale_range, TREE)

                if rng.uniform(0.0, 1.0) < rock_chance:
                    place(x, z, height, s.rock_scale_range, ROCK)

        return instances


def _finite(values: Iterable[float]) -> bool:
    return all(math.isfinite(v) for v in values)