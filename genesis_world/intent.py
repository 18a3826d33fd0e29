"""High-level terrain intent: eight normalised axes describing a landscape."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

_EPSILON = 0.0001


@dataclass(eq=False)
class TerrainIntent:
    """Each axis lies in [0, 1]; equality tolerates differences under 1e-4."""

    continental_scale: float = 0.5
    elevation_range: float = 0.5
    mountain_coverage: float = 0.5
    mountain_sharpness: float = 0.5
    ruggedness: float = 0.5
    erosion_age: float = 0.5
    river_strength: float = 0.5
    chaos: float = 0.3

    __hash__ = None  # mutable, compared approximately

    def __eq__(self, other):
        if not isinstance(other, TerrainIntent):
            return NotImplemented
        return all(
            abs(getattr(self, f.name) - getattr(other, f.name)) < _EPSILON
            for f in fields(self)
        )


@dataclass
class TerrainPreset:
    """A named intent with a description for display."""

    name: str
    description: str = ""
    intent: TerrainIntent = field(default_factory=TerrainIntent)