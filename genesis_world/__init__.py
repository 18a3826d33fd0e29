"""Procedural world building blocks: cameras, lights, entity components, drainage and river data, vegetation, heightmap previews, terrain intent and GPU setup choices."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "components",
    "drainage",
    "gpu_device",
    "gpu_selection",
    "heightmap",
    "instancing",
    "intent",
    "light",
    "rivers",
]