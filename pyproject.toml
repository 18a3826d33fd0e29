[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genesis-world"
version = "0.1.0"
description = "Procedural world building blocks: cameras, lighting, entity components, drainage and river data, vegetation spawning, heightmap previews, terrain intent and GPU setup choices."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["procedural", "terrain", "3d", "rendering", "camera", "lighting", "rivers", "vegetation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["genesis_world"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
