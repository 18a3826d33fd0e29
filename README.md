# genesis-world

Building blocks for procedural low-poly worlds, in pure Python on top of NumPy.
The package holds the parts of a world engine that run without a GPU:

- `genesis_world.camera`: `Camera`, with perspective and orthographic
  projections and FPS-style `forward()`, `right()` and `up()` vectors. Rotation
  is given in Euler degrees (pitch, yaw, roll). Projection matrices have Y
  flipped, as Vulkan-style clip space expects. `look_at(target, up)` points the
  view at a target and leaves the stored rotation as it is.
- `genesis_world.light`: `Light`, `LightType`, `LightSettings` and
  `LightManager`. The manager owns a directional sun, up to `MAX_POINT_LIGHTS`
  (16) point lights and the ambient settings. Lights added past that limit are
  ignored. `set_time_of_day(hours)` wraps the hour into `[0, 24)` and sets the
  sun's direction, colour and intensity and the ambient colour for night,
  dawn/dusk and day.
- `genesis_world.components`: plain entity-component data.
  `TransformComponent` gives a model matrix through `transform()` and also has
  basis vectors. The module also has `TagComponent`, `MeshRendererComponent`,
  `CameraComponent`, `DirectionalLightComponent`, `PointLightComponent`,
  `ProceduralMeshComponent`, `RigidbodyComponent`, `BoxColliderComponent` and
  the `Entity` handle. An entity is valid only with a non-zero id and a scene.
- `genesis_world.drainage`: `FlowDirection` (eight neighbours clockwise from
  east, plus pit, flat, boundary and ocean), `neighbor_offset()` and the
  `DrainageData` grid of flow direction, accumulation, slope and lake flags.
- `genesis_world.rivers`: `WaterType`, `RiverSettings`, `RiverSegment`,
  `RiverPath` and the `RiverNetwork` grid.
- `genesis_world.instancing`: `InstanceBatcher` groups `InstanceData` by mesh
  for each frame. `collect()` flattens the batches and `collect_array()` packs
  them as an `(n, 8)` float32 array. `VegetationSpawner` places trees and rocks
  over a height grid. Placement depends only on the seed, so the same seed
  gives the same result.
- `genesis_world.heightmap`: `heightmap_to_rgba()` and `HeightmapImage` turn
  heights into opaque greyscale RGBA8 pixels.
- `genesis_world.intent`: `TerrainIntent`, eight terrain sliders in `[0, 1]`
  whose equality allows a difference below 1e-4, and `TerrainPreset`.
- `genesis_world.gpu_selection`: the choices made when a swapchain is set up,
  namely `choose_surface_format`, `choose_present_mode`, `choose_extent`,
  `choose_image_count` and `choose_depth_format`, plus the memory type choices
  `find_memory_type` and `find_device_local_memory`.
- `genesis_world.gpu_device`: `find_queue_families`, `missing_extensions`,
  `is_device_suitable` and `pick_physical_device`. These work on
  `PhysicalDeviceInfo` descriptions. `pick_physical_device` raises
  `DeviceSelectionError` when no device qualifies.

## Installation

```
pip install genesis-world
```

## Examples

A camera:

```python
from genesis_world.camera import Camera

camera = Camera(45.0, 16 / 9, 0.1, 1000.0)
camera.set_position((0.0, 10.0, 20.0))
camera.set_rotation((15.0, 0.0, 0.0))   # pitch, yaw, roll in degrees
print(camera.forward())
print(camera.projection_matrix)
```

Lighting through the day:

```python
from genesis_world.light import LightManager

lights = LightManager()
lights.set_time_of_day(18.5)
print(lights.directional_light.color, lights.settings.ambient_color)
```

Spawning vegetation on a heightmap:

```python
from genesis_world.instancing import SpawnSettings, VegetationSpawner

spawner = VegetationSpawner(SpawnSettings())
heights = [5.0] * (32 * 32)
instances = spawner.spawn(heights, None, 32, 32, 1.0, (0.0, 0.0, 0.0), 0.0, 42)
```

A greyscale preview of heights:

```python
from genesis_world.heightmap import HeightmapImage

image = HeightmapImage(4, 4)
image.update([float(i) for i in range(16)], 0.0, 15.0)
print(image.as_array().shape)   # (4, 4, 4)
```

Choosing a present mode and a memory type:

```python
from genesis_world.gpu_selection import (
    MEMORY_HOST_COHERENT, MEMORY_HOST_VISIBLE, PresentMode,
    choose_present_mode, find_memory_type,
)

choose_present_mode([PresentMode.FIFO, PresentMode.MAILBOX])   # PresentMode.MAILBOX
find_memory_type(0b11, [0x1, 0x6], MEMORY_HOST_VISIBLE | MEMORY_HOST_COHERENT)   # 1
```

## What the package does not do

The package draws nothing. It opens no window, talks to no GPU and has no
shaders. The selection functions only decide among descriptions that the caller
supplies. The package has no mesh geometry and no generators for cubes, trees,
rocks, water planes or lake surfaces. `DrainageData` and `RiverNetwork` only
hold data: the package does not compute flow directions, flow accumulation or
rivers from a heightmap. Likewise, `TerrainIntent` is not turned into generator
settings, and no presets come with it. There is no command-line program.

## Running the tests

```
pip install "genesis-world[test]"
pytest
```