import pytest

from genesis_world.instancing import (
    INSTANCE_STRIDE,
    InstanceBatcher,
    InstanceData,
    SpawnSettings,
    VegetationSpawner,
)


class _FakeMesh:
    pass


def _always_settings(**overrides):
    base = dict(forest_tree_density=1.0, mountain_rock_density=1.0)
    base.update(overrides)
    return SpawnSettings(**base)


def test_add_positions_creates_one_batch_per_mesh():
    batcher = InstanceBatcher()
    tree, rock = _FakeMesh(), _FakeMesh()
    batcher.add_positions(tree, [(1, 2, 3), (4, 5, 6)], 2.0)
    batcher.add_positions(rock, [(7, 8, 9)], 1.0)
    batcher.add_positions(tree, [(0, 0, 0)], 3.0)
    assert batcher.draw_call_count() == 2
    assert batcher.total_instance_count() == 4
    assert batcher.batches[0].mesh is tree
    assert batcher.batches[0].instance_count == 3


def test_add_positions_builds_instance_data():
    batcher = InstanceBatcher()
    mesh = _FakeMesh()
    batcher.add_positions(mesh, [(1.0, 2.0, 3.0)], 2.5)
    (inst,) = batcher.collect()
    assert inst.position_and_scale == (1.0, 2.0, 3.0, 2.5)
    assert inst.rotation_and_tint == (0.0, 0.0, 0.0, 1.0)
    assert inst.position == (1.0, 2.0, 3.0)
    assert inst.scale == 2.5


def test_empty_or_missing_mesh_is_ignored():
    batcher = InstanceBatcher()
    batcher.add_positions(None, [(1, 2, 3)], 1.0)
    batcher.add_positions(_FakeMesh(), [], 1.0)
    batcher.add_instances(None, [InstanceData()])
    batcher.add_instances(_FakeMesh(), [])
    assert batcher.draw_call_count() == 0
    assert batcher.collect() == []


def test_collect_preserves_batch_order():
    batcher = InstanceBatcher()
    a, b = _FakeMesh(), _FakeMesh()
    i1 = InstanceData((1, 0, 0, 1), (0, 0, 0, 1))
    i2 = InstanceData((2, 0, 0, 1), (0, 0, 0, 1))
    i3 = InstanceData((3, 0, 0, 1), (0, 0, 0, 1))
    batcher.add_instances(a, [i1])
    batcher.add_instances(b, [i2])
    batcher.add_instances(a, [i3])
    assert batcher.collect() == [i1, i3, i2]


def test_begin_frame_clears_batches():
    batcher = InstanceBatcher()
    batcher.add_positions(_FakeMesh(), [(0, 0, 0)], 1.0)
    batcher.begin_frame()
    assert batcher.total_instance_count() == 0
    assert batcher.draw_call_count() == 0


def test_collect_array_matches_stride():
    batcher = InstanceBatcher()
    batcher.add_positions(_FakeMesh(), [(1, 2, 3), (4, 5, 6)], 2.0)
    array = batcher.collect_array()
    assert array.shape == (2, 8)
    assert array.nbytes == 2 * INSTANCE_STRIDE
    assert array[1, :4].tolist() == [4.0, 5.0, 6.0, 2.0]


def test_spawn_is_deterministic_per_seed():
    spawner = VegetationSpawner(_always_settings(forest_tree_density=0.3,
                                                 mountain_rock_density=0.3))
    heights = [5.0] * 64
    first = spawner.spawn(heights, None, 8, 8, 1.0, (0, 0, 0), 0.0, 42)
    second = spawner.spawn(heights, None, 8, 8, 1.0, (0, 0, 0), 0.0, 42)
    assert first == second


def test_spawn_skips_underwater_cells():
    spawner = VegetationSpawner(_always_settings())
    heights = [0.5] * 16  # below sea level + min height above water
    assert spawner.spawn(heights, None, 4, 4, 1.0, (0, 0, 0), 0.0, 1) == []


def test_full_density_places_tree_and_rock_per_cell():
    spawner = VegetationSpawner(_always_settings())
    heights = [5.0] * 9
    result = spawner.spawn(heights, None, 3, 3, 1.0, (0, 0, 0), 0.0, 7)
    assert len(result) == 18
    assert [v.mesh_type for v in result[:2]] == [0, 1]
    assert sum(v.mesh_type == 0 for v in result) == 9


def test_steep_slope_blocks_trees_only():
    spawner = VegetationSpawner(_always_settings())
    heights = [5.0] * 4
    slopes = [0.9] * 4
    result = spawner.spawn(heights, slopes, 2, 2, 1.0, (0, 0, 0), 0.0, 3)
    assert len(result) == 4
    assert all(v.mesh_type == 1 for v in result)


def test_spawned_instances_stay_inside_cells_and_ranges():
    settings = _always_settings()
    spawner = VegetationSpawner(settings)
    width, depth, cell = 4, 3, 2.0
    heights = [float(i + 2) for i in range(width * depth)]
    offset = (100.0, 10.0, -50.0)
    result = spawner.spawn(heights, None, width, depth, cell, offset, 0.0, 11)
    for v in result:
        local_x = (v.position[0] - offset[0]) / cell
        local_z = (v.position[2] - offset[2]) / cell
        x, z = int(local_x), int(local_z)
        assert 0 <= x < width and 0 <= z < depth
        assert 0.1 <= local_x - x <= 0.9
        assert 0.1 <= local_z - z <= 0.9
        assert v.position[1] == pytest.approx(offset[1] + heights[z * width + x])
        lo, hi = settings.tree_scale_range if v.mesh_type == 0 else settings.rock_scale_range
        assert lo <= v.scale <= hi
        assert 0.0 <= v.rotation < 6.2832


def test_zero_density_spawns_nothing():
    spawner = VegetationSpawner(SpawnSettings(forest_tree_density=0.0,
                                              mountain_rock_density=0.0))
    heights = [5.0] * 25
    assert spawner.spawn(heights, None, 5, 5, 1.0, (0, 0, 0), 0.0, 9) == []


def test_default_settings_used_when_none_given():
    spawner = VegetationSpawner()
    assert spawner.settings == SpawnSettings()
    assert spawner.settings.forest_tree_density == 0.02
    assert spawner.settings.mountain_rock_density == 0.015