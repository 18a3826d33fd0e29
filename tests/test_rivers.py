from genesis_world.rivers import (
    RiverNetwork,
    RiverPath,
    RiverSegment,
    RiverSettings,
    WaterType,
)


def test_settings_defaults():
    settings = RiverSettings()
    assert settings.stream_threshold == 50
    assert settings.major_river_threshold == 500
    assert settings.max_river_width == 20.0


def test_water_type_values():
    assert int(WaterType.NONE) == 0
    assert int(WaterType.OCEAN) == 4
    assert WaterType(2) is WaterType.RIVER


def test_resize_fills_defaults():
    net = RiverNetwork()
    net.resize(4, 3)
    assert (net.width, net.depth) == (4, 3)
    assert len(net.cell_water_type) == 12
    assert all(w is WaterType.NONE for w in net.cell_water_type)
    assert net.cell_river_width == [0.0] * 12
    assert net.cell_surface_height == [0.0] * 12


def test_resize_keeps_existing_cells():
    net = RiverNetwork()
    net.resize(2, 2)
    net.cell_water_type[1] = WaterType.RIVER
    net.cell_river_width[1] = 3.5
    net.resize(3, 3)
    assert net.cell_water_type[1] is WaterType.RIVER
    assert net.cell_river_width[1] == 3.5
    assert len(net.cell_surface_height) == 9
    net.resize(1, 1)
    assert len(net.cell_water_type) == 1


def test_clear_resets_cells_and_collections():
    net = RiverNetwork()
    net.resize(3, 2)
    net.cell_water_type[4] = WaterType.LAKE
    net.cell_surface_height[4] = 7.0
    net.segments.append(RiverSegment((1, 1), 2.0, 1.0, 5.0, WaterType.STREAM, 60))
    net.rivers.append(RiverPath(segment_indices=[0]))
    net.clear()
    assert net.segments == []
    assert net.rivers == []
    assert all(w is WaterType.NONE for w in net.cell_water_type)
    assert net.cell_surface_height == [0.0] * 6
    assert (net.width, net.depth) == (3, 2)


def test_index_is_row_major_bijection():
    net = RiverNetwork()
    net.resize(5, 4)
    indices = [net.index(x, z) for z in range(4) for x in range(5)]
    assert indices == list(range(20))


def test_in_bounds():
    net = RiverNetwork()
    net.resize(5, 4)
    assert net.in_bounds(0, 0)
    assert net.in_bounds(4, 3)
    assert not net.in_bounds(5, 0)
    assert not net.in_bounds(0, 4)
    assert not net.in_bounds(-1, 2)


def test_segment_default_terminus():
    seg = RiverSegment((0, 0), 1.0, 0.5, 2.0, WaterType.RIVER, 600)
    assert seg.downstream_index == -1
    path = RiverPath()
    assert path.segment_indices == []
    assert path.terminus_type is WaterType.NONE