import pytest

from genesis_world.gpu_device import (
    DeviceSelectionError,
    PhysicalDeviceInfo,
    QueueFamily,
    QueueFamilyIndices,
    find_queue_families,
    is_device_suitable,
    missing_extensions,
    pick_physical_device,
)
from genesis_world.gpu_selection import PresentMode, SurfaceFormat

REQUIRED = ["VK_KHR_swapchain"]


def good_device(name="gpu"):
    return PhysicalDeviceInfo(
        name=name,
        queue_families=[QueueFamily(graphics=True, present=True)],
        extensions=["VK_KHR_swapchain", "other_ext"],
        formats=[SurfaceFormat("B8G8R8A8_SRGB", "SRGB_NONLINEAR")],
        present_modes=[PresentMode.FIFO],
        sampler_anisotropy=True,
    )


def test_empty_indices_incomplete():
    indices = QueueFamilyIndices()
    assert indices.is_complete() is False
    assert indices.unique_families == set()


def test_find_queue_families_single_family():
    indices = find_queue_families([QueueFamily(True, True)])
    assert indices.graphics_family == 0
    assert indices.present_family == 0
    assert indices.shared is True


def test_find_queue_families_separate_families():
    indices = find_queue_families([QueueFamily(True, False), QueueFamily(False, True)])
    assert indices.graphics_family == 0
    assert indices.present_family == 1
    assert indices.unique_families == {0, 1}
    assert indices.shared is False


def test_find_queue_families_stops_when_complete():
    families = [QueueFamily(True, False), QueueFamily(True, True), QueueFamily(True, True)]
    indices = find_queue_families(families)
    assert indices.graphics_family == 1
    assert indices.present_family == 1


def test_find_queue_families_incomplete():
    indices = find_queue_families([QueueFamily(False, True)])
    assert indices.is_complete() is False
    assert indices.graphics_family is None


def test_missing_extensions():
    assert missing_extensions(["a", "b"], ["b", "c"]) == {"a"}
    assert missing_extensions(["a"], ["a"]) == set()


def test_good_device_is_suitable():
    assert is_device_suitable(good_device(), REQUIRED) is True


@pytest.mark.parametrize("change", [
    {"queue_families": [QueueFamily(True, False)]},
    {"extensions": ["other_ext"]},
    {"formats": []},
    {"present_modes": []},
    {"sampler_anisotropy": False},
])
def test_unsuitable_devices(change):
    device = good_device()
    for key, value in change.items():
        setattr(device, key, value)
    assert is_device_suitable(device, REQUIRED) is False


def test_pick_first_suitable():
    bad = good_device("bad")
    bad.sampler_anisotropy = False
    chosen = pick_physical_device([bad, good_device("first"), good_device("second")], REQUIRED)
    assert chosen.name == "first"


def test_pick_no_devices_raises():
    with pytest.raises(DeviceSelectionError):
        pick_physical_device([], REQUIRED)


def test_pick_none_suitable_raises():
    bad = good_device("bad")
    bad.extensions = []
    with pytest.raises(DeviceSelectionError, match="suitable"):
        pick_physical_device([bad], REQUIRED)