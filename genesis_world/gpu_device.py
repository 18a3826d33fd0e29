"""Physical device selection from what each GPU reports about itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from genesis_world.gpu_selection import PresentMode, SurfaceFormat


class DeviceSelectionError(RuntimeError):
    """No GPU exists, or none meets the renderer's requirements."""


@dataclass(frozen=True)
class QueueFamily:
    """One queue family: whether it does graphics and can present to the surface."""

    graphics: bool = False
    present: bool = False


@dataclass
class QueueFamilyIndices:
    graphics_family: Optional[int] = None
    present_family: Optional[int] = None

    def is_complete(self) -> bool:
        return self.graphics_family is not None and self.present_family is not None

    @property
    def unique_families(self) -> set[int]:
        """Distinct family indices that need a queue; empty until complete."""
        if not self.is_complete():
            return set()
        return {self.graphics_family, self.present_family}

    @property
    def shared(self) -> bool:
        """True when graphics and presentation use the same family."""
        return self.is_complete() and self.graphics_family == self.present_family


@dataclass
class PhysicalDeviceInfo:
    """What a GPU reports: queue families, extensions, surface support, features."""

    name: str
    queue_families: list[QueueFamily] = field(default_factory=list)
    extensions: list[str] = field(default_factory=list)
    formats: list[SurfaceFormat] = field(default_factory=list)
    present_modes: list[PresentMode] = field(default_factory=list)
    sampler_anisotropy: bool = True


def find_queue_families(families: Iterable[QueueFamily]) -> QueueFamilyIndices:
    """Scan families in order, stopping as soon as both roles are filled.

    A later graphics-capable family replaces an earlier one until the search
    stops, so the result is the family at which it completed.
    """
    indices = QueueFamilyIndices()
    for i, family in enumerate(families):
        if family.graphics:
            indices.graphics_family = i
        if family.present:
            indices.present_family = i
        if indices.is_complete():
            break
    return indices


def missing_extensions(required: Iterable[str], available: Iterable[str]) -> set[str]:
    """Required extension names the device does not offer."""
    return set(required) - set(available)


def is_device_suitable(device: PhysicalDeviceInfo, required_extensions: Sequence[str]) -> bool:
    """Complete queues, all extensions, a usable swapchain and anisotropic sampling."""
    indices = find_queue_families(device.queue_families)
    extensions_supported = not missing_extensions(required_extensions, device.extensions)
    swapchain_adequate = False
    if extensions_supported:
        swapchain_adequate = bool(device.formats) and bool(device.present_modes)
    return (indices.is_complete() and extensions_supported
            and swapchain_adequate and device.sampler_anisotropy)


def pick_physical_device(devices: Iterable[PhysicalDeviceInfo],
                         required_extensions: Sequence[str]) -> PhysicalDeviceInfo:
    """First suitable device in the order given.

    Raises DeviceSelectionError when the list is empty or nothing qualifies.
    """
    devices = list(devices)
    if not devices:
        raise DeviceSelectionError("Failed to find GPUs with Vulkan support!")
    for device in devices:
        if is_device_suitable(device, required_extensions):
            return device
    raise DeviceSelectionError("Failed to find a suitable GPU!")