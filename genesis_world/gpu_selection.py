"""Swapchain and memory selection rules applied to what a GPU reports.

These functions take plain descriptions of surface capabilities, formats,
present modes and memory types, and pick what the renderer should use.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

UINT32_MAX = 0xFFFFFFFF

# Surface format and colour space preferred for presentation.
PREFERRED_FORMAT = "B8G8R8A8_SRGB"
PREFERRED_COLOR_SPACE = "SRGB_NONLINEAR"

# Depth formats in order of preference.
DEPTH_FORMAT_CANDIDATES = ("D32_SFLOAT", "D32_SFLOAT_S8_UINT", "D24_UNORM_S8_UINT")
FALLBACK_DEPTH_FORMAT = "D32_SFLOAT"

# Memory property bits.
MEMORY_DEVICE_LOCAL = 0x1
MEMORY_HOST_VISIBLE = 0x2
MEMORY_HOST_COHERENT = 0x4

# Frames that may be recorded while earlier ones are still on the GPU.
MAX_FRAMES_IN_FLIGHT = 2


@dataclass(frozen=True)
class SurfaceFormat:
    format: str
    color_space: str


class PresentMode(Enum):
    IMMEDIATE = "immediate"
    MAILBOX = "mailbox"
    FIFO = "fifo"
    FIFO_RELAXED = "fifo_relaxed"


@dataclass(frozen=True)
class Extent:
    width: int
    height: int


@dataclass(frozen=True)
class SurfaceCapabilities:
    """Surface limits; a current extent of None or UINT32_MAX width is unset."""

    min_image_count: int
    max_image_count: int  # 0 means no upper limit
    current_extent: Optional[Extent]
    min_image_extent: Extent
    max_image_extent: Extent


def choose_surface_format(formats: Sequence[SurfaceFormat]) -> SurfaceFormat:
    """Prefer sRGB BGRA8 with non-linear sRGB colour space, else the first."""
    formats = list(formats)
    if not formats:
        raise ValueError("surface reports no formats")
    for fmt in formats:
        if fmt.format == PREFERRED_FORMAT and fmt.color_space == PREFERRED_COLOR_SPACE:
            return fmt
    return formats[0]


def choose_present_mode(modes: Iterable[PresentMode]) -> PresentMode:
    """Mailbox when available; FIFO is always supported otherwise."""
    return PresentMode.MAILBOX if PresentMode.MAILBOX in set(modes) else PresentMode.FIFO


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if high < value:
        return high
    return value


def choose_extent(capabilities: SurfaceCapabilities, width, height) -> Extent:
    """Use the surface's fixed extent, or clamp the window size to its limits."""
    current = capabilities.current_extent
    if current is not None and current.width != UINT32_MAX:
        return current
    lo, hi = capabilities.min_image_extent, capabilities.max_image_extent
    return Extent(
        _clamp(int(width), lo.width, hi.width),
        _clamp(int(height), lo.height, hi.height),
    )


def choose_image_count(capabilities: SurfaceCapabilities) -> int:
    """One more than the minimum, capped by the maximum when there is one."""
    count = capabilities.min_image_count + 1
    if 0 < capabilities.max_image_count < count:
        count = capabilities.max_image_count
    return count


def choose_depth_format(supports_depth_attachment: Callable[[str], bool]) -> str:
    """First candidate usable as an optimal-tiling depth attachment."""
    for fmt in DEPTH_FORMAT_CANDIDATES:
        if supports_depth_attachment(fmt):
            return fmt
    return FALLBACK_DEPTH_FORMAT


def find_memory_type(type_filter, memory_type_flags: Sequence[int], properties) -> int:
    """Index of the first allowed memory type having all of ``properties``.

    Raises LookupError when no memory type qualifies.
    """
    for index, flags in enumerate(memory_type_flags):
        if type_filter & (1 << index) and (flags & properties) == properties:
            return index
    raise LookupError("failed to find suitable memory type")


def find_device_local_memory(type_filter, memory_type_flags: Sequence[int]) -> int:
    """First allowed device-local memory type, or 0 when there is none."""
    for index, flags in enumerate(memory_type_flags):
        if type_filter & (1 << index) and flags & MEMORY_DEVICE_LOCAL:
            return index
    return 0