"""Scene lights and a day/night cycle driven sun."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

Vec3 = tuple[float, float, float]

MAX_POINT_LIGHTS = 16


class LightType(Enum):
    DIRECTIONAL = "directional"
    POINT = "point"


@dataclass
class Light:
    type: LightType = LightType.DIRECTIONAL
    position: Vec3 = (0.0, 0.0, 0.0)
    direction: Vec3 = (0.0, -1.0, 0.0)
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032
    enabled: bool = True


@dataclass
class LightSettings:
    ambient_color: Vec3 = (0.15, 0.15, 0.2)
    ambient_intensity: float = 1.0
    fog_color: Vec3 = (0.6, 0.7, 0.8)
    fog_density: float = 0.0


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    return (v[0] / length, v[1] / length, v[2] / length)


class LightManager:
    """Holds the sun, a bounded list of point lights and ambient settings."""

    def __init__(self):
        self._directional = Light(
            type=LightType.DIRECTIONAL,
            direction=_normalize((-0.3, -1.0, -0.4)),
            color=(1.0, 0.95, 0.9),
            intensity=1.0,
            enabled=True,
        )
        self._point_lights: list[Light] = []
        self._settings = LightSettings()
        self._time_of_day = 12.0

    @property
    def directional_light(self) -> Light:
        return self._directional

    @property
    def point_lights(self) -> tuple[Light, ...]:
        return tuple(self._point_lights)

    @property
    def settings(self) -> LightSettings:
        return self._settings

    @property
    def time_of_day(self) -> float:
        return self._time_of_day

    def set_directional_light(self, light):
        self._directional = replace(light, type=LightType.DIRECTIONAL)

    def add_point_light(self, light):
        """Add a point light; ignored once MAX_POINT_LIGHTS are present."""
        if len(self._point_lights) < MAX_POINT_LIGHTS:
            self._point_lights.append(replace(light, type=LightType.POINT))

    def remove_point_light(self, index):
        """Remove the light at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._point_lights):
            del self._point_lights[index]

    def clear_point_lights(self):
        self._point_lights.clear()

    def set_ambient_color(self, color):
        self._settings.ambient_color = tuple(float(c) for c in color)

    def set_ambient_intensity(self, intensity):
        self._settings.ambient_intensity = float(intensity)

    def set_time_of_day(self, hours):
        """Set the clock (wrapped into [0, 24)) and move the sun accordingly."""
        t = math.fmod(float(hours), 24.0)
        if t < 0:
            t += 24.0
        self._time_of_day = t
        self._update_sun()

    def _update_sun(self):
        t = self._time_of_day
        sun_angle = (t - 6.0) / 12.0 * 3.14159
        height = math.sin(sun_angle)
        horizontal = math.cos(sun_angle)
        sun = self._directional
        sun.direction = _normalize((-horizontal, -abs(height), -0.3))
        settings = self._settings

        if t < 6.0 or t > 20.0:
            sun.color = (0.2, 0.2, 0.4)
            sun.intensity = 0.2
            settings.ambient_color = (0.05, 0.05, 0.1)
        elif t < 7.0 or t > 19.0:
            k = (t - 6.0) if t < 12.0 else (20.0 - t)
            sun.color = (1.0, 0.6 + k * 0.35, 0.3 + k * 0.6)
            sun.intensity = 0.5 + k * 0.5
            settings.ambient_color = (0.2, 0.15 + k * 0.05, 0.1 + k * 0.1)
        else:
            noon = 1.0 - abs(t - 12.0) / 6.0
            sun.color = (1.0, 0.95 + noon * 0.05, 0.9 + noon * 0.1)
            sun.intensity = 0.8 + noon * 0.2
            settings.ambient_color = (
                0.15 + noon * 0.1,
                0.15 + noon * 0.1,
                0.2 + noon * 0.05,
            )
        settings.ambient_intensity = 1.0