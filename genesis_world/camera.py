"""Perspective/orthographic camera producing view and projection matrices.

Matrices are numpy 4x4 arrays in row-major mathematical form: a point is
transformed as ``matrix @ (x, y, z, 1)``.
"""

from __future__ import annotations

import math

import numpy as np

_WORLD_UP = (0.0, 1.0, 0.0)
_DEFAULT_ORTHOGRAPHIC_SIZE = 10.0


def _vec3(value) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64).reshape(-1)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array.copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _look_at(eye: np.ndarray, target: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    f = _normalize(target - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def _orthographic(left: float, right: float, bottom: float, top: float,
                  near: float, far: float) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


class Camera:
    """First-person style camera; rotation is Euler degrees (pitch, yaw, roll)."""

    def __init__(self, fov, aspect_ratio, near_clip, far_clip):
        self._fov = float(fov)
        self._aspect_ratio = float(aspect_ratio)
        self._near_clip = float(near_clip)
        self._far_clip = float(far_clip)
        self._orthographic = False
        self._orthographic_size = _DEFAULT_ORTHOGRAPHIC_SIZE
        self._position = np.zeros(3)
        self._rotation = np.zeros(3)
        self._view = np.identity(4)
        self._projection = np.identity(4)
        self._recalculate_projection()
        self._recalculate_view()

    # --- state -----------------------------------------------------------

    @property
    def fov(self) -> float:
        return self._fov

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def near_clip(self) -> float:
        return self._near_clip

    @property
    def far_clip(self) -> float:
        return self._far_clip

    @property
    def is_orthographic(self) -> bool:
        return self._orthographic

    @property
    def orthographic_size(self) -> float:
        return self._orthographic_size

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    # --- configuration ---------------------------------------------------

    def set_perspective(self, fov, aspect_ratio, near_clip, far_clip):
        self._orthographic = False
        self._fov = float(fov)
        self._aspect_ratio = float(aspect_ratio)
        self._near_clip = float(near_clip)
        self._far_clip = float(far_clip)
        self._recalculate_projection()

    def set_orthographic(self, size, near_clip, far_clip):
        self._orthographic = True
        self._orthographic_size = float(size)
        self._near_clip = float(near_clip)
        self._far_clip = float(far_clip)
        self._recalculate_projection()

    def set_position(self, position):
        self._position = _vec3(position)
        self._recalculate_view()

    def set_rotation(self, rotation):
        self._rotation = _vec3(rotation)
        self._recalculate_view()

    def set_aspect_ratio(self, aspect_ratio):
        self._aspect_ratio = float(aspect_ratio)
        self._recalculate_projection()

    def look_at(self, target, up=_WORLD_UP):
        """Point the view at ``target``; rotation is left unchanged."""
        self._view = _look_at(self._position, _vec3(target), _vec3(up))

    # --- basis vectors ---------------------------------------------------

    def forward(self) -> np.ndarray:
        """Viewing direction; at zero rotation this is -Z."""
        yaw = math.radians(self._rotation[1])
        pitch = math.radians(self._rotation[0])
        front = np.array([
            math.sin(yaw) * math.cos(pitch),
            -math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch),
        ])
        return _normalize(front)

    def right(self) -> np.ndarray:
        """Right vector on the XZ plane, depending on yaw only."""
        yaw = math.radians(self._rotation[1])
        return np.array([math.cos(yaw), 0.0, math.sin(yaw)])

    def up(self) -> np.ndarray:
        return _normalize(np.cross(self.right(), self.forward()))

    # --- internals -------------------------------------------------------

    def _recalculate_view(self):
        target = self._position + self.forward()
        self._view = _look_at(self._position, target, np.array(_WORLD_UP))

    def _recalculate_projection(self):
        if self._orthographic:
            half_w = self._orthographic_size * self._aspect_ratio * 0.5
            half_h = self._orthographic_size * 0.5
            projection = _orthographic(-half_w, half_w, -half_h, half_h,
                                       self._near_clip, self._far_clip)
        else:
            projection = _perspective(math.radians(self._fov), self._aspect_ratio,
                                      self._near_clip, self._far_clip)
        # Vulkan clip space has Y pointing down.
        projection[1, 1] *= -1.0
        self._projection = projection