"""Entity handle and the plain-data components attached to entities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

Vec3 = tuple[float, float, float]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _euler_to_matrix(euler: Vec3) -> np.ndarray:
    """Rotation matrix of the quaternion built from Euler angles (radians)."""
    cx, cy, cz = (math.cos(a * 0.5) for a in euler)
    sx, sy, sz = (math.sin(a * 0.5) for a in euler)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])


@dataclass
class TagComponent:
    tag: str = ""


@dataclass
class TransformComponent:
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)  # Euler angles in radians
    scale: Vec3 = (1.0, 1.0, 1.0)

    def transform(self) -> np.ndarray:
        """Model matrix: translate * rotate * scale."""
        m = np.identity(4)
        m[:3, :3] = _euler_to_matrix(self.rotation) @ np.diag(self.scale)
        m[:3, 3] = self.position
        return m

    def forward(self) -> np.ndarray:
        pitch, yaw, _ = self.rotation
        return _normalize(np.array([
            math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.cos(yaw) * math.cos(pitch),
        ]))

    def right(self) -> np.ndarray:
        return _normalize(np.cross(self.forward(), np.array([0.0, 1.0, 0.0])))

    def up(self) -> np.ndarray:
        return _normalize(np.cross(self.right(), self.forward()))


@dataclass
class MeshRendererComponent:
    mesh: Any = None
    color: Vec3 = (1.0, 1.0, 1.0)
    visible: bool = True
    cast_shadows: bool = True
    receive_shadows: bool = True


@dataclass
class CameraComponent:
    primary: bool = True
    fixed_aspect_ratio: bool = False
    fov: float = 45.0
    near_clip: float = 0.1
    far_clip: float = 1000.0


@dataclass
class DirectionalLightComponent:
    direction: Vec3 = (-0.2, -1.0, -0.3)
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    cast_shadows: bool = True


@dataclass
class PointLightComponent:
    color: Vec3 = (1.0, 1.0, 1.0)
    intensity: float = 1.0
    radius: float = 10.0


class ProceduralMeshType(Enum):
    NONE = "none"
    TERRAIN = "terrain"
    TREE = "tree"
    ROCK = "rock"
    WATER = "water"


@dataclass
class ProceduralMeshComponent:
    mesh_type: ProceduralMeshType = ProceduralMeshType.NONE
    seed: int = 0
    noise_scale: float = 1.0
    subdivisions: int = 1
    needs_regeneration: bool = True


class BodyType(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    KINEMATIC = "kinematic"


@dataclass
class RigidbodyComponent:
    type: BodyType = BodyType.STATIC
    mass: float = 1.0
    drag: float = 0.0
    angular_drag: float = 0.05
    use_gravity: bool = True


@dataclass
class BoxColliderComponent:
    size: Vec3 = (1.0, 1.0, 1.0)
    offset: Vec3 = (0.0, 0.0, 0.0)
    is_trigger: bool = False


@dataclass(frozen=True, eq=False)
class Entity:
    """Lightweight handle: an id within a scene. Id 0 means no entity."""

    id: int = 0
    scene: Any = None

    def is_valid(self) -> bool:
        return self.id != 0 and self.scene is not None

    def __bool__(self) -> bool:
        return self.is_valid()

    def __int__(self) -> int:
        return self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id and self.scene is other.scene

    def __hash__(self) -> int:
        return hash((self.id, id(self.scene)))