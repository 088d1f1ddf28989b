"""
Arcball‑камера для автоматического кадрирования мира.

По границам мира ставит взгляд на центр box‑а с расстояния, равного
длине его диагонали. Состояния камеры (center, distance, rotation)
можно прочитать из внешнего `cams.json` один раз при старте.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import numpy as np

from studiosg.math import Box3f, Quat, Vec2i, Vec3f
from studiosg.utils.logger import logger


@dataclass
class CameraState:
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    distance: float = 1.0
    rotation: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_dict(cls, data: dict) -> "CameraState":
        return cls(
            center=tuple(float(v) for v in data.get("center", (0.0, 0.0, 0.0))),
            distance=float(data.get("distance", 1.0)),
            rotation=tuple(float(v) for v in data.get("rotation", (0.0, 0.0, 0.0, 1.0))),
        )

    def to_dict(self) -> dict:
        return {"center": list(self.center), "distance": self.distance,
                "rotation": list(self.rotation)}


class ArcballCamera:
    def __init__(self, world_bounds: Box3f, window_size=(1024, 768)):
        self.window_size = Vec2i(window_size)
        if world_bounds is None or world_bounds.is_empty:
            world_bounds = Box3f((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
        diag = world_bounds.size.as_np()
        # плоский box не должен давать нулевую дистанцию
        diag = np.maximum(diag, 0.3 * np.linalg.norm(diag))
        distance = float(np.linalg.norm(diag)) or 1.0
        self._state = CameraState(world_bounds.center.to_tuple(), distance)
        self._rotation = Quat()

    # -----------------------------------------------------------------
    def _rotate(self, v) -> Vec3f:
        m = self._rotation.to_mat4()[:3, :3]
        return Vec3f(*(m @ np.asarray(v, dtype=np.float32)))

    def eye_pos(self) -> Vec3f:
        return Vec3f(self._state.center) + self._rotate((0.0, 0.0, -self._state.distance))

    def look_dir(self) -> Vec3f:
        return self._rotate((0.0, 0.0, 1.0))

    def up_dir(self) -> Vec3f:
        return self._rotate((0.0, 1.0, 0.0))

    @property
    def aspect(self) -> float:
        return self.window_size.x / self.window_size.y if self.window_size.y else 1.0

    # -----------------------------------------------------------------
    def zoom(self, amount: float) -> None:
        """amount > 0 – приблизиться (дистанция не уходит в ноль)."""
        self._state.distance = max(self._state.distance * (1.0 - amount), 1e-4)

    def orbit(self, axis, angle_deg: float) -> None:
        self._rotation = (Quat.from_axis_angle(axis, angle_deg) * self._rotation).normalized()
        self._state.rotation = self._rotation.to_tuple()

    def set_state(self, state: CameraState) -> None:
        self._state = CameraState(tuple(state.center), float(state.distance), tuple(state.rotation))
        self._rotation = Quat.from_vec4(state.rotation).normalized()

    def state(self) -> CameraState:
        return CameraState(tuple(self._state.center), self._state.distance,
                           self._rotation.to_tuple())

    def apply_to(self, camera_node) -> None:
        """Выставить position/direction/up узла камеры."""
        camera_node["position"] = self.eye_pos()
        camera_node["direction"] = self.look_dir()
        camera_node["up"] = self.up_dir()


def load_camera_states(path) -> List[CameraState]:
    """Список состояний из JSON‑массива; пустой, если файла нет."""
    path = Path(path)
    if not path.is_file():
        return []
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of camera states")
    states = [CameraState.from_dict(d) for d in data]
    logger.info(f"[Camera] Loaded {len(states)} camera state(s) from {path}")
    return states
