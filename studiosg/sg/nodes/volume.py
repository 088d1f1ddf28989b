"""
Объёмы.

StructuredVolume – регулярная сетка вокселей. Воксели читаются numpy
из «сырого» файла и передаются в бекенд как data‑объект один раз
(повторно – только после нового `load`).
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

import numpy as np

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Box3f, Vec3f, Vec3i
from studiosg.sg.nodes.base import ObjectNode
from studiosg.utils.logger import logger


class VoxelType(IntEnum):
    """Коды типов вокселей бекенда."""
    UCHAR = 2500
    SHORT = 3000
    USHORT = 3500
    FLOAT = 6000
    DOUBLE = 7000

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_VOXEL_DTYPES[self])

    @classmethod
    def from_name(cls, name: str) -> "VoxelType":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown voxel type '{name}'") from None


_VOXEL_DTYPES = {
    VoxelType.UCHAR: np.uint8,
    VoxelType.SHORT: np.int16,
    VoxelType.USHORT: np.uint16,
    VoxelType.FLOAT: np.float32,
    VoxelType.DOUBLE: np.float64,
}


class Volume(ObjectNode):
    object_kind = ObjectKind.VOLUME

    def __init__(self, name: str, type_tag: str, subtype: str):
        super().__init__(name, type_tag, subtype)
        self.create_child("visible", "bool", True)


class StructuredVolume(Volume):
    def __init__(self, name: str = "volume", type_tag: str = "structuredRegular",
                 subtype: str = "structuredRegular"):
        super().__init__(name, type_tag, subtype)
        self.create_child("voxelType", "int", int(VoxelType.FLOAT))
        self.create_child("gridOrigin", "vec3f", Vec3f(0.0))
        self.create_child("gridSpacing", "vec3f", Vec3f(1.0))
        self.create_child("dimensions", "vec3i", Vec3i(1))
        self.voxels: np.ndarray = None
        self._data_handle = None

    def set_voxels(self, voxels: np.ndarray) -> None:
        """Подменить воксели (form: dimensions z, y, x)."""
        voxels = np.ascontiguousarray(voxels)
        self.voxels = voxels
        self._data_handle = None
        self._version += 1
        self.mark_as_modified()

    def load(self, path) -> None:
        """Прочитать сырой файл; размер должен совпадать с dimensions."""
        path = Path(path)
        vtype = VoxelType(self["voxelType"].value_as(int))
        dims = self["dimensions"].value_as(Vec3i)
        voxels = np.fromfile(path, dtype=vtype.dtype)
        if voxels.size != dims.product():
            raise ValueError(
                f"{path.name}: expected {dims.product()} voxels of {vtype.name.lower()}, "
                f"got {voxels.size}"
            )
        self.set_voxels(voxels.reshape((dims.z, dims.y, dims.x)))
        logger.info(f"[Volume] Loaded {voxels.size} voxels from {path.name}")

    def local_bounds(self) -> Box3f:
        """origin … origin + spacing·(dimensions − 1)."""
        origin = self["gridOrigin"].value_as(Vec3f).as_np()
        spacing = self["gridSpacing"].value_as(Vec3f).as_np()
        dims = self["dimensions"].value_as(Vec3i).as_np()
        upper = origin + spacing * np.maximum(dims - 1, 0)
        return Box3f(origin, upper)

    def post_commit(self, backend) -> None:
        if self.voxels is not None and self._data_handle is None:
            handle = self.ensure_handle(backend)
            self._data_handle = backend.new_data(self.voxels)
            backend.set_object(handle, "data", self._data_handle)
        super().post_commit(backend)


class StructuredSpherical(StructuredVolume):
    """Сетка в сферических координатах (r, θ, φ)."""

    def __init__(self, name: str = "volume", type_tag: str = "structuredSpherical"):
        super().__init__(name, type_tag, "structuredSpherical")

    def local_bounds(self) -> Box3f:
        # внешний радиус: origin.r + spacing.r·(dims.r − 1)
        r = self["gridOrigin"].value_as(Vec3f).x + \
            self["gridSpacing"].value_as(Vec3f).x * max(self["dimensions"].value_as(Vec3i).x - 1, 0)
        return Box3f((-r, -r, -r), (r, r, r))
